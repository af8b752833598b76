"""
Pydantic schemas for request/response validation.
"""

from .simulation import (
    SimulationConfigRequest,
    SimulationCreateRequest,
)

__all__ = [
    "SimulationConfigRequest",
    "SimulationCreateRequest",
] 
