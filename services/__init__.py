"""
Services package for business logic and simulation services.
"""

from .simulation_service import SimulationService, SimulationNotFoundError, SimulationLimitError

__all__ = [
    'SimulationService',
    'SimulationNotFoundError',
    'SimulationLimitError',
]
