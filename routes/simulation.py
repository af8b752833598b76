"""
Simulation API routes for the outbreak simulation.
"""

from fastapi import APIRouter, Body, HTTPException, Query, status
from typing import Dict, Any, Optional
import uuid
from services.simulation_service import (
    SimulationService, SimulationNotFoundError, SimulationLimitError
)
from schemas.simulation import SimulationConfigRequest, SimulationCreateRequest
from utils.data_transform import DataTransformer, ResponseBuilder
from utils.validation import validate_step_count
from config import settings

router = APIRouter(prefix="/api/simulations", tags=["Simulations"])

# Global simulation service instance
simulation_service = SimulationService()


@router.post("/", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_simulation(request: SimulationCreateRequest) -> Dict[str, Any]:
    """
    Create and initialize a new outbreak simulation.

    Args:
        request: Run parameters and optional seed

    Returns:
        Simulation metadata with unique ID, configuration and initial stats
    """
    simulation_id = str(uuid.uuid4())
    try:
        result = simulation_service.create_simulation(
            simulation_id=simulation_id,
            config=request.config_fields(),
            seed=request.seed
        )
    except SimulationLimitError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ResponseBuilder.success(
        data=DataTransformer.format_simulation_data(result),
        message="Simulation created successfully"
    )


@router.get("/", response_model=Dict[str, Any])
async def list_simulations() -> Dict[str, Any]:
    """List all live simulations."""
    simulations = simulation_service.list_simulations()
    return ResponseBuilder.success(
        data={"simulations": simulations, "total": len(simulations)},
        message="Simulations retrieved successfully"
    )


@router.get("/{simulation_id}", response_model=Dict[str, Any])
async def get_simulation_status(simulation_id: str) -> Dict[str, Any]:
    """
    Get configuration, generation and latest stats of a simulation.

    Args:
        simulation_id: ID of the simulation
    """
    try:
        result = simulation_service.get_simulation_status(simulation_id)
    except SimulationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ResponseBuilder.success(
        data=DataTransformer.format_simulation_data(result),
        message="Simulation status retrieved successfully"
    )


@router.post("/{simulation_id}/step", response_model=Dict[str, Any])
async def step_simulation(
    simulation_id: str,
    steps: int = Query(1, ge=1, description="Generations to advance")
) -> Dict[str, Any]:
    """
    Advance a simulation by one or more generations.

    Args:
        simulation_id: ID of the simulation
        steps: Number of generations to run

    Returns:
        Final generation, per-generation stats and metric series
    """
    try:
        validate_step_count(steps)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        result = simulation_service.step_simulation(simulation_id, steps)
    except SimulationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    result["series"] = DataTransformer.stats_history_summary(result["history"])
    return ResponseBuilder.success(
        data=DataTransformer.format_simulation_data(result),
        message=f"Advanced {steps} generation(s)"
    )


@router.post("/{simulation_id}/reset", response_model=Dict[str, Any])
async def reset_simulation(
    simulation_id: str,
    request: Optional[SimulationConfigRequest] = Body(default=None)
) -> Dict[str, Any]:
    """
    Reset a simulation to generation 0.

    Args:
        simulation_id: ID of the simulation
        request: Replacement configuration (optional)
    """
    config = request.model_dump() if request is not None else None
    try:
        result = simulation_service.reset_simulation(simulation_id, config)
    except SimulationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ResponseBuilder.success(
        data=DataTransformer.format_simulation_data(result),
        message="Simulation reset successfully"
    )


@router.get("/{simulation_id}/hosts", response_model=Dict[str, Any])
async def get_simulation_hosts(
    simulation_id: str,
    limit: int = Query(
        settings.default_host_view_limit, ge=0, description="Individuals listed per host"
    )
) -> Dict[str, Any]:
    """
    Get a read-only view of every host population for rendering.

    Args:
        simulation_id: ID of the simulation
        limit: Maximum individuals listed per host
    """
    try:
        result = simulation_service.get_hosts(simulation_id, limit=limit)
    except SimulationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ResponseBuilder.success(data=result, message="Hosts retrieved successfully")


@router.get("/{simulation_id}/stats", response_model=Dict[str, Any])
async def get_simulation_stats(simulation_id: str) -> Dict[str, Any]:
    """Get the latest stats snapshot of a simulation."""
    try:
        result = simulation_service.get_stats(simulation_id)
    except SimulationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ResponseBuilder.success(
        data=DataTransformer.format_simulation_data(result),
        message="Statistics retrieved successfully"
    )


@router.delete("/{simulation_id}", response_model=Dict[str, Any])
async def delete_simulation(simulation_id: str) -> Dict[str, Any]:
    """Delete a simulation."""
    try:
        simulation_service.delete_simulation(simulation_id)
    except SimulationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ResponseBuilder.success(
        data={"simulation_id": simulation_id},
        message="Simulation deleted successfully"
    )
