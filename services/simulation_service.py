"""
Simulation service for managing outbreak simulation engines.
"""

from typing import Dict, Any, List, Optional
from datetime import datetime, timezone
import logging

from config import settings
from models.engine import SimulationEngine
from models.simulation_config import SimulationConfig

logger = logging.getLogger(__name__)


class SimulationNotFoundError(ValueError):
    """Raised when no simulation is registered under the requested id."""


class SimulationLimitError(ValueError):
    """Raised when the registry already holds the maximum number of simulations."""


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SimulationService:
    """
    Registry of live simulations.

    Each simulation owns one SimulationEngine. The service is the only
    caller of the engines and decides when they step; there is no
    background driver.
    """

    def __init__(self, max_simulations: Optional[int] = None):
        self.active_simulations: Dict[str, Dict[str, Any]] = {}
        self.max_simulations = max_simulations or settings.max_active_simulations

    def _get(self, simulation_id: str) -> Dict[str, Any]:
        if simulation_id not in self.active_simulations:
            raise SimulationNotFoundError(f"Simulation {simulation_id} not found")
        return self.active_simulations[simulation_id]

    def create_simulation(
        self,
        simulation_id: str,
        config: Optional[Dict[str, Any]] = None,
        seed: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Create and initialize a new simulation.

        Args:
            simulation_id: Unique identifier for the simulation
            config: Configuration fields; missing ones use defaults
            seed: Optional seed for reproducible runs

        Returns:
            Dictionary containing simulation metadata and initial stats

        Raises:
            ValueError: If the id is taken or the configuration is invalid
            SimulationLimitError: If the registry is full
        """
        if simulation_id in self.active_simulations:
            raise ValueError(f"Simulation {simulation_id} already exists")
        if len(self.active_simulations) >= self.max_simulations:
            logger.warning(f"Rejected simulation {simulation_id}: registry full")
            raise SimulationLimitError(f"Cannot run more than {self.max_simulations} simulations at once")

        simulation_config = SimulationConfig.from_dict(config or {})
        engine = SimulationEngine(config=simulation_config, seed=seed)

        created_at = _now()
        self.active_simulations[simulation_id] = {
            "id": simulation_id,
            "engine": engine,
            "seed": seed,
            "created_at": created_at,
            "updated_at": created_at,
        }
        logger.info(f"Created simulation {simulation_id} (seed={seed})")

        return self.get_simulation_status(simulation_id)

    def step_simulation(self, simulation_id: str, steps: int = 1) -> Dict[str, Any]:
        """
        Advance a simulation by a number of generations.

        Args:
            simulation_id: ID of the simulation
            steps: Number of generations to run

        Returns:
            Final generation and the stats of every generation produced
        """
        sim_data = self._get(simulation_id)
        history = sim_data["engine"].run(steps)
        sim_data["updated_at"] = _now()

        return {
            "simulation_id": simulation_id,
            "generation": sim_data["engine"].generation,
            "history": history,
        }

    def reset_simulation(
        self,
        simulation_id: str,
        config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Reset a simulation to generation 0.

        Args:
            simulation_id: ID of the simulation
            config: Replacement configuration (keeps the current one if None)
        """
        sim_data = self._get(simulation_id)
        engine: SimulationEngine = sim_data["engine"]

        if config is None:
            engine.reset()
        else:
            engine.initialize(SimulationConfig.from_dict(config))
        sim_data["updated_at"] = _now()
        logger.info(f"Reset simulation {simulation_id}")

        return self.get_simulation_status(simulation_id)

    def get_simulation_status(self, simulation_id: str) -> Dict[str, Any]:
        """Get configuration, generation and latest stats of a simulation."""
        sim_data = self._get(simulation_id)
        engine: SimulationEngine = sim_data["engine"]

        return {
            "simulation_id": simulation_id,
            "generation": engine.generation,
            "seed": sim_data["seed"],
            "config": engine.config.to_dict(),
            "stats": engine.current_stats(),
            "created_at": sim_data["created_at"],
            "updated_at": sim_data["updated_at"],
        }

    def get_stats(self, simulation_id: str) -> Dict[str, Any]:
        """Get the latest stats snapshot of a simulation."""
        return {"stats": self._get(simulation_id)["engine"].current_stats()}

    def get_hosts(self, simulation_id: str, limit: Optional[int] = None) -> Dict[str, Any]:
        """
        Get a serialized view of every host for rendering.

        Args:
            simulation_id: ID of the simulation
            limit: Maximum individuals listed per host
        """
        engine: SimulationEngine = self._get(simulation_id)["engine"]
        return {
            "simulation_id": simulation_id,
            "generation": engine.generation,
            "hosts": [host.to_dict(limit=limit) for host in engine.current_hosts()],
        }

    def list_simulations(self) -> List[Dict[str, Any]]:
        """List all simulations with a short summary."""
        summaries = []
        for simulation_id, sim_data in self.active_simulations.items():
            engine: SimulationEngine = sim_data["engine"]
            summaries.append({
                "simulation_id": simulation_id,
                "generation": engine.generation,
                "total_count": engine.current_stats().total_count,
                "created_at": sim_data["created_at"].isoformat(),
                "updated_at": sim_data["updated_at"].isoformat(),
            })
        return summaries

    def delete_simulation(self, simulation_id: str) -> bool:
        """Remove a simulation."""
        self._get(simulation_id)
        del self.active_simulations[simulation_id]
        logger.info(f"Deleted simulation {simulation_id}")
        return True
