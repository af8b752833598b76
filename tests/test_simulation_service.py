"""
Tests for the simulation service.
"""

import pytest
from models.population import PopulationStats
from services.simulation_service import SimulationLimitError, SimulationNotFoundError


class TestSimulationService:
    """Test simulation registry operations."""

    def test_create_simulation(self, simulation_service):
        """Creating a simulation initializes an engine at generation 0."""
        result = simulation_service.create_simulation("sim-1", {"host_count": 2, "population_per_host": 10}, seed=4)

        assert result["simulation_id"] == "sim-1"
        assert result["generation"] == 0
        assert result["seed"] == 4
        assert result["config"]["host_count"] == 2
        assert isinstance(result["stats"], PopulationStats)
        assert result["stats"].total_count == 20

    def test_create_with_defaults(self, simulation_service):
        """Missing configuration falls back to defaults."""
        result = simulation_service.create_simulation("sim-1")

        assert result["config"]["host_count"] == 3
        assert result["stats"].total_count == 300

    def test_duplicate_id_rejected(self, simulation_service):
        """Ids are unique."""
        simulation_service.create_simulation("sim-1")

        with pytest.raises(ValueError, match="already exists"):
            simulation_service.create_simulation("sim-1")

    def test_invalid_config_rejected(self, simulation_service):
        """Configuration errors propagate as ValueError."""
        with pytest.raises(ValueError):
            simulation_service.create_simulation("sim-1", {"host_count": 0})
        assert "sim-1" not in simulation_service.active_simulations

    def test_registry_limit(self, simulation_service):
        """The registry refuses simulations beyond its limit."""
        for i in range(simulation_service.max_simulations):
            simulation_service.create_simulation(f"sim-{i}", {"population_per_host": 1})

        with pytest.raises(SimulationLimitError):
            simulation_service.create_simulation("one-too-many")

    def test_step_simulation(self, simulation_service):
        """Stepping returns per-generation stats."""
        simulation_service.create_simulation("sim-1", {"population_per_host": 10}, seed=1)

        result = simulation_service.step_simulation("sim-1", steps=3)

        assert result["generation"] == 3
        assert [s.generation for s in result["history"]] == [1, 2, 3]

    def test_unknown_id(self, simulation_service):
        """Unknown ids raise SimulationNotFoundError."""
        with pytest.raises(SimulationNotFoundError):
            simulation_service.step_simulation("missing")
        with pytest.raises(SimulationNotFoundError):
            simulation_service.delete_simulation("missing")

    def test_reset_keeps_or_replaces_config(self, simulation_service):
        """Reset goes back to generation 0 with the old or a new configuration."""
        simulation_service.create_simulation("sim-1", {"population_per_host": 10}, seed=1)
        simulation_service.step_simulation("sim-1", steps=2)

        kept = simulation_service.reset_simulation("sim-1")
        assert kept["generation"] == 0
        assert kept["config"]["population_per_host"] == 10

        replaced = simulation_service.reset_simulation("sim-1", {"host_count": 1, "population_per_host": 5})
        assert replaced["config"]["host_count"] == 1
        assert replaced["stats"].total_count == 5

    def test_get_hosts_limit(self, simulation_service):
        """The hosts view truncates individual listings."""
        simulation_service.create_simulation("sim-1", {"host_count": 2, "population_per_host": 10})

        result = simulation_service.get_hosts("sim-1", limit=3)

        assert len(result["hosts"]) == 2
        assert result["hosts"][0]["size"] == 10
        assert len(result["hosts"][0]["individuals"]) == 3

    def test_list_and_delete(self, simulation_service):
        """Simulations can be listed and removed."""
        simulation_service.create_simulation("a", {"population_per_host": 1})
        simulation_service.create_simulation("b", {"population_per_host": 1})

        assert {s["simulation_id"] for s in simulation_service.list_simulations()} == {"a", "b"}

        assert simulation_service.delete_simulation("a") is True
        assert [s["simulation_id"] for s in simulation_service.list_simulations()] == ["b"]
