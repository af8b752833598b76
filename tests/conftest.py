"""
Pytest fixtures for model, service and API testing.
"""

import pytest
import numpy as np
from fastapi.testclient import TestClient
from main import app
from models.host import Host
from models.individual import Individual, Lineage, DRUG_RESISTANCE_TAG
from models.mutation import MutationTagFactory
from models.simulation_config import SimulationConfig
from models.stage_context import StageContext
from services.simulation_service import SimulationService


# All stochastic processes switched off
QUIET_CONFIG = dict(
    mutation_rate=0.0,
    drug_resistance_mutation_rate=0.0,
    transmission_rate=0.0,
    bottleneck_size=0,
    drug_pressure=0.0,
    drift_strength=0.0,
    recombination_rate=0.0,
    migration_rate=0.0,
    enable_recombination=False,
    enable_migration=False,
)


@pytest.fixture
def client():
    """FastAPI test client fixture."""
    return TestClient(app)


@pytest.fixture
def simulation_service():
    """Clean simulation service fixture."""
    return SimulationService(max_simulations=5)


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(12345)


@pytest.fixture
def quiet_config():
    """Factory for configurations with every process disabled unless overridden."""
    def _make(**overrides):
        params = dict(QUIET_CONFIG)
        params.update(overrides)
        return SimulationConfig(**params)
    return _make


@pytest.fixture
def make_context(rng, quiet_config):
    """Factory for stage contexts sharing the seeded generator."""
    def _make(generation=0, **overrides):
        return StageContext(
            config=quiet_config(**overrides),
            rng=rng,
            generation=generation,
            tag_factory=MutationTagFactory(generation),
        )
    return _make


def wildtype(fitness=1.0):
    return Individual(lineage=Lineage.WILDTYPE, fitness=fitness)


def resistant(fitness=0.95):
    return Individual(
        lineage=Lineage.RESISTANT,
        fitness=fitness,
        mutations=frozenset({DRUG_RESISTANCE_TAG}),
    )


def make_host(host_id, individuals):
    return Host(id=host_id, population=tuple(individuals))


@pytest.fixture(autouse=True)
def clean_simulations():
    """Automatically clean up API simulations around each test."""
    from routes.simulation import simulation_service
    simulation_service.active_simulations.clear()
    yield
    simulation_service.active_simulations.clear()
