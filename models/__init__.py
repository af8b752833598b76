"""
Models package for the multi-host outbreak simulation.

This package contains the data model and the generation pipeline:
- Individuals, hosts and run configuration
- Mutation, transmission bottleneck and drug selection stages
- Fitness-weighted drift, recombination and migration stages
- Population regulation, statistics and the simulation engine
"""

from .individual import (
    DRUG_RESISTANCE_TAG, Individual, Lineage, clone_individual, create_individual,
    display_category
)
from .host import Host
from .simulation_config import SimulationConfig
from .mutation import MutationTagFactory, mutation_round
from .transmission import transmission_bottleneck
from .selection import drug_selection
from .drift import drift_sampling
from .recombination import recombination_round
from .migration import migration_round
from .population import PopulationStats, calculate_stats, initialize_hosts, regulate_population
from .stage_context import StageContext
from .engine import STAGE_PIPELINE, SimulationEngine

__all__ = [
    # Data model
    "DRUG_RESISTANCE_TAG", "Individual", "Lineage", "clone_individual",
    "create_individual", "display_category", "Host", "SimulationConfig",

    # Stages
    "MutationTagFactory", "mutation_round", "transmission_bottleneck",
    "drug_selection", "drift_sampling", "recombination_round",
    "migration_round", "regulate_population",

    # Engine and statistics
    "PopulationStats", "calculate_stats", "initialize_hosts", "StageContext",
    "STAGE_PIPELINE", "SimulationEngine",
]
