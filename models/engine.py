"""
Generation-stepping engine for the outbreak simulation.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .drift import drift_sampling
from .host import Host
from .migration import migration_round
from .mutation import MutationTagFactory, mutation_round
from .population import PopulationStats, calculate_stats, initialize_hosts, regulate_population
from .recombination import recombination_round
from .selection import drug_selection
from .simulation_config import SimulationConfig
from .stage_context import StageContext
from .transmission import transmission_bottleneck

logger = logging.getLogger(__name__)

Stage = Callable[[Sequence[Host], StageContext], List[Host]]

# Order is fixed: mutate, transmit, treat, drift, recombine, migrate, cap.
STAGE_PIPELINE: Tuple[Stage, ...] = (
    mutation_round,
    transmission_bottleneck,
    drug_selection,
    drift_sampling,
    recombination_round,
    migration_round,
    regulate_population,
)


class SimulationEngine:
    """
    Owns the host list and advances it one generation at a time.

    Every stage receives the complete host list produced by the previous
    stage and returns a new one, so no stage sees a partially rewritten
    generation. Callers only ever get immutable hosts and stats snapshots.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Create an engine.

        Args:
            config: Configuration to initialize with right away (optional)
            seed: Seed for a new PCG64 generator; ignored when rng is given
            rng: Pre-built random generator to draw from
        """
        self.seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.config: Optional[SimulationConfig] = None
        self._hosts: Tuple[Host, ...] = ()
        self._generation = 0
        self._stats = PopulationStats()
        self._tag_factory = MutationTagFactory()

        if config is not None:
            self.initialize(config)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_initialized(self) -> bool:
        return self.config is not None

    def initialize(self, config: SimulationConfig) -> PopulationStats:
        """
        (Re)build the host list from a configuration.

        Args:
            config: Run configuration

        Returns:
            Stats snapshot of the fresh population

        Raises:
            ValueError: If config is not a SimulationConfig
        """
        if not isinstance(config, SimulationConfig):
            raise ValueError("initialize() expects a SimulationConfig instance")

        self.config = config
        self._generation = 0
        self._tag_factory.reset()
        self._hosts = tuple(initialize_hosts(config))
        self._stats = calculate_stats(self._hosts, self._generation)

        logger.info(
            f"Initialized simulation: {config.host_count} hosts x "
            f"{config.population_per_host} individuals"
        )
        return self._stats

    def reset(self) -> PopulationStats:
        """Re-initialize with the current configuration."""
        if self.config is None:
            raise RuntimeError("Engine has not been initialized")
        return self.initialize(self.config)

    def step(self) -> PopulationStats:
        """
        Advance exactly one generation.

        Returns:
            Stats snapshot of the new generation

        Raises:
            RuntimeError: If the engine has not been initialized
        """
        if self.config is None:
            raise RuntimeError("Engine has not been initialized")

        self._tag_factory.generation = self._generation
        ctx = StageContext(
            config=self.config,
            rng=self.rng,
            generation=self._generation,
            tag_factory=self._tag_factory,
        )

        hosts: Sequence[Host] = self._hosts
        for stage in STAGE_PIPELINE:
            hosts = stage(hosts, ctx)

        # Commit only once the whole pipeline has run
        self._hosts = tuple(hosts)
        self._generation += 1
        self._stats = calculate_stats(self._hosts, self._generation)

        logger.debug(
            f"Generation {self._generation}: total={self._stats.total_count}, "
            f"resistant={self._stats.resistant_count}, mutants={self._stats.mutant_count}, "
            f"avg_fitness={self._stats.average_fitness:.3f}, diversity={self._stats.diversity}"
        )
        return self._stats

    def run(self, generations: int) -> List[PopulationStats]:
        """Advance several generations and return every snapshot in order."""
        if generations < 0:
            raise ValueError("Number of generations must be non-negative")
        return [self.step() for _ in range(generations)]

    def current_hosts(self) -> Tuple[Host, ...]:
        """Read-only view of the current hosts."""
        return self._hosts

    def current_stats(self) -> PopulationStats:
        """Stats snapshot of the last completed generation."""
        return self._stats
