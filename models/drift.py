"""
Genetic drift with fitness-weighted regrowth.

Each host is first thinned by uniform sampling with replacement into an
intermediate pool, then regrown to its original size by roulette-wheel
sampling from the pool weighted by fitness (Wright-Fisher style).
"""

import math
from typing import List, Sequence, TYPE_CHECKING

import numpy as np

from .host import Host
from .individual import Individual, clone_individual

if TYPE_CHECKING:
    from .stage_context import StageContext


def drift_pool_size(population_size: int, drift_strength: float) -> int:
    """
    Size of the intermediate pool for a population of the given size.

    The half-population term is only a lower bound; with drift strength in
    [0, 1] the first term is at least 0.9 N and normally decides the size.
    """
    return max(
        math.floor(population_size * (1 - drift_strength * 0.1)),
        max(1, math.floor(population_size * 0.5)),
    )


def roulette_indices(weights: np.ndarray, count: int, rng: np.random.Generator) -> np.ndarray:
    """
    Draw ``count`` indices with probability proportional to ``weights``.

    Each draw picks the first index whose cumulative weight reaches a uniform
    point on [0, total). Falls back to uniform draws when the total weight is
    not positive.
    """
    total = float(weights.sum())
    if total <= 0:
        return rng.integers(0, len(weights), size=count)

    cumulative = np.cumsum(weights)
    points = rng.random(count) * total
    indices = np.searchsorted(cumulative, points, side="left")
    return np.minimum(indices, len(weights) - 1)


def _drift_population(population: Sequence[Individual], ctx: "StageContext") -> List[Individual]:
    rng = ctx.rng
    size = len(population)

    pool_size = drift_pool_size(size, ctx.config.drift_strength)
    pool = [clone_individual(population[i]) for i in rng.integers(0, size, size=pool_size)]

    weights = np.array([ind.fitness for ind in pool], dtype=float)
    return [clone_individual(pool[i]) for i in roulette_indices(weights, size, rng)]


def drift_sampling(hosts: Sequence[Host], ctx: "StageContext") -> List[Host]:
    """
    Resample every non-empty host population.

    Args:
        hosts: Host list from the previous stage
        ctx: Stage context

    Returns:
        New host list with unchanged population sizes
    """
    return [
        host.with_population(_drift_population(host.population, ctx)) if host.population else host
        for host in hosts
    ]
