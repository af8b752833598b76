"""
Host population construction, capacity regulation and statistics.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from .host import Host
from .individual import Lineage, create_individual
from .simulation_config import SimulationConfig

if TYPE_CHECKING:
    from .stage_context import StageContext


@dataclass(frozen=True)
class PopulationStats:
    """Statistics snapshot of all hosts after a generation."""
    generation: int = 0
    total_count: int = 0
    wildtype_count: int = 0
    resistant_count: int = 0
    mutant_count: int = 0
    average_fitness: float = 0.0
    diversity: int = 0
    host_sizes: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def resistance_frequency(self) -> float:
        """Fraction of individuals labelled resistant."""
        if self.total_count == 0:
            return 0.0
        return self.resistant_count / self.total_count

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["host_sizes"] = list(self.host_sizes)
        return data


def initialize_hosts(config: SimulationConfig) -> List[Host]:
    """
    Create the starting host list.

    Every host holds ``population_per_host`` fresh wild-type individuals.
    """
    return [
        Host(
            id=host_id,
            population=tuple(create_individual(Lineage.WILDTYPE) for _ in range(config.population_per_host)),
        )
        for host_id in range(config.host_count)
    ]


def regulate_population(hosts: Sequence[Host], ctx: "StageContext") -> List[Host]:
    """Cap every host at ``population_per_host`` by keeping the leading individuals."""
    capacity = ctx.config.population_per_host
    return [
        host if host.size <= capacity else host.with_population(host.population[:capacity])
        for host in hosts
    ]


def calculate_stats(hosts: Sequence[Host], generation: int = 0) -> PopulationStats:
    """
    Summarize a host list.

    Diversity is the number of distinct mutation tags present right now,
    recomputed from scratch on every call.

    Args:
        hosts: Host list to summarize
        generation: Generation number recorded in the snapshot

    Returns:
        PopulationStats snapshot
    """
    individuals = [ind for host in hosts for ind in host.population]

    lineage_counts = {lineage: 0 for lineage in Lineage}
    unique_mutations = set()
    for ind in individuals:
        lineage_counts[ind.lineage] += 1
        unique_mutations.update(ind.mutations)

    average_fitness = 0.0
    if individuals:
        average_fitness = round(float(np.mean([ind.fitness for ind in individuals])), 3)

    return PopulationStats(
        generation=generation,
        total_count=len(individuals),
        wildtype_count=lineage_counts[Lineage.WILDTYPE],
        resistant_count=lineage_counts[Lineage.RESISTANT],
        mutant_count=lineage_counts[Lineage.MUTANT],
        average_fitness=average_fitness,
        diversity=len(unique_mutations),
        host_sizes=tuple(host.size for host in hosts),
    )
