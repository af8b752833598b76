"""
Migration of individuals between hosts.
"""

import math
from typing import List, Sequence, TYPE_CHECKING

from .host import Host
from .individual import clone_individual

if TYPE_CHECKING:
    from .stage_context import StageContext


def choose_target_host(source_index: int, host_count: int, rng) -> int:
    """Pick a host uniformly among all hosts other than the source."""
    target = int(rng.integers(0, host_count - 1))
    return target + 1 if target >= source_index else target


def migration_round(hosts: Sequence[Host], ctx: "StageContext") -> List[Host]:
    """
    Move a fraction of each host's population to another host.

    Each source sends ``floor(size * migration_rate)`` clones, sampled with
    replacement from its incoming population, to one randomly chosen target.
    The source then drops the same number of individuals from the end of its
    working population. The dropped individuals are not necessarily the ones
    that were sampled.

    Args:
        hosts: Host list from the previous stage
        ctx: Stage context

    Returns:
        New host list, or the input unchanged when migration is disabled or
        only one host exists
    """
    if not ctx.config.enable_migration or len(hosts) < 2:
        return list(hosts)

    rng = ctx.rng
    working = [[clone_individual(ind) for ind in host.population] for host in hosts]

    for index, host in enumerate(hosts):
        migrants = math.floor(host.size * ctx.config.migration_rate)
        if migrants <= 0:
            continue

        target = choose_target_host(index, len(hosts), rng)
        for i in rng.integers(0, host.size, size=migrants):
            working[target].append(clone_individual(host.population[i]))

        del working[index][max(0, len(working[index]) - migrants):]

    return [host.with_population(population) for host, population in zip(hosts, working)]
