"""
Transmission bottleneck between neighbouring hosts.
"""

from typing import List, Sequence, TYPE_CHECKING

from .host import Host
from .individual import clone_individual

if TYPE_CHECKING:
    from .stage_context import StageContext


def transmission_bottleneck(hosts: Sequence[Host], ctx: "StageContext") -> List[Host]:
    """
    Seed hosts with small random samples taken from their neighbour.

    With probability ``transmission_rate`` a host receives ``bottleneck_size``
    clones drawn with replacement from host ``(index + 1) % host_count`` and
    loses the same number of individuals from the end of its own population.
    All draws read the incoming host list, never a host already rewritten in
    this stage.

    Args:
        hosts: Host list from the previous stage
        ctx: Stage context

    Returns:
        New host list
    """
    if len(hosts) <= 1:
        return list(hosts)

    rng = ctx.rng
    bottleneck_size = ctx.config.bottleneck_size
    result = []

    for index, host in enumerate(hosts):
        if rng.random() >= ctx.config.transmission_rate:
            result.append(host)
            continue

        source = hosts[(index + 1) % len(hosts)]
        if not source.population:
            result.append(host)
            continue

        draws = rng.integers(0, source.size, size=bottleneck_size)
        transmitted = [clone_individual(source.population[i]) for i in draws]

        kept = host.population[:max(0, host.size - bottleneck_size)]
        result.append(host.with_population(kept + tuple(transmitted)))

    return result
