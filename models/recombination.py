"""
Within-host recombination (horizontal gene transfer).
"""

from dataclasses import replace
from typing import List, Sequence, TYPE_CHECKING

from .host import Host
from .individual import Individual, apply_fitness_floor

if TYPE_CHECKING:
    from .stage_context import StageContext


RECOMBINATION_FITNESS_COST = 0.01
TAG_RETENTION_PROBABILITY = 0.5


def recombine(individual: Individual, partner: Individual, ctx: "StageContext") -> Individual:
    """
    Recombine an individual with a partner.

    The new tag set keeps each tag of the union independently with
    probability 0.5; fitness becomes the pair mean minus 0.01. The lineage
    label is left untouched.
    """
    rng = ctx.rng
    # Sorted so that seeded runs do not depend on string hash order
    combined = sorted(individual.mutations | partner.mutations)
    kept = frozenset(tag for tag in combined if rng.random() < TAG_RETENTION_PROBABILITY)

    return replace(
        individual,
        mutations=kept,
        fitness=apply_fitness_floor(
            (individual.fitness + partner.fitness) / 2 - RECOMBINATION_FITNESS_COST
        ),
    )


def _recombine_host(host: Host, ctx: "StageContext") -> Host:
    if host.size <= 1:
        return host

    rng = ctx.rng
    population = host.population
    new_population = []

    for ind in population:
        if rng.random() < ctx.config.recombination_rate:
            # Partners come from the incoming population; self-pairing allowed
            partner = population[rng.integers(0, len(population))]
            new_population.append(recombine(ind, partner, ctx))
        else:
            new_population.append(ind)

    return host.with_population(new_population)


def recombination_round(hosts: Sequence[Host], ctx: "StageContext") -> List[Host]:
    """
    Apply recombination within each host.

    Args:
        hosts: Host list from the previous stage
        ctx: Stage context

    Returns:
        New host list, or the input unchanged when recombination is disabled
    """
    if not ctx.config.enable_recombination:
        return list(hosts)

    return [_recombine_host(host, ctx) for host in hosts]
