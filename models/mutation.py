"""
Mutation stage: resistance acquisition and general point mutations.

Each individual is tested for drug resistance first. Only individuals that
miss the resistance test are tested for a general mutation, so an individual
gains at most one of the two per generation.
"""

from dataclasses import replace
from typing import List, Sequence, TYPE_CHECKING

from .host import Host
from .individual import (
    DRUG_RESISTANCE_TAG, Individual, Lineage, apply_fitness_floor
)

if TYPE_CHECKING:
    from .stage_context import StageContext


RESISTANCE_FITNESS_COST = 0.05
MUTATION_FITNESS_COST = 0.02


class MutationTagFactory:
    """Generates mutation tags that are unique within one engine."""

    def __init__(self, generation: int = 0):
        self.generation = generation
        self._mutation_counter = 0

    def next_tag(self) -> str:
        self._mutation_counter += 1
        return f"mut_{self.generation}_{self._mutation_counter}"

    def reset(self) -> None:
        self.generation = 0
        self._mutation_counter = 0


def _mutate_individual(individual: Individual, ctx: "StageContext") -> Individual:
    rng = ctx.rng

    if rng.random() < ctx.config.drug_resistance_mutation_rate:
        return replace(
            individual,
            lineage=Lineage.RESISTANT,
            mutations=individual.mutations | {DRUG_RESISTANCE_TAG},
            fitness=apply_fitness_floor(individual.fitness - RESISTANCE_FITNESS_COST),
        )

    if rng.random() < ctx.config.mutation_rate:
        return replace(
            individual,
            lineage=Lineage.MUTANT,
            mutations=individual.mutations | {ctx.tag_factory.next_tag()},
            fitness=apply_fitness_floor(individual.fitness - MUTATION_FITNESS_COST),
        )

    return individual


def mutation_round(hosts: Sequence[Host], ctx: "StageContext") -> List[Host]:
    """
    Apply resistance and general mutations to every individual.

    Args:
        hosts: Host list from the previous stage
        ctx: Stage context

    Returns:
        New host list; unmutated individuals are passed through as-is
    """
    return [
        host.with_population(_mutate_individual(ind, ctx) for ind in host.population)
        for host in hosts
    ]
