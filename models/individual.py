"""
Individual pathogen cells carried inside a host population.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .mutation import MutationTagFactory


DRUG_RESISTANCE_TAG = "drug_resistance"

MIN_FITNESS = 0.1
MAX_FITNESS = 1.0

# Per-tag fitness cost applied when an individual is created
MUTATION_LOAD_COST = 0.02

RESISTANT_BASE_FITNESS = 0.85
MUTANT_FITNESS_RANGE = (0.7, 1.0)


class Lineage(Enum):
    """Coarse genotype label of an individual."""
    WILDTYPE = "wildtype"
    RESISTANT = "resistant"
    MUTANT = "mutant"


def apply_fitness_floor(fitness: float) -> float:
    """Clamp a fitness value to the viability floor."""
    return max(MIN_FITNESS, fitness)


@dataclass(frozen=True)
class Individual:
    """
    Genotype/phenotype record of a single pathogen.

    Individuals are immutable; stages produce modified copies instead of
    editing them in place, so a host list handed out by the engine can never
    be altered behind its back.

    Attributes:
        lineage: Lineage label (not recomputed from the tag set)
        fitness: Relative reproductive weight in [0.1, 1.0]
        mutations: Set of mutation tags acquired so far
        age: Carried for completeness; no stage advances it
    """

    lineage: Lineage = Lineage.WILDTYPE
    fitness: float = 1.0
    mutations: FrozenSet[str] = field(default_factory=frozenset)
    age: int = 0

    @property
    def is_drug_resistant(self) -> bool:
        """Check whether the individual carries the resistance tag."""
        return DRUG_RESISTANCE_TAG in self.mutations

    @property
    def mutation_count(self) -> int:
        return len(self.mutations)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lineage": self.lineage.value,
            "fitness": round(self.fitness, 3),
            "mutation_count": self.mutation_count,
            "mutations": sorted(self.mutations),
            "age": self.age,
            "display_category": display_category(self),
        }

    def __str__(self) -> str:
        return (f"Individual {self.lineage.value}: fitness={self.fitness:.3f}, "
                f"mutations={self.mutation_count}, age={self.age}")


def create_individual(
    lineage: Lineage = Lineage.WILDTYPE,
    mutations: Optional[Iterable[str]] = None,
    rng: Optional[np.random.Generator] = None,
    tag_factory: Optional["MutationTagFactory"] = None,
) -> Individual:
    """
    Create a fresh individual of the given lineage.

    Resistant individuals start at fitness 0.85 with the resistance tag,
    mutants draw their base fitness uniformly from [0.7, 1.0) and receive one
    new tag. Every tag then costs 0.02 fitness, floored at 0.1.

    Args:
        lineage: Lineage of the new individual
        mutations: Tags inherited at creation
        rng: Random generator (required for mutants)
        tag_factory: Tag source (required for mutants)

    Returns:
        New Individual instance

    Raises:
        ValueError: If a mutant is requested without rng or tag_factory
    """
    tags = set(mutations or ())
    base_fitness = 1.0

    if lineage == Lineage.RESISTANT:
        base_fitness = RESISTANT_BASE_FITNESS
        tags.add(DRUG_RESISTANCE_TAG)
    elif lineage == Lineage.MUTANT:
        if rng is None or tag_factory is None:
            raise ValueError("Creating a mutant requires rng and tag_factory")
        low, high = MUTANT_FITNESS_RANGE
        base_fitness = float(rng.uniform(low, high))
        tags.add(tag_factory.next_tag())

    fitness = apply_fitness_floor(base_fitness - MUTATION_LOAD_COST * len(tags))
    return Individual(lineage=lineage, fitness=fitness, mutations=frozenset(tags), age=0)


def clone_individual(individual: Individual) -> Individual:
    """Return an independent copy of an individual."""
    return replace(individual, mutations=frozenset(individual.mutations))


def display_category(individual: Individual) -> str:
    """
    Classify an individual for rendering.

    The resistance tag wins over the lineage label, so recombinants carrying
    the tag are shown as resistant whatever their lineage says.
    """
    if individual.is_drug_resistant:
        return "resistant"
    if individual.lineage == Lineage.MUTANT:
        return "mutant"
    return "wildtype"
