"""
Host container for a pathogen population.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from .individual import Individual


@dataclass(frozen=True)
class Host:
    """
    A named, ordered pathogen population.

    Order matters: transmission and migration evict a suffix of the
    population, regulation keeps a prefix.
    """

    id: int
    population: Tuple[Individual, ...] = field(default_factory=tuple)

    @property
    def size(self) -> int:
        return len(self.population)

    def with_population(self, population: Iterable[Individual]) -> "Host":
        """Return a copy of this host holding a different population."""
        return replace(self, population=tuple(population))

    def to_dict(self, limit: Optional[int] = None) -> Dict[str, Any]:
        """
        Serialize the host for rendering.

        Args:
            limit: Maximum number of individuals to include (None for all)
        """
        shown = self.population if limit is None else self.population[:limit]
        return {
            "id": self.id,
            "size": self.size,
            "individuals": [individual.to_dict() for individual in shown],
            "hidden_count": self.size - len(shown),
        }
