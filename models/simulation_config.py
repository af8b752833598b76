"""
Run configuration for the outbreak simulation.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict


RATE_FIELDS = (
    "mutation_rate",
    "drug_resistance_mutation_rate",
    "transmission_rate",
    "drug_pressure",
    "drift_strength",
    "recombination_rate",
    "migration_rate",
)


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration for one simulation run. Immutable once created."""

    # Population structure
    host_count: int = 3
    population_per_host: int = 100

    # Per-individual, per-generation probabilities
    mutation_rate: float = 0.05
    drug_resistance_mutation_rate: float = 0.01

    # Between-host dynamics
    transmission_rate: float = 0.4
    bottleneck_size: int = 10
    migration_rate: float = 0.05

    # Within-host dynamics
    drug_pressure: float = 0.7
    drift_strength: float = 0.1
    recombination_rate: float = 0.02

    enable_recombination: bool = True
    enable_migration: bool = True

    def __post_init__(self):
        """Validate configuration parameters."""
        for name, minimum in (("host_count", 1), ("population_per_host", 1), ("bottleneck_size", 0)):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < minimum:
                raise ValueError(f"{name} must be at least {minimum}, got {value}")

        for name in RATE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")

        for name in ("enable_recombination", "enable_migration"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """
        Build a configuration from a plain dictionary.

        Missing keys fall back to the defaults.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration fields: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
