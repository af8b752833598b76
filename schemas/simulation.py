"""
Pydantic schemas for simulation API requests.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, Optional
from utils.validation import (
    validate_host_count,
    validate_population_per_host,
    validate_rate,
    validate_bottleneck_size,
)


class SimulationConfigRequest(BaseModel):
    """Run parameters; omitted fields use the engine defaults."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "host_count": 3,
                "population_per_host": 100,
                "mutation_rate": 0.05,
                "drug_resistance_mutation_rate": 0.01,
                "transmission_rate": 0.4,
                "bottleneck_size": 10,
                "drug_pressure": 0.7,
                "drift_strength": 0.1,
                "recombination_rate": 0.02,
                "migration_rate": 0.05,
                "enable_recombination": True,
                "enable_migration": True
            }
        },
    )

    host_count: int = Field(default=3, ge=1, description="Number of hosts")
    population_per_host: int = Field(default=100, ge=1, description="Capacity of each host")
    mutation_rate: float = Field(default=0.05, ge=0.0, le=1.0, description="General mutation probability")
    drug_resistance_mutation_rate: float = Field(
        default=0.01, ge=0.0, le=1.0, description="Resistance acquisition probability"
    )
    transmission_rate: float = Field(default=0.4, ge=0.0, le=1.0, description="Per-host transmission probability")
    bottleneck_size: int = Field(default=10, ge=0, description="Individuals moved per transmission")
    drug_pressure: float = Field(default=0.7, ge=0.0, le=1.0, description="Per-host treatment probability")
    drift_strength: float = Field(default=0.1, ge=0.0, le=1.0, description="Drift strength")
    recombination_rate: float = Field(default=0.02, ge=0.0, le=1.0, description="Recombination probability")
    migration_rate: float = Field(default=0.05, ge=0.0, le=1.0, description="Fraction of each host migrating")
    enable_recombination: bool = True
    enable_migration: bool = True

    @field_validator('host_count')
    @classmethod
    def validate_hosts(cls, v):
        return validate_host_count(v)

    @field_validator('population_per_host')
    @classmethod
    def validate_capacity(cls, v):
        return validate_population_per_host(v)

    @field_validator('bottleneck_size')
    @classmethod
    def validate_bottleneck(cls, v):
        return validate_bottleneck_size(v)

    @field_validator(
        'mutation_rate', 'drug_resistance_mutation_rate', 'transmission_rate',
        'drug_pressure', 'drift_strength', 'recombination_rate', 'migration_rate'
    )
    @classmethod
    def validate_rates(cls, v, info):
        return validate_rate(v, info.field_name)


class SimulationCreateRequest(SimulationConfigRequest):
    """Request model for creating a new simulation."""

    seed: Optional[int] = Field(default=None, ge=0, description="Seed for reproducible runs")

    def config_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"seed"})
