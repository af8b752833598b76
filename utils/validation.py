"""
Custom validation utilities for simulation parameters.
"""

from config import settings


def validate_host_count(value: int) -> int:
    """
    Validate the number of hosts is within acceptable limits.

    Args:
        value: Host count to validate

    Returns:
        Validated host count

    Raises:
        ValueError: If host count is invalid
    """
    if value < 1:
        raise ValueError("Host count must be at least 1")
    if value > settings.max_host_count:
        raise ValueError(f"Host count cannot exceed {settings.max_host_count}")
    return value


def validate_population_per_host(value: int) -> int:
    """
    Validate the per-host capacity is within acceptable limits.

    Raises:
        ValueError: If population size is invalid
    """
    if value < 1:
        raise ValueError("Population per host must be at least 1")
    if value > settings.max_population_per_host:
        raise ValueError(f"Population per host cannot exceed {settings.max_population_per_host}")
    return value


def validate_rate(value: float, name: str = "Rate") -> float:
    """
    Validate a per-generation probability.

    Args:
        value: Probability to validate
        name: Human readable parameter name for error messages

    Returns:
        Validated probability

    Raises:
        ValueError: If the value lies outside [0, 1]
    """
    if value < 0.0:
        raise ValueError(f"{name} cannot be negative")
    if value > 1.0:
        raise ValueError(f"{name} cannot exceed 1.0")
    return value


def validate_bottleneck_size(value: int) -> int:
    """
    Validate the transmission bottleneck size.

    A bottleneck larger than the host capacity is allowed; it simply
    replaces the whole receiving population.
    """
    if value < 0:
        raise ValueError("Bottleneck size cannot be negative")
    if value > settings.max_population_per_host:
        raise ValueError(f"Bottleneck size cannot exceed {settings.max_population_per_host}")
    return value


def validate_step_count(value: int) -> int:
    """
    Validate the number of generations requested in one call.

    Raises:
        ValueError: If step count is invalid
    """
    if value < 1:
        raise ValueError("Step count must be at least 1 generation")
    if value > settings.max_steps_per_request:
        raise ValueError(f"Step count cannot exceed {settings.max_steps_per_request} generations")
    return value
