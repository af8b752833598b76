"""
Shared inputs handed to every stage of a generation.
"""

from dataclasses import dataclass

import numpy as np

from .mutation import MutationTagFactory
from .simulation_config import SimulationConfig


@dataclass
class StageContext:
    """
    Everything a stage may read besides the host list.

    Attributes:
        config: Run configuration
        rng: The engine's single random stream
        generation: Index of the generation being produced
        tag_factory: Source of unique mutation tags
    """
    config: SimulationConfig
    rng: np.random.Generator
    generation: int
    tag_factory: MutationTagFactory
