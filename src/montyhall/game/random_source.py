# random_source.py
import logging
from typing import Protocol, Sequence, List, TypeVar, Optional

import numpy as np

from src.montyhall.config.unified_config import UnifiedConfig

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RandomSource(Protocol):
    """
    Source of randomness consumed by the game

    Every random draw in a round goes through this interface, so a fixed seed
    (or a scripted stub) makes a whole batch reproducible.
    """

    def permutation(self, items: Sequence[T]) -> List[T]:
        """Return the items in a uniformly random order"""
        ...

    def choice(self, items: Sequence[T]) -> T:
        """Return one of the items, each with equal probability"""
        ...


class NumpyRandomSource:
    """RandomSource backed by a numpy Generator"""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.generator = np.random.default_rng(seed)

    def permutation(self, items: Sequence[T]) -> List[T]:
        order = self.generator.permutation(len(items))
        return [items[i] for i in order]

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[int(self.generator.integers(len(items)))]

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed})"


def create_random_source(config: UnifiedConfig) -> NumpyRandomSource:
    """
    Build the random source from general.random_seed

    A null seed draws fresh entropy from the OS.
    """
    seed = config.get_section('general', {}).get('random_seed')
    if seed is None:
        logger.info("No random_seed configured - using OS entropy")
    else:
        logger.info(f"Random source seeded with {seed}")
    return NumpyRandomSource(seed)
