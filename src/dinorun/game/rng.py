"""Seedable random source shared by everything that spawns obstacles."""

from typing import Optional
import logging

import numpy as np

logger = logging.getLogger(__name__)


class RandomProvider:
    """Bounded integer and float draws from one numpy Generator.

    A session owns a single provider and threads it through every spawn,
    so a fixed seed reproduces the whole obstacle sequence.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reseed(self, seed: Optional[int] = None) -> None:
        """Restart the sequence from a new seed."""
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        logger.debug(f"RandomProvider reseeded: {seed}")

    def range_int(self, low: int, high: int) -> int:
        """Integer in [low, high)."""
        return int(self._rng.integers(low, high))

    def range_float(self, low: float, high: float) -> float:
        """Float in [low, high)."""
        return float(self._rng.uniform(low, high))
