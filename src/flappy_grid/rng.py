"""
rng.py: Uniform integer random source used for obstacle placement.
"""

import random
from typing import Optional


class RandomNumberGenerator:
    """Thin wrapper over random.Random; pass a seed for reproducible gaps."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def range(self, low: int, high: int) -> int:
        """Returns an integer in [low, high)."""
        return self._random.randrange(low, high)
