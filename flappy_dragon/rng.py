"""
rng.py: Bounded random integer source shared by the world generators.
"""

import random
from typing import Optional


class RandomSource:
    """A single long-lived generator; seed it for reproducible runs."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def range(self, start: int, stop: int) -> int:
        """Returns an integer in [start, stop)."""
        return self._random.randrange(start, stop)
