"""Seedable RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random

PERCENT_MIN = 1
PERCENT_MAX = 100


class RNG:
    """Wrapper around random.Random used for every check and roll."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def roll_percent(self) -> int:
        """Return a uniform draw on [1, 100]."""
        return self.randint(PERCENT_MIN, PERCENT_MAX)
