"""Random source abstraction used for die draws.

The evaluator only ever asks for a uniform integer in a closed range, so any
object with a ``randint(a, b)`` method works. ``random.Random`` satisfies the
protocol as-is; tests substitute a fixed sequence.
"""

from __future__ import annotations

import random
from typing import Protocol

from dicer.config import settings


class RandomSource(Protocol):
    """Interface for uniform integer draws."""

    def randint(self, a: int, b: int) -> int:
        """Return an integer N such that ``a <= N <= b``."""
        ...


def get_random_source() -> RandomSource:
    """Return a fresh random source for a single roll.

    Seeded from ``settings.rng_seed`` when it is set, so repeated rolls of the
    same expression are reproducible. Otherwise seeded from OS entropy.
    """
    return random.Random(settings.rng_seed)
