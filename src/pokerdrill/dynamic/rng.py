"""Seeded random stream owned by a single generation call."""

from __future__ import annotations

import random
import secrets
from collections.abc import Sequence
from typing import TypeVar

__all__ = ["DrillRng"]

_T = TypeVar("_T")


class DrillRng:
    """Thin wrapper over :class:`random.Random` with the draws the tables use.

    Two instances built from the same seed yield the same sequence.  Without a
    seed a 64-bit value is pulled from OS entropy and kept on ``seed`` so a
    surprising scenario can still be replayed.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = secrets.randbits(64)
        self.seed = seed
        self._random = random.Random(seed)

    def next_u32(self) -> int:
        return self._random.getrandbits(32)

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``, both ends inclusive."""

        return self._random.randint(low, high)

    def chance(self, probability: float) -> bool:
        return self._random.random() < probability

    def random(self) -> float:
        return self._random.random()

    def choice(self, items: Sequence[_T]) -> _T:
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        return items[self._random.randrange(len(items))]
