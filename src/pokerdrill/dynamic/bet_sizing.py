"""Chip arithmetic and difficulty-scaled sampling ranges.

All sizes derived from a fraction of the pot go through :func:`scale`, which
rounds half up in exact integer arithmetic so fixtures never depend on float
representation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .rng import DrillRng

__all__ = ["BIG_BLIND", "TOURNAMENT_BIG_BLIND", "Span", "percent_of", "round_half_up", "scale"]

BIG_BLIND = 2
TOURNAMENT_BIG_BLIND = 100


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def scale(amount: int, numerator: int, denominator: int) -> int:
    """``amount * numerator / denominator`` rounded half up."""

    if denominator <= 0:
        raise ValueError("denominator must be positive")
    return (2 * amount * numerator + denominator) // (2 * denominator)


def percent_of(amount: int, percent: int) -> int:
    return scale(amount, percent, 100)


@dataclass(frozen=True, slots=True)
class Span:
    """Inclusive integer range sampled from the drill stream.

    A degenerate span (``low == high``) is a fixed value and draws nothing.
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"empty span {self.low}..{self.high}")

    @classmethod
    def fixed(cls, value: int) -> Span:
        return cls(value, value)

    def sample(self, rng: DrillRng) -> int:
        if self.low == self.high:
            return self.low
        return rng.randint(self.low, self.high)
