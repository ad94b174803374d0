"""Seat pools and player lists for the drill tables.

Most drills are heads-up: the villain sits in seat 1 and hero in seat 2.  The
preflop decision drill deals a full 6-max or 9-max ring instead, seated in
pool order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..core.models import PlayerState, Position

__all__ = ["POSITIONS_6MAX", "POSITIONS_9MAX", "SeatAssignment", "heads_up", "ring"]

POSITIONS_6MAX: tuple[Position, ...] = (
    Position.UTG,
    Position.HJ,
    Position.CO,
    Position.BTN,
    Position.SB,
    Position.BB,
)

POSITIONS_9MAX: tuple[Position, ...] = (
    Position.UTG,
    Position.UTG1,
    Position.UTG2,
    Position.LJ,
    Position.HJ,
    Position.CO,
    Position.BTN,
    Position.SB,
    Position.BB,
)


@dataclass(frozen=True)
class SeatAssignment:
    """Hero/villain position mapping for a heads-up drill."""

    hero: Position
    villain: Position

    def __post_init__(self) -> None:
        if self.hero is self.villain:
            raise ValueError("hero and villain cannot share a position")

    def players(self, hero_stack: int, villain_stack: int) -> tuple[PlayerState, ...]:
        return heads_up(self.hero, self.villain, hero_stack, villain_stack)


def heads_up(hero: Position, villain: Position, hero_stack: int, villain_stack: int) -> tuple[PlayerState, ...]:
    return (
        PlayerState(seat=1, position=villain, stack=villain_stack, is_hero=False),
        PlayerState(seat=2, position=hero, stack=hero_stack, is_hero=True),
    )


def ring(
    positions: Sequence[Position],
    hero: Position,
    hero_stack: int,
    villain_stack: Callable[[], int],
) -> tuple[PlayerState, ...]:
    """Seat every position in order; ``villain_stack`` is called once per opponent, in seat order."""

    if hero not in positions:
        raise ValueError(f"hero position {hero.name} is not part of the table")
    return tuple(
        PlayerState(
            seat=index + 1,
            position=position,
            stack=hero_stack if position is hero else villain_stack(),
            is_hero=position is hero,
        )
        for index, position in enumerate(positions)
    )
