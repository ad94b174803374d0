"""Building blocks shared by every topic table.

A topic is a function ``(TopicContext) -> TrainingScenario``.  Inside it the
work is split in two: a pure ``decide_*`` function over the classification
labels returning a :class:`Decision`, and the wording that renders question
and explanations for the requested :class:`TextStyle`.
Wording never feeds back into the decision.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..core.models import (
    AnswerOption,
    Card,
    Difficulty,
    GameType,
    PlayerState,
    Position,
    TableSetup,
    TextStyle,
    Topic,
    TrainingScenario,
)
from ..dynamic.deck import Deck
from ..dynamic.rng import DrillRng

__all__ = ["Decision", "TopicContext", "Wording", "deal", "option", "scenario"]


@dataclass(frozen=True, slots=True)
class TopicContext:
    rng: DrillRng
    difficulty: Difficulty
    scenario_id: str
    style: TextStyle

    def pick(self, simple: str, technical: str) -> str:
        return simple if self.style is TextStyle.SIMPLE else technical


@dataclass(frozen=True, slots=True)
class Decision:
    """Correct answer id plus the classification label it was derived from."""

    correct: str
    branch_key: str


@dataclass(frozen=True, slots=True)
class Wording:
    """The two renderings of one sentence template."""

    simple: str
    technical: str

    def render(self, style: TextStyle, facts: Mapping[str, Any]) -> str:
        template = self.simple if style is TextStyle.SIMPLE else self.technical
        return template.format(**facts)


def deal(rng: DrillRng, board_cards: int) -> tuple[tuple[Card, Card], tuple[Card, ...]]:
    """Shuffle a fresh deck, then deal hero's two cards followed by the board."""

    deck = Deck.shuffled(rng)
    hand = (deck.deal(), deck.deal())
    return hand, deck.deal_n(board_cards)


def option(
    ctx: TopicContext,
    answer_id: str,
    text: str,
    decision: Decision,
    *,
    right: Wording,
    wrong: Wording,
    facts: Mapping[str, Any],
) -> AnswerOption:
    is_correct = answer_id == decision.correct
    wording = right if is_correct else wrong
    return AnswerOption(
        id=answer_id,
        text=text,
        is_correct=is_correct,
        explanation=wording.render(ctx.style, facts),
    )


def scenario(
    ctx: TopicContext,
    topic: Topic,
    decision: Decision,
    *,
    game_type: GameType = GameType.CASH_GAME,
    hero_position: Position,
    hero_hand: tuple[Card, Card],
    board: Sequence[Card] = (),
    players: Sequence[PlayerState],
    pot: int,
    current_bet: int = 0,
    question: str,
    answers: Sequence[AnswerOption],
) -> TrainingScenario:
    return TrainingScenario(
        scenario_id=ctx.scenario_id,
        topic=topic,
        branch_key=decision.branch_key,
        table_setup=TableSetup(
            game_type=game_type,
            hero_position=hero_position,
            hero_hand=hero_hand,
            board=tuple(board),
            players=tuple(players),
            pot_size=pot,
            current_bet=current_bet,
        ),
        question=question,
        answers=tuple(answers),
    )
