"""Value types shared by the generator, the topic tables and the outer layers.

Everything here is immutable: a scenario is built once inside a single
``generate`` call and handed to the caller as a frozen value.  ``to_dict`` /
``from_dict`` give a field-for-field JSON-ready projection so a scenario can
cross a process boundary unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from .errors import DrillValidationError

__all__ = [
    "AnswerOption",
    "Card",
    "Difficulty",
    "GameType",
    "PlayerState",
    "Position",
    "RANK_SYMBOLS",
    "Street",
    "Suit",
    "TableSetup",
    "TextStyle",
    "Topic",
    "TrainingRequest",
    "TrainingScenario",
    "parse_difficulty",
    "parse_street",
    "parse_text_style",
    "parse_topic",
]

RANK_SYMBOLS = "23456789TJQKA"


class Suit(Enum):
    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Card:
    """A single card; ``rank`` runs 2..14 with 14 as the ace."""

    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if not 2 <= self.rank <= 14:
            raise ValueError(f"card rank must be within 2..14, got {self.rank}")

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self.rank - 2]

    def __str__(self) -> str:
        return f"{self.symbol}{self.suit.value}"

    def to_dict(self) -> dict[str, Any]:
        return {"rank": self.rank, "suit": self.suit.name, "display": str(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Card:
        return cls(rank=int(data["rank"]), suit=Suit[str(data["suit"])])


class GameType(Enum):
    CASH_GAME = "Cash Game"
    TOURNAMENT = "Tournament"

    def __str__(self) -> str:
        return self.value


class Position(Enum):
    UTG = "UTG"
    UTG1 = "UTG+1"
    UTG2 = "UTG+2"
    LJ = "Lojack"
    HJ = "Hijack"
    CO = "Cutoff"
    BTN = "Button"
    SB = "Small Blind"
    BB = "Big Blind"

    def __str__(self) -> str:
        return self.value

    def is_late(self) -> bool:
        """Cutoff and Button act last post-flop."""

        return self in (Position.CO, Position.BTN)


class Street(Enum):
    PREFLOP = "Preflop"
    FLOP = "Flop"
    TURN = "Turn"
    RIVER = "River"

    def __str__(self) -> str:
        return self.value

    @property
    def board_size(self) -> int:
        return _BOARD_SIZES[self]

    def topics(self) -> tuple[Topic, ...]:
        return tuple(topic for topic in Topic if topic.street is self)


_BOARD_SIZES = {
    Street.PREFLOP: 0,
    Street.FLOP: 3,
    Street.TURN: 4,
    Street.RIVER: 5,
}


class Topic(Enum):
    PREFLOP_DECISION = "PreflopDecision"
    POSTFLOP_CONTINUATION_BET = "PostflopContinuationBet"
    POT_ODDS_AND_EQUITY = "PotOddsAndEquity"
    BLUFF_SPOT = "BluffSpot"
    ICM_AND_TOURNAMENT_DECISION = "ICMAndTournamentDecision"
    TURN_BARREL_DECISION = "TurnBarrelDecision"
    CHECK_RAISE_SPOT = "CheckRaiseSpot"
    SEMI_BLUFF_DECISION = "SemiBluffDecision"
    ANTI_LIMPER_ISOLATION = "AntiLimperIsolation"
    RIVER_VALUE_BET = "RiverValueBet"
    SQUEEZE_PLAY = "SqueezePlay"
    BIG_BLIND_DEFENSE = "BigBlindDefense"
    THREE_BET_POT_CBET = "ThreeBetPotCbet"
    RIVER_CALL_OR_FOLD = "RiverCallOrFold"
    TURN_PROBE_BET = "TurnProbeBet"
    DELAYED_CBET = "DelayedCbet"

    def __str__(self) -> str:
        return self.display_name

    @property
    def prefix(self) -> str:
        return _TOPIC_META[self][0]

    @property
    def display_name(self) -> str:
        return _TOPIC_META[self][1]

    @property
    def street(self) -> Street:
        return _TOPIC_META[self][2]


_TOPIC_META: dict[Topic, tuple[str, str, Street]] = {
    Topic.PREFLOP_DECISION: ("PF", "Preflop Decision", Street.PREFLOP),
    Topic.POSTFLOP_CONTINUATION_BET: ("CB", "Postflop Continuation Bet", Street.FLOP),
    Topic.POT_ODDS_AND_EQUITY: ("PO", "Pot Odds & Equity", Street.FLOP),
    Topic.BLUFF_SPOT: ("BL", "Bluff Spot", Street.RIVER),
    Topic.ICM_AND_TOURNAMENT_DECISION: ("IC", "ICM & Tournament Decision", Street.PREFLOP),
    Topic.TURN_BARREL_DECISION: ("TB", "Turn Barrel Decision", Street.TURN),
    Topic.CHECK_RAISE_SPOT: ("CR", "Check-Raise Spot", Street.FLOP),
    Topic.SEMI_BLUFF_DECISION: ("SB", "Semi-Bluff Decision", Street.FLOP),
    Topic.ANTI_LIMPER_ISOLATION: ("AL", "Anti-Limper Isolation", Street.PREFLOP),
    Topic.RIVER_VALUE_BET: ("RV", "River Value Bet", Street.RIVER),
    Topic.SQUEEZE_PLAY: ("SQ", "Squeeze Play", Street.PREFLOP),
    Topic.BIG_BLIND_DEFENSE: ("BD", "Big Blind Defense", Street.PREFLOP),
    Topic.THREE_BET_POT_CBET: ("3B", "3-Bet Pot C-Bet", Street.FLOP),
    Topic.RIVER_CALL_OR_FOLD: ("RF", "River Call or Fold", Street.RIVER),
    Topic.TURN_PROBE_BET: ("PB", "Turn Probe Bet", Street.TURN),
    Topic.DELAYED_CBET: ("DC", "Delayed C-Bet", Street.TURN),
}

if set(_TOPIC_META) != set(Topic):  # pragma: no cover - guarded at import
    raise RuntimeError("topic metadata table is incomplete")


class Difficulty(Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    def __str__(self) -> str:
        return self.value


class TextStyle(Enum):
    SIMPLE = "Simple"
    TECHNICAL = "Technical"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PlayerState:
    seat: int
    position: Position
    stack: int
    is_hero: bool
    is_active: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "seat": self.seat,
            "position": self.position.name,
            "stack": self.stack,
            "is_hero": self.is_hero,
            "is_active": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlayerState:
        return cls(
            seat=int(data["seat"]),
            position=Position[str(data["position"])],
            stack=int(data["stack"]),
            is_hero=bool(data["is_hero"]),
            is_active=bool(data.get("is_active", True)),
        )


@dataclass(frozen=True, slots=True)
class TableSetup:
    game_type: GameType
    hero_position: Position
    hero_hand: tuple[Card, Card]
    board: tuple[Card, ...]
    players: tuple[PlayerState, ...]
    pot_size: int
    current_bet: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "game_type": self.game_type.name,
            "hero_position": self.hero_position.name,
            "hero_hand": [card.to_dict() for card in self.hero_hand],
            "board": [card.to_dict() for card in self.board],
            "players": [player.to_dict() for player in self.players],
            "pot_size": self.pot_size,
            "current_bet": self.current_bet,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TableSetup:
        first, second = (Card.from_dict(raw) for raw in data["hero_hand"])
        return cls(
            game_type=GameType[str(data["game_type"])],
            hero_position=Position[str(data["hero_position"])],
            hero_hand=(first, second),
            board=tuple(Card.from_dict(raw) for raw in data.get("board", ())),
            players=tuple(PlayerState.from_dict(raw) for raw in data.get("players", ())),
            pot_size=int(data["pot_size"]),
            current_bet=int(data["current_bet"]),
        )


@dataclass(frozen=True, slots=True)
class AnswerOption:
    id: str
    text: str
    is_correct: bool
    explanation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "is_correct": self.is_correct,
            "explanation": self.explanation,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AnswerOption:
        return cls(
            id=str(data["id"]),
            text=str(data["text"]),
            is_correct=bool(data["is_correct"]),
            explanation=str(data["explanation"]),
        )


@dataclass(frozen=True, slots=True)
class TrainingScenario:
    scenario_id: str
    topic: Topic
    branch_key: str
    table_setup: TableSetup
    question: str
    answers: tuple[AnswerOption, ...]

    @property
    def correct_answer(self) -> AnswerOption:
        for answer in self.answers:
            if answer.is_correct:
                return answer
        raise LookupError(f"scenario {self.scenario_id} has no correct answer")

    def answer(self, answer_id: str) -> AnswerOption:
        for option in self.answers:
            if option.id == answer_id:
                return option
        options = ", ".join(option.id for option in self.answers)
        raise DrillValidationError(f"Unknown answer_id '{answer_id}'. Options: {options}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenario_id": self.scenario_id,
            "topic": self.topic.value,
            "branch_key": self.branch_key,
            "table_setup": self.table_setup.to_dict(),
            "question": self.question,
            "answers": [answer.to_dict() for answer in self.answers],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TrainingScenario:
        return cls(
            scenario_id=str(data["scenario_id"]),
            topic=Topic(str(data["topic"])),
            branch_key=str(data["branch_key"]),
            table_setup=TableSetup.from_dict(data["table_setup"]),
            question=str(data["question"]),
            answers=tuple(AnswerOption.from_dict(raw) for raw in data["answers"]),
        )


@dataclass(frozen=True, slots=True)
class TrainingRequest:
    """Input to :func:`pokerdrill.generator.generate`.

    ``topic`` is either a concrete :class:`Topic` or a :class:`Street`, in
    which case one of that street's topics is drawn uniformly from the seeded
    stream.  ``seed=None`` draws from OS entropy.
    """

    topic: Topic | Street
    difficulty: Difficulty = Difficulty.BEGINNER
    seed: int | None = None
    text_style: TextStyle = TextStyle.SIMPLE


_E = TypeVar("_E", bound=Enum)


def _fold(raw: str) -> str:
    return "".join(ch for ch in raw.lower() if ch.isalnum())


def _parse_enum(kind: type[_E], label: str, raw: str | _E, extra: Mapping[_E, str] | None = None) -> _E:
    if isinstance(raw, kind):
        return raw
    key = _fold(str(raw))
    if key:
        for member in kind:
            candidates = {_fold(member.name), _fold(str(member.value))}
            if extra and member in extra:
                candidates.add(_fold(extra[member]))
            if key in candidates:
                return member
    options = ", ".join(str(member.value) for member in kind)
    raise DrillValidationError(f"Unknown {label} '{raw}'. Options: {options}")


def parse_topic(raw: str | Topic) -> Topic:
    """Resolve a topic from its canonical name, enum name or display name."""

    return _parse_enum(Topic, "topic", raw, {topic: topic.display_name for topic in Topic})


def parse_street(raw: str | Street) -> Street:
    return _parse_enum(Street, "street", raw)


def parse_difficulty(raw: str | Difficulty) -> Difficulty:
    return _parse_enum(Difficulty, "difficulty", raw)


def parse_text_style(raw: str | TextStyle) -> TextStyle:
    return _parse_enum(TextStyle, "text style", raw)
