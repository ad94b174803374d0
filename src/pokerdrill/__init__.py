"""Deterministic poker drill scenarios: one seed, one fully explained spot."""

from .core import (
    AnswerOption,
    Card,
    DeckExhaustedError,
    Difficulty,
    DrillValidationError,
    GameType,
    PlayerState,
    Position,
    ScenarioInvariantError,
    Street,
    Suit,
    TableSetup,
    TextStyle,
    Topic,
    TrainingRequest,
    TrainingScenario,
)
from .generator import generate

__all__ = [
    "AnswerOption",
    "Card",
    "DeckExhaustedError",
    "Difficulty",
    "DrillValidationError",
    "GameType",
    "PlayerState",
    "Position",
    "ScenarioInvariantError",
    "Street",
    "Suit",
    "TableSetup",
    "TextStyle",
    "Topic",
    "TrainingRequest",
    "TrainingScenario",
    "generate",
]
