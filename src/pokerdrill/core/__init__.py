"""Core value types, errors and flags shared by every layer."""

from .errors import DeckExhaustedError, DrillValidationError, ScenarioInvariantError
from .models import (
    AnswerOption,
    Card,
    Difficulty,
    GameType,
    PlayerState,
    Position,
    Street,
    Suit,
    TableSetup,
    TextStyle,
    Topic,
    TrainingRequest,
    TrainingScenario,
)

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
]
