from __future__ import annotations

__all__ = ["DeckExhaustedError", "DrillValidationError", "ScenarioInvariantError"]


class ScenarioInvariantError(RuntimeError):
    """A generated scenario broke a structural contract.

    These are programming errors in a decision table or the assembler, never
    something a caller can trigger with valid typed input.
    """


class DeckExhaustedError(ScenarioInvariantError):
    """More cards were requested than the deck holds."""


class DrillValidationError(ValueError):
    """Untyped input (usually a string from the HTTP or CLI layer) named no known value."""
