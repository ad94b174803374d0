"""52-card deck with a Fisher-Yates shuffle and a forward-only dealing cursor."""

from __future__ import annotations

from ..core.errors import DeckExhaustedError, ScenarioInvariantError
from ..core.models import Card, Suit
from .rng import DrillRng

__all__ = ["CANONICAL_ORDER", "Deck"]

_SUIT_ORDER = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)

# Suit-major, ascending rank.  Shuffle output depends on starting here.
CANONICAL_ORDER: tuple[Card, ...] = tuple(Card(rank=rank, suit=suit) for suit in _SUIT_ORDER for rank in range(2, 15))


class Deck:
    def __init__(self) -> None:
        self._cards: list[Card] = list(CANONICAL_ORDER)
        self._cursor = 0

    @classmethod
    def shuffled(cls, rng: DrillRng) -> Deck:
        deck = cls()
        deck.shuffle(rng)
        return deck

    def shuffle(self, rng: DrillRng) -> None:
        if self._cursor:
            raise ScenarioInvariantError("cannot shuffle a deck that has already dealt cards")
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def deal(self) -> Card:
        if self._cursor >= len(self._cards):
            raise DeckExhaustedError("deck exhausted: all 52 cards already dealt")
        card = self._cards[self._cursor]
        self._cursor += 1
        return card

    def deal_n(self, count: int) -> tuple[Card, ...]:
        return tuple(self.deal() for _ in range(count))

    @property
    def remaining(self) -> int:
        return len(self._cards) - self._cursor

    @property
    def dealt_cards(self) -> tuple[Card, ...]:
        return tuple(self._cards[: self._cursor])

    def __len__(self) -> int:
        return self.remaining
