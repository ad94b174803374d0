from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..core.models import RANK_SYMBOLS, Card, Suit

__all__ = [
    "canonical_hand_abbrev",
    "client_card",
    "format_board",
    "format_hand",
    "parse_card",
    "parse_cards",
]

_SUIT_BY_CHAR = {suit.value: suit for suit in Suit}


def parse_card(token: str) -> Card:
    """Parse ``"As"``/``"td"``/``"10h"`` into a :class:`Card`."""

    raw = token.strip()
    if raw[:2] == "10":
        raw = "T" + raw[2:]
    if len(raw) != 2:
        raise ValueError(f"invalid card token '{token}'")
    rank_char, suit_char = raw[0].upper(), raw[1].lower()
    if rank_char not in RANK_SYMBOLS or suit_char not in _SUIT_BY_CHAR:
        raise ValueError(f"invalid card token '{token}'")
    return Card(rank=RANK_SYMBOLS.index(rank_char) + 2, suit=_SUIT_BY_CHAR[suit_char])


def parse_cards(text: str) -> tuple[Card, ...]:
    return tuple(parse_card(token) for token in text.split())


def format_hand(hand: Sequence[Card]) -> str:
    return "".join(str(card) for card in hand)


def format_board(board: Iterable[Card]) -> str:
    return " ".join(str(card) for card in board)


def client_card(card: Card) -> str:
    # table clients spell the ten out as "10"
    if card.rank == 10:
        return f"10{card.suit.value}"
    return str(card)


def canonical_hand_abbrev(hand: Sequence[Card]) -> str:
    # Return like 'A5s', 'KQo', or '55'
    if len(hand) != 2:
        raise ValueError("a starting hand has exactly two cards")
    high, low = sorted(hand, key=lambda card: card.rank, reverse=True)
    if high.rank == low.rank:
        return high.symbol + low.symbol
    suited = high.suit is low.suit
    return f"{high.symbol}{low.symbol}{'s' if suited else 'o'}"
