from __future__ import annotations

import pytest

from pokerdrill.core.models import Card, Suit
from pokerdrill.dynamic.cards import (
    canonical_hand_abbrev,
    client_card,
    format_board,
    format_hand,
    parse_card,
    parse_cards,
)


def test_parse_card_accepts_common_spellings() -> None:
    assert parse_card("As") == Card(14, Suit.SPADES)
    assert parse_card("td") == Card(10, Suit.DIAMONDS)
    assert parse_card("10h") == Card(10, Suit.HEARTS)
    assert parse_card("2C") == Card(2, Suit.CLUBS)


@pytest.mark.parametrize("token", ["", "A", "1s", "Ax", "Asd"])
def test_parse_card_rejects_garbage(token: str) -> None:
    with pytest.raises(ValueError):
        parse_card(token)


def test_card_rank_is_validated() -> None:
    with pytest.raises(ValueError):
        Card(15, Suit.SPADES)
    with pytest.raises(ValueError):
        Card(1, Suit.SPADES)


def test_formatting_helpers() -> None:
    hand = parse_cards("As Kd")
    board = parse_cards("Th 9c 2s")
    assert format_hand(hand) == "AsKd"
    assert format_board(board) == "Th 9c 2s"
    assert client_card(board[0]) == "10h"
    assert client_card(board[1]) == "9c"


def test_canonical_hand_abbrev() -> None:
    assert canonical_hand_abbrev(parse_cards("5s As")) == "A5s"
    assert canonical_hand_abbrev(parse_cards("Kd Qh")) == "KQo"
    assert canonical_hand_abbrev(parse_cards("5s 5d")) == "55"
    with pytest.raises(ValueError):
        canonical_hand_abbrev(parse_cards("5s"))
