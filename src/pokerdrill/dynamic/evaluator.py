"""Situation evaluator: pure classifiers and pot math.

Every topic table asks the same few questions about the dealt cards:

- board texture (flush draw and/or straight draw present on the board)
- draw type, and its approximate equity from a fixed table
- starting-hand category (one shared table, reused by every preflop topic)
- made-hand strength on the turn and river

Nothing in here keeps state or touches the random stream, so each classifier
can be tested on hand-picked cards.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from enum import Enum

from ..core.models import Card, Suit

__all__ = [
    "BluffType",
    "BoardTexture",
    "CallerStrength",
    "DrawType",
    "HandCategory",
    "MadeHand",
    "SUIT_INDEX",
    "TurnCard",
    "TurnStrength",
    "board_has_flush_draw",
    "board_has_straight_draw",
    "board_texture",
    "classify_bluff_type",
    "classify_draw",
    "classify_hand",
    "classify_river_caller",
    "classify_river_hand",
    "classify_turn_card",
    "classify_turn_strength",
    "draw_equity",
    "four_rank_window",
    "hand_category_name",
    "hero_has_flush_draw",
    "hero_has_straight_draw",
    "hero_pairs_board",
    "required_equity",
    "required_fold_frequency",
    "suit_counts",
]

SUIT_INDEX: dict[Suit, int] = {
    Suit.CLUBS: 0,
    Suit.DIAMONDS: 1,
    Suit.HEARTS: 2,
    Suit.SPADES: 3,
}


class HandCategory(Enum):
    PREMIUM = "Premium"
    STRONG = "Strong"
    PLAYABLE = "Playable"
    MARGINAL = "Marginal"
    TRASH = "Trash"


class BoardTexture(Enum):
    DRY = "Dry"
    SEMI_WET = "SemiWet"
    WET = "Wet"


class DrawType(Enum):
    COMBO_DRAW = "ComboDraw"
    FLUSH_DRAW = "FlushDraw"
    OESD = "OESD"
    GUT_SHOT = "GutShot"

    @property
    def label(self) -> str:
        return _DRAW_LABELS[self]


_DRAW_LABELS = {
    DrawType.COMBO_DRAW: "combo draw (flush + straight)",
    DrawType.FLUSH_DRAW: "flush draw",
    DrawType.OESD: "open-ended straight draw",
    DrawType.GUT_SHOT: "gutshot straight draw",
}


class TurnStrength(Enum):
    STRONG = "Strong"
    MEDIUM = "Medium"
    WEAK = "Weak"


class TurnCard(Enum):
    BLANK = "Blank"
    SCARE = "Scare"


class MadeHand(Enum):
    NUTS = "Nuts"
    STRONG = "Strong"
    MEDIUM = "Medium"


class CallerStrength(Enum):
    STRONG = "Strong"
    MARGINAL = "Marginal"
    WEAK = "Weak"


class BluffType(Enum):
    MISSED_FLUSH_DRAW = "MissedFlushDraw"
    OVERCARD_BRICK = "OvercardBrick"
    CAPPED_RANGE = "CappedRange"


# Rule-of-4-and-2 approximations, keyed by streets still to come.
_EQUITY_TABLE: dict[DrawType, dict[int, float]] = {
    DrawType.COMBO_DRAW: {2: 0.54, 1: 0.30},
    DrawType.FLUSH_DRAW: {2: 0.35, 1: 0.20},
    DrawType.OESD: {2: 0.32, 1: 0.17},
    DrawType.GUT_SHOT: {2: 0.17, 1: 0.09},
}


# ---------------------------------------------------------------------------
# Board level detectors


def suit_counts(cards: Sequence[Card]) -> list[int]:
    counts = [0, 0, 0, 0]
    for card in cards:
        counts[SUIT_INDEX[card.suit]] += 1
    return counts


def _unique_ranks(cards: Sequence[Card]) -> list[int]:
    return sorted({card.rank for card in cards})


def board_has_flush_draw(board: Sequence[Card]) -> bool:
    return bool(board) and max(suit_counts(board)) >= 2


def board_has_straight_draw(board: Sequence[Card]) -> bool:
    ranks = _unique_ranks(board)
    return any(high - low <= 2 for low, high in zip(ranks, ranks[1:]))


def four_rank_window(cards: Sequence[Card]) -> bool:
    """True when four distinct ranks fit inside a five-rank span."""

    ranks = _unique_ranks(cards)
    return any(ranks[i + 3] - ranks[i] <= 4 for i in range(len(ranks) - 3))


def board_texture(board: Sequence[Card]) -> BoardTexture:
    flush = board_has_flush_draw(board)
    straight = board_has_straight_draw(board)
    if flush and straight:
        return BoardTexture.WET
    if flush or straight:
        return BoardTexture.SEMI_WET
    return BoardTexture.DRY


def classify_draw(board: Sequence[Card]) -> DrawType:
    flush = board_has_flush_draw(board)
    straight = board_has_straight_draw(board)
    if flush and straight:
        return DrawType.COMBO_DRAW
    if flush:
        return DrawType.FLUSH_DRAW
    if straight:
        return DrawType.OESD
    return DrawType.GUT_SHOT


def draw_equity(draw: DrawType, streets_remaining: int) -> float:
    try:
        return _EQUITY_TABLE[draw][streets_remaining]
    except KeyError as exc:
        raise ValueError(f"streets_remaining must be 1 or 2, got {streets_remaining}") from exc


def required_equity(call: int | float, pot: int | float) -> float:
    """Share of the final pot a call has to win: ``call / (pot + call)``."""

    denom = pot + call
    if denom == 0:
        return 0.0
    return call / denom


def required_fold_frequency(bet: int | float, pot: int | float) -> float:
    """How often a bluff of ``bet`` into ``pot`` must work to break even."""

    denom = pot + bet
    if denom == 0:
        return 0.0
    return bet / denom


# ---------------------------------------------------------------------------
# Starting hands


def classify_hand(hand: Sequence[Card]) -> HandCategory:
    high, low = sorted((card.rank for card in hand), reverse=True)
    suited = hand[0].suit is hand[1].suit

    if high == low:
        if high >= 12:
            return HandCategory.PREMIUM
        if high >= 10:
            return HandCategory.STRONG
        if high >= 7:
            return HandCategory.PLAYABLE
        return HandCategory.MARGINAL

    if (high, low) == (14, 13):
        return HandCategory.PREMIUM if suited else HandCategory.STRONG
    if (high, low) == (14, 12):
        return HandCategory.STRONG
    if high == 14 and suited and low >= 9:
        return HandCategory.PLAYABLE
    if (high, low) == (13, 12):
        return HandCategory.PLAYABLE if suited else HandCategory.MARGINAL
    if suited and low >= 9 and high - low <= 1:
        return HandCategory.PLAYABLE
    if high <= 9:
        return HandCategory.TRASH
    return HandCategory.MARGINAL


def hand_category_name(category: HandCategory) -> str:
    return category.value.lower()


# ---------------------------------------------------------------------------
# Hero versus board


def hero_pairs_board(hero: Sequence[Card], board: Sequence[Card]) -> bool:
    board_ranks = {card.rank for card in board}
    return any(card.rank in board_ranks for card in hero)


def hero_has_flush_draw(hero: Sequence[Card], board: Sequence[Card]) -> bool:
    counts = suit_counts(board)
    return any(counts[SUIT_INDEX[card.suit]] >= 2 for card in hero)


def hero_has_straight_draw(hero: Sequence[Card], board: Sequence[Card]) -> bool:
    if not board_has_straight_draw(board):
        return False
    return any(abs(h.rank - b.rank) <= 3 for h in hero for b in board)


def classify_turn_strength(hero: Sequence[Card], board: Sequence[Card]) -> TurnStrength:
    board_ranks = {card.rank for card in board}
    top = max(board_ranks)
    first, second = hero[0].rank, hero[1].rank

    if first == second:
        if first in board_ranks or first > top:
            return TurnStrength.STRONG
        return TurnStrength.MEDIUM

    paired = [rank for rank in (first, second) if rank in board_ranks]
    if len(paired) == 2:
        return TurnStrength.STRONG
    if len(paired) == 1:
        kicker = second if paired[0] == first else first
        if paired[0] == top:
            return TurnStrength.STRONG if kicker >= 11 else TurnStrength.MEDIUM
        return TurnStrength.MEDIUM
    return TurnStrength.WEAK


def classify_turn_card(flop: Sequence[Card], turn: Card) -> TurnCard:
    if turn.rank > max(card.rank for card in flop):
        return TurnCard.SCARE
    if suit_counts(flop)[SUIT_INDEX[turn.suit]] >= 2:
        return TurnCard.SCARE
    if four_rank_window([*flop, turn]):
        return TurnCard.SCARE
    return TurnCard.BLANK


# ---------------------------------------------------------------------------
# River made hands


def _has_straight(cards: Sequence[Card]) -> bool:
    ranks = {card.rank for card in cards}
    if 14 in ranks:
        ranks.add(1)
    return any(all(start + step in ranks for step in range(5)) for start in range(1, 11))


def _has_flush(cards: Sequence[Card]) -> bool:
    return bool(cards) and max(suit_counts(cards)) >= 5


def _has_full_house_or_quads(cards: Sequence[Card]) -> bool:
    counts = sorted(Counter(card.rank for card in cards).values(), reverse=True)
    if not counts or counts[0] < 3:
        return False
    return counts[0] >= 4 or (len(counts) > 1 and counts[1] >= 2)


def classify_river_hand(hero: Sequence[Card], board: Sequence[Card]) -> MadeHand:
    """Bucket hero's river holding; only hands that use a hole card count."""

    seven = [*hero, *board]
    board_counts = Counter(card.rank for card in board)
    first, second = hero[0].rank, hero[1].rank

    flush_with_hero = any(
        suit_counts(seven)[SUIT_INDEX[suit]] >= 5 for suit in {card.suit for card in hero}
    )
    if flush_with_hero:
        return MadeHand.NUTS
    if _has_straight(seven) and not _has_straight(board):
        return MadeHand.NUTS
    if _has_full_house_or_quads(seven) and not _has_full_house_or_quads(board):
        return MadeHand.NUTS
    if first == second and board_counts[first] >= 1:
        return MadeHand.NUTS

    if first != second and board_counts[first] and board_counts[second]:
        return MadeHand.STRONG
    if any(board_counts[rank] >= 2 for rank in (first, second)):
        return MadeHand.STRONG
    return MadeHand.MEDIUM


def classify_river_caller(hero: Sequence[Card], board: Sequence[Card]) -> CallerStrength:
    made = classify_river_hand(hero, board)
    if made is not MadeHand.MEDIUM:
        return CallerStrength.STRONG

    ranks = sorted({card.rank for card in board})
    top, bottom = ranks[-1], ranks[0]
    first, second = hero[0].rank, hero[1].rank

    if first == second:
        if first > top:
            return CallerStrength.STRONG
        if first > bottom:
            return CallerStrength.MARGINAL
        return CallerStrength.WEAK

    for paired, kicker in ((first, second), (second, first)):
        if paired == top:
            return CallerStrength.STRONG if kicker >= 11 else CallerStrength.MARGINAL
    if any(rank in ranks and rank != bottom for rank in (first, second)):
        return CallerStrength.MARGINAL
    return CallerStrength.WEAK


def classify_bluff_type(hero: Sequence[Card], board: Sequence[Card]) -> BluffType:
    turn_board, river = board[:4], board[4]
    counts = suit_counts(turn_board)
    for card in hero:
        if counts[SUIT_INDEX[card.suit]] >= 2 and river.suit is not card.suit:
            return BluffType.MISSED_FLUSH_DRAW
    if min(card.rank for card in hero) > max(card.rank for card in board):
        return BluffType.OVERCARD_BRICK
    return BluffType.CAPPED_RANGE
