from __future__ import annotations

import pytest

from pokerdrill.dynamic.cards import parse_cards
from pokerdrill.dynamic.evaluator import (
    BluffType,
    BoardTexture,
    CallerStrength,
    DrawType,
    HandCategory,
    MadeHand,
    TurnCard,
    TurnStrength,
    board_has_flush_draw,
    board_has_straight_draw,
    board_texture,
    classify_bluff_type,
    classify_draw,
    classify_hand,
    classify_river_caller,
    classify_river_hand,
    classify_turn_card,
    classify_turn_strength,
    draw_equity,
    four_rank_window,
    hand_category_name,
    hero_has_flush_draw,
    hero_has_straight_draw,
    hero_pairs_board,
    required_equity,
    required_fold_frequency,
)


def test_board_detectors() -> None:
    assert board_has_flush_draw(parse_cards("Ah Kh 2c")) is True
    assert board_has_flush_draw(parse_cards("Ah Kd 2c")) is False
    assert board_has_flush_draw(()) is False
    assert board_has_straight_draw(parse_cards("9c 7d 2h")) is True
    assert board_has_straight_draw(parse_cards("Kc 7d 2h")) is False
    # paired ranks collapse before the gap check
    assert board_has_straight_draw(parse_cards("Kc Kd 2h")) is False


@pytest.mark.parametrize(
    ("board", "texture", "draw"),
    [
        ("Kh 7d 2c", BoardTexture.DRY, DrawType.GUT_SHOT),
        ("Kh 7h 2c", BoardTexture.SEMI_WET, DrawType.FLUSH_DRAW),
        ("9c 8d 2h", BoardTexture.SEMI_WET, DrawType.OESD),
        ("9h 8h 2c", BoardTexture.WET, DrawType.COMBO_DRAW),
    ],
)
def test_texture_and_draw_follow_the_same_detectors(board: str, texture: BoardTexture, draw: DrawType) -> None:
    cards = parse_cards(board)
    assert board_texture(cards) is texture
    assert classify_draw(cards) is draw


def test_four_rank_window() -> None:
    assert four_rank_window(parse_cards("9c 8d 6h 5s")) is True
    assert four_rank_window(parse_cards("Kc 8d 6h 5s")) is False
    assert four_rank_window(parse_cards("9c 8d 6h")) is False


def test_equity_table_and_pot_math() -> None:
    assert draw_equity(DrawType.COMBO_DRAW, 2) == pytest.approx(0.54)
    assert draw_equity(DrawType.COMBO_DRAW, 1) == pytest.approx(0.30)
    assert draw_equity(DrawType.FLUSH_DRAW, 2) == pytest.approx(0.35)
    assert draw_equity(DrawType.OESD, 1) == pytest.approx(0.17)
    assert draw_equity(DrawType.GUT_SHOT, 2) == pytest.approx(0.17)
    with pytest.raises(ValueError):
        draw_equity(DrawType.OESD, 3)
    assert required_equity(50, 100) == pytest.approx(1 / 3)
    assert required_fold_frequency(75, 100) == pytest.approx(75 / 175)
    assert required_equity(0, 0) == 0.0
    assert required_fold_frequency(0, 0) == 0.0


@pytest.mark.parametrize(
    ("hand", "category"),
    [
        ("As Ad", HandCategory.PREMIUM),
        ("Qs Qd", HandCategory.PREMIUM),
        ("Js Jd", HandCategory.STRONG),
        ("7s 7d", HandCategory.PLAYABLE),
        ("6s 6d", HandCategory.MARGINAL),
        ("As Ks", HandCategory.PREMIUM),
        ("As Kd", HandCategory.STRONG),
        ("Ac Qd", HandCategory.STRONG),
        ("As 9s", HandCategory.PLAYABLE),
        ("As 8s", HandCategory.MARGINAL),
        ("Ks Qs", HandCategory.PLAYABLE),
        ("Ks Qd", HandCategory.MARGINAL),
        ("Js Ts", HandCategory.PLAYABLE),
        ("9s 8s", HandCategory.TRASH),
        ("7d 2c", HandCategory.TRASH),
        ("Kd 2c", HandCategory.MARGINAL),
    ],
)
def test_classify_hand(hand: str, category: HandCategory) -> None:
    assert classify_hand(parse_cards(hand)) is category


def test_hand_category_name_is_lowercase() -> None:
    assert hand_category_name(HandCategory.PREMIUM) == "premium"


def test_hero_versus_board() -> None:
    board = parse_cards("Kh 9h 8c")
    assert hero_pairs_board(parse_cards("Ks 2d"), board) is True
    assert hero_pairs_board(parse_cards("As 2d"), board) is False
    assert hero_has_flush_draw(parse_cards("Ah 2d"), board) is True
    assert hero_has_flush_draw(parse_cards("As 2d"), board) is False
    assert hero_has_straight_draw(parse_cards("Jd 2c"), board) is True
    assert hero_has_straight_draw(parse_cards("Jd 2c"), parse_cards("Kh 7d 2c")) is False


@pytest.mark.parametrize(
    ("hand", "board", "strength"),
    [
        ("Qs Qd", "8h 7c 2d 3s", TurnStrength.STRONG),
        ("8s 8d", "8h 7c 2d 3s", TurnStrength.STRONG),
        ("5s 5d", "8h 7c 2d 3s", TurnStrength.MEDIUM),
        ("As Kd", "Ah 7c 2d 3s", TurnStrength.STRONG),
        ("As 5d", "Ah 7c 2d 3s", TurnStrength.MEDIUM),
        ("8s 7d", "Kh 8c 7d 2s", TurnStrength.STRONG),
        ("7s 6d", "Kh 8c 7d 2s", TurnStrength.MEDIUM),
        ("7s 2d", "Kh Qc Jd 3s", TurnStrength.WEAK),
    ],
)
def test_classify_turn_strength(hand: str, board: str, strength: TurnStrength) -> None:
    assert classify_turn_strength(parse_cards(hand), parse_cards(board)) is strength


def test_classify_turn_card() -> None:
    flop = parse_cards("Kh 7d 2c")
    assert classify_turn_card(flop, parse_cards("As")[0]) is TurnCard.SCARE
    assert classify_turn_card(flop, parse_cards("3s")[0]) is TurnCard.BLANK
    assert classify_turn_card(parse_cards("7h 6h 2c"), parse_cards("5h")[0]) is TurnCard.SCARE
    assert classify_turn_card(parse_cards("9c 8d 6h"), parse_cards("5s")[0]) is TurnCard.SCARE


@pytest.mark.parametrize(
    ("hand", "board", "made"),
    [
        ("Ah Kh", "Qh 7h 2h 3c 4d", MadeHand.NUTS),
        ("9s 9d", "9c 5d 2s Kh Jc", MadeHand.NUTS),
        ("Js Td", "9c 8d 7s 2h 2c", MadeHand.NUTS),
        ("Ks 7d", "Kh 7c 2d 3s 9h", MadeHand.STRONG),
        ("Ks 5d", "Kh Kd 9c 4s 2h", MadeHand.STRONG),
        ("As 3d", "Kh 9c 7d 5s 2h", MadeHand.MEDIUM),
    ],
)
def test_classify_river_hand(hand: str, board: str, made: MadeHand) -> None:
    assert classify_river_hand(parse_cards(hand), parse_cards(board)) is made


def test_board_straight_alone_is_not_nuts() -> None:
    assert classify_river_hand(parse_cards("2s 2d"), parse_cards("Tc 9d 8h 7s 6c")) is MadeHand.MEDIUM


@pytest.mark.parametrize(
    ("hand", "board", "strength"),
    [
        ("Ah Kd", "Ac 9s 6h 4d 2c", CallerStrength.STRONG),
        ("Ah 5d", "Ac 9s 6h 4d Jc", CallerStrength.MARGINAL),
        ("8h 8d", "Kc 9s 6h 4d 2c", CallerStrength.MARGINAL),
        ("2h 2d", "Kc 9s 6h 4d 3c", CallerStrength.WEAK),
        ("Qh Jd", "Kc 9s 6h 4d 2c", CallerStrength.WEAK),
        ("Ks 7d", "Kh 7c 2d 3s 9h", CallerStrength.STRONG),
    ],
)
def test_classify_river_caller(hand: str, board: str, strength: CallerStrength) -> None:
    assert classify_river_caller(parse_cards(hand), parse_cards(board)) is strength


@pytest.mark.parametrize(
    ("hand", "board", "bluff"),
    [
        ("Ah 5h", "Kh 9h 7c 3d 2s", BluffType.MISSED_FLUSH_DRAW),
        ("Ad Kc", "9h 7s 4c 3d 2h", BluffType.OVERCARD_BRICK),
        ("8d 6c", "Kh 9s 7c 3d 2h", BluffType.CAPPED_RANGE),
    ],
)
def test_classify_bluff_type(hand: str, board: str, bluff: BluffType) -> None:
    assert classify_bluff_type(parse_cards(hand), parse_cards(board)) is bluff
