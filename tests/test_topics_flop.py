from __future__ import annotations

import re

import pytest

from pokerdrill.core.models import Difficulty, Position, TextStyle, Topic, TrainingRequest, TrainingScenario
from pokerdrill.dynamic.bet_sizing import BIG_BLIND, percent_of, round_half_up, scale
from pokerdrill.dynamic.cards import parse_cards
from pokerdrill.dynamic.evaluator import (
    BoardTexture,
    DrawType,
    board_texture,
    classify_draw,
    draw_equity,
    required_equity,
)
from pokerdrill.generator import generate
from pokerdrill.topics.flop import (
    BoardFavour,
    FlopInteraction,
    MadeStrength,
    board_favour,
    decide_check_raise,
    decide_continuation_bet,
    decide_pot_odds,
    decide_semi_bluff,
    decide_three_bet_pot_cbet,
    flop_interaction,
    three_bet_strength,
)

SEEDS = range(200)


def _run(topic: Topic, seed: int, difficulty: Difficulty = Difficulty.BEGINNER) -> TrainingScenario:
    return generate(TrainingRequest(topic=topic, difficulty=difficulty, seed=seed))


def _hand(text: str):
    first, second = parse_cards(text)
    return first, second


def test_decide_continuation_bet() -> None:
    assert decide_continuation_bet(BoardTexture.DRY, True).branch_key == "Dry:RangeAdv"
    assert decide_continuation_bet(BoardTexture.DRY, True).correct == "B"
    assert decide_continuation_bet(BoardTexture.DRY, False).correct == "A"
    wet = decide_continuation_bet(BoardTexture.WET, True)
    assert (wet.correct, wet.branch_key) == ("C", "Wet")
    assert decide_continuation_bet(BoardTexture.SEMI_WET, False).branch_key == "SemiWet"


def test_decide_pot_odds_calls_at_break_even() -> None:
    call = decide_pot_odds(DrawType.FLUSH_DRAW, 0.35, 0.25)
    assert (call.correct, call.branch_key) == ("A", "FlushDraw:Call")
    fold = decide_pot_odds(DrawType.GUT_SHOT, 0.16, 0.25)
    assert (fold.correct, fold.branch_key) == ("B", "GutShot:Fold")
    assert decide_pot_odds(DrawType.OESD, 0.25, 0.25).correct == "A"


def test_board_favour_and_interaction() -> None:
    assert board_favour(parse_cards("5c 4d 2h")) is BoardFavour.BIG_BLIND
    assert board_favour(parse_cards("Kc Qd 2h")) is BoardFavour.IN_POSITION

    assert flop_interaction(_hand("Ah Jh"), parse_cards("Th 9h 2c")) is FlopInteraction.COMBO_DRAW
    assert flop_interaction(_hand("Ah 5h"), parse_cards("Kh 7h 2c")) is FlopInteraction.DRAW
    assert flop_interaction(_hand("Kd 2s"), parse_cards("Kh 8c 3d")) is FlopInteraction.STRONG
    assert flop_interaction(_hand("Ad 5s"), parse_cards("Kh 8c 3h")) is FlopInteraction.WEAK


def test_decide_check_raise() -> None:
    value = decide_check_raise(BoardFavour.BIG_BLIND, FlopInteraction.STRONG)
    assert (value.correct, value.branch_key) == ("C", "BBFav:Strong")
    assert decide_check_raise(BoardFavour.IN_POSITION, FlopInteraction.COMBO_DRAW).correct == "C"
    assert decide_check_raise(BoardFavour.IN_POSITION, FlopInteraction.WEAK).correct == "A"
    assert decide_check_raise(BoardFavour.IN_POSITION, FlopInteraction.STRONG).correct == "B"
    assert decide_check_raise(BoardFavour.BIG_BLIND, FlopInteraction.WEAK).correct == "B"


def test_decide_semi_bluff_depends_on_depth_only_for_oesd() -> None:
    assert decide_semi_bluff(DrawType.COMBO_DRAW, 20).correct == "C"
    assert decide_semi_bluff(DrawType.FLUSH_DRAW, 200).correct == "B"
    assert decide_semi_bluff(DrawType.OESD, 40).branch_key == "OESD:Deep"
    short = decide_semi_bluff(DrawType.OESD, 39)
    assert (short.correct, short.branch_key) == ("B", "OESD:Short")
    assert decide_semi_bluff(DrawType.GUT_SHOT, 100).correct == "A"


def test_three_bet_strength_and_decision() -> None:
    board = parse_cards("Jh 7c 2d")
    assert three_bet_strength(_hand("Qs Qd"), board) is MadeStrength.STRONG
    assert three_bet_strength(_hand("Js 4d"), board) is MadeStrength.STRONG
    assert three_bet_strength(_hand("Ks Qd"), board) is MadeStrength.WEAK
    assert three_bet_strength(_hand("Ts Td"), board) is MadeStrength.WEAK

    assert decide_three_bet_pot_cbet(BoardTexture.DRY, MadeStrength.STRONG).correct == "B"
    assert decide_three_bet_pot_cbet(BoardTexture.WET, MadeStrength.STRONG).branch_key == "Wet:Strong:LargeCbet"
    assert decide_three_bet_pot_cbet(BoardTexture.SEMI_WET, MadeStrength.WEAK).branch_key == "Wet:Weak:Check"
    assert decide_three_bet_pot_cbet(BoardTexture.DRY, MadeStrength.WEAK).correct == "A"


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_continuation_bet_matches_texture(difficulty: Difficulty) -> None:
    keys = set()
    for seed in SEEDS:
        result = _run(Topic.POSTFLOP_CONTINUATION_BET, seed, difficulty)
        setup = result.table_setup
        advantage = min(card.rank for card in setup.board) <= 8
        expected = decide_continuation_bet(board_texture(setup.board), advantage)
        assert result.branch_key == expected.branch_key
        assert result.correct_answer.id == expected.correct
        assert setup.hero_position in (Position.BTN, Position.CO)
        assert len(result.answers) == 4
        assert result.correct_answer.id != "D"
        keys.add(result.branch_key)
    assert keys <= {"Dry:RangeAdv", "Dry:NoRangeAdv", "SemiWet", "Wet"}
    assert len(keys) >= 2


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_pot_odds_matches_required_equity(difficulty: Difficulty) -> None:
    outcomes = set()
    for seed in SEEDS:
        result = _run(Topic.POT_ODDS_AND_EQUITY, seed, difficulty)
        setup = result.table_setup
        draw = classify_draw(setup.board)
        bet = setup.current_bet
        expected = decide_pot_odds(draw, draw_equity(draw, 2), required_equity(bet, setup.pot_size))
        assert result.branch_key == expected.branch_key
        assert result.correct_answer.id == expected.correct
        assert setup.hero_position is Position.BB
        assert bet >= 1
        if difficulty is Difficulty.BEGINNER:
            assert bet == round_half_up(setup.pot_size * 0.5)
        outcomes.add(result.branch_key.split(":")[1])
    assert outcomes <= {"Call", "Fold"}


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_check_raise_matches_favour_and_interaction(difficulty: Difficulty) -> None:
    keys = set()
    for seed in SEEDS:
        result = _run(Topic.CHECK_RAISE_SPOT, seed, difficulty)
        setup = result.table_setup
        expected = decide_check_raise(board_favour(setup.board), flop_interaction(setup.hero_hand, setup.board))
        assert result.branch_key == expected.branch_key
        assert result.correct_answer.id == expected.correct
        assert setup.hero_position is Position.BB
        assert percent_of(setup.pot_size, 50) <= setup.current_bet <= percent_of(setup.pot_size, 70)
        keys.add(result.branch_key)
    assert len(keys) >= 2


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_semi_bluff_matches_draw_and_depth(difficulty: Difficulty) -> None:
    keys = set()
    for seed in SEEDS:
        result = _run(Topic.SEMI_BLUFF_DECISION, seed, difficulty)
        setup = result.table_setup
        hero = next(player for player in setup.players if player.is_hero)
        villain = next(player for player in setup.players if not player.is_hero)
        expected = decide_semi_bluff(classify_draw(setup.board), hero.stack // 2)
        assert result.branch_key == expected.branch_key
        assert result.correct_answer.id == expected.correct
        assert (setup.hero_position, villain.position) in {(Position.BTN, Position.BB), (Position.BB, Position.CO)}
        keys.add(result.branch_key)
    assert keys <= {"ComboDraw", "FlushDraw", "OESD:Deep", "OESD:Short", "GutShot"}
    assert len(keys) >= 2


_CR_SIZES = re.compile(r"c-bets (\d+) chips \(~(\d+)% pot\) into (\d+)\. Fold, call, or check-raise to (\d+)\?")
_SB_SIZES = re.compile(r"bets (\d+) \(~(\d+)% pot\) into (\d+), \d+ BB effective\. .* semi-bluff raise to (\d+)\?")


def test_half_up_sizing_helpers() -> None:
    assert percent_of(52, 53) == 28
    assert percent_of(36, 55) == 20
    assert scale(27, 5, 2) == 68
    assert scale(19, 5, 2) == 48


@pytest.mark.parametrize("difficulty", list(Difficulty))
@pytest.mark.parametrize(
    ("topic", "pattern", "raise_text"),
    [
        (Topic.CHECK_RAISE_SPOT, _CR_SIZES, lambda size: f"Raise to {scale(size, 1, BIG_BLIND)} BB"),
        (Topic.SEMI_BLUFF_DECISION, _SB_SIZES, lambda size: f"Raise to {size} chips"),
    ],
)
def test_flop_raise_sizes_round_half_up(difficulty: Difficulty, topic: Topic, pattern, raise_text) -> None:
    for seed in SEEDS:
        request = TrainingRequest(topic=topic, difficulty=difficulty, seed=seed, text_style=TextStyle.TECHNICAL)
        result = generate(request)
        match = pattern.search(result.question)
        assert match, result.question
        bet, pct, pot, raise_to = (int(value) for value in match.groups())
        assert pot == result.table_setup.pot_size
        assert bet == result.table_setup.current_bet == max(percent_of(pot, pct), BIG_BLIND)
        assert raise_to == scale(bet, 5, 2)
        assert result.answers[2].text == raise_text(raise_to)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_three_bet_pot_cbet_matches_strength(difficulty: Difficulty) -> None:
    keys = set()
    for seed in SEEDS:
        result = _run(Topic.THREE_BET_POT_CBET, seed, difficulty)
        setup = result.table_setup
        expected = decide_three_bet_pot_cbet(
            board_texture(setup.board), three_bet_strength(setup.hero_hand, setup.board)
        )
        assert result.branch_key == expected.branch_key
        assert result.correct_answer.id == expected.correct
        assert setup.hero_position is Position.BTN
        keys.add(result.branch_key)
    assert keys <= {"Dry:Strong:SmallCbet", "Wet:Strong:LargeCbet", "Dry:Weak:Check", "Wet:Weak:Check"}
    assert len(keys) >= 2
