from __future__ import annotations

import pytest

from pokerdrill.core.models import Difficulty, GameType, PlayerState, Position, Topic, TrainingRequest, TrainingScenario
from pokerdrill.dynamic.cards import parse_cards
from pokerdrill.dynamic.evaluator import HandCategory, classify_hand
from pokerdrill.generator import generate
from pokerdrill.topics.preflop import (
    DefenseTier,
    PreflopSpot,
    PushTier,
    SqueezeTier,
    TournamentStage,
    decide_big_blind_defense,
    decide_icm,
    decide_isolation,
    decide_preflop,
    decide_squeeze,
    defense_tier,
    isolation_size_bb,
    push_threshold,
    push_tier,
    squeeze_tier,
)

SEEDS = range(200)


def _run(topic: Topic, seed: int, difficulty: Difficulty = Difficulty.BEGINNER) -> TrainingScenario:
    return generate(TrainingRequest(topic=topic, difficulty=difficulty, seed=seed))


def _hero(result: TrainingScenario) -> PlayerState:
    return next(player for player in result.table_setup.players if player.is_hero)


def test_decide_preflop_open_raise() -> None:
    assert decide_preflop(PreflopSpot.OPEN_RAISE, HandCategory.PREMIUM, False).correct == "B"
    assert decide_preflop(PreflopSpot.OPEN_RAISE, HandCategory.MARGINAL, True).correct == "B"
    folded = decide_preflop(PreflopSpot.OPEN_RAISE, HandCategory.MARGINAL, False)
    assert folded.correct == "A"
    assert folded.branch_key == "OpenRaise:marginal:OOP"
    assert decide_preflop(PreflopSpot.OPEN_RAISE, HandCategory.TRASH, True).correct == "A"


def test_decide_preflop_facing_open_and_three_bet_pot() -> None:
    assert decide_preflop(PreflopSpot.FACING_OPEN, HandCategory.STRONG, False).correct == "C"
    assert decide_preflop(PreflopSpot.FACING_OPEN, HandCategory.PLAYABLE, True).correct == "C"
    flat = decide_preflop(PreflopSpot.FACING_OPEN, HandCategory.PLAYABLE, False)
    assert (flat.correct, flat.branch_key) == ("B", "FacingOpen:playable:OOP")
    assert decide_preflop(PreflopSpot.FACING_OPEN, HandCategory.MARGINAL, True).correct == "A"

    four_bet = decide_preflop(PreflopSpot.THREE_BET_POT, HandCategory.PREMIUM, False)
    assert (four_bet.correct, four_bet.branch_key) == ("C", "ThreeBetPot:premium")
    assert decide_preflop(PreflopSpot.THREE_BET_POT, HandCategory.PLAYABLE, True).correct == "B"
    assert decide_preflop(PreflopSpot.THREE_BET_POT, HandCategory.MARGINAL, True).correct == "A"


@pytest.mark.parametrize(
    "hand, tier",
    [
        ("Qs Qd", PushTier.PREMIUM),
        ("As Ks", PushTier.PREMIUM),
        ("As Kd", PushTier.STRONG),
        ("Ts Td", PushTier.STRONG),
        ("7s 7d", PushTier.PLAYABLE),
        ("Ah Th", PushTier.PLAYABLE),
        ("Qh Jh", PushTier.PLAYABLE),
        ("6s 6d", PushTier.WEAK),
        ("Ks Qd", PushTier.WEAK),
    ],
)
def test_push_tier(hand: str, tier: PushTier) -> None:
    first, second = parse_cards(hand)
    assert push_tier((first, second)) is tier


def test_push_threshold_and_decide_icm() -> None:
    assert push_threshold(TournamentStage.BUBBLE, PushTier.PREMIUM) == 18
    assert push_threshold(TournamentStage.FINAL_TABLE, PushTier.PLAYABLE) == 12
    assert push_threshold(TournamentStage.EARLY, PushTier.WEAK) == 16
    assert push_threshold(TournamentStage.BUBBLE, PushTier.WEAK) == 6

    push = decide_icm(TournamentStage.BUBBLE, PushTier.WEAK, 6)
    assert (push.correct, push.branch_key) == ("A", "Bubble:Push")
    fold = decide_icm(TournamentStage.BUBBLE, PushTier.WEAK, 7)
    assert (fold.correct, fold.branch_key) == ("B", "Bubble:Fold")


def test_isolation_table() -> None:
    assert [isolation_size_bb(n) for n in (1, 2, 3)] == [4, 5, 6]
    assert decide_isolation(HandCategory.PREMIUM, False) == decide_isolation(HandCategory.PREMIUM, True)
    assert decide_isolation(HandCategory.STRONG, False).correct == "C"
    assert decide_isolation(HandCategory.PLAYABLE, True).branch_key == "Playable:IP"
    oop = decide_isolation(HandCategory.PLAYABLE, False)
    assert (oop.correct, oop.branch_key) == ("B", "Playable:OOP")
    assert decide_isolation(HandCategory.MARGINAL, True).correct == "A"


def test_squeeze_and_defense_tables() -> None:
    assert squeeze_tier(HandCategory.STRONG) is SqueezeTier.PREMIUM
    assert squeeze_tier(HandCategory.PLAYABLE) is SqueezeTier.SPECULATIVE
    assert squeeze_tier(HandCategory.MARGINAL) is SqueezeTier.WEAK
    assert decide_squeeze(SqueezeTier.PREMIUM).correct == "C"
    assert decide_squeeze(SqueezeTier.SPECULATIVE).branch_key == "Speculative:Call"
    assert decide_squeeze(SqueezeTier.WEAK).correct == "A"

    assert defense_tier(HandCategory.PREMIUM) is DefenseTier.STRONG
    assert defense_tier(HandCategory.MARGINAL) is DefenseTier.PLAYABLE
    assert defense_tier(HandCategory.TRASH) is DefenseTier.WEAK
    assert decide_big_blind_defense(DefenseTier.STRONG).branch_key == "Strong:ThreeBet"
    assert decide_big_blind_defense(DefenseTier.PLAYABLE).correct == "B"
    assert decide_big_blind_defense(DefenseTier.WEAK).correct == "A"


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_preflop_decision_matches_hand_category(difficulty: Difficulty) -> None:
    keys = set()
    for seed in SEEDS:
        result = _run(Topic.PREFLOP_DECISION, seed, difficulty)
        setup = result.table_setup
        spot = PreflopSpot(result.branch_key.split(":")[0])
        expected = decide_preflop(spot, classify_hand(setup.hero_hand), setup.hero_position.is_late())
        assert result.branch_key == expected.branch_key
        assert result.correct_answer.id == expected.correct
        assert len(setup.players) in (6, 9)
        assert [answer.id for answer in result.answers] == ["A", "B", "C"]
        keys.add(spot)
    assert keys == set(PreflopSpot)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_icm_push_fold_matches_threshold(difficulty: Difficulty) -> None:
    keys = set()
    for seed in SEEDS:
        result = _run(Topic.ICM_AND_TOURNAMENT_DECISION, seed, difficulty)
        setup = result.table_setup
        stage = TournamentStage(result.branch_key.split(":")[0])
        hero_bb = _hero(result).stack // 100
        expected = decide_icm(stage, push_tier(setup.hero_hand), hero_bb)
        assert result.branch_key == expected.branch_key
        assert result.correct_answer.id == expected.correct
        assert setup.game_type is GameType.TOURNAMENT
        assert setup.hero_position is Position.BTN
        keys.add(result.branch_key)
    assert len(keys) >= 2


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_anti_limper_isolation_matches_category(difficulty: Difficulty) -> None:
    keys = set()
    for seed in SEEDS:
        result = _run(Topic.ANTI_LIMPER_ISOLATION, seed, difficulty)
        setup = result.table_setup
        expected = decide_isolation(classify_hand(setup.hero_hand), setup.hero_position.is_late())
        assert result.branch_key == expected.branch_key
        assert result.correct_answer.id == expected.correct
        assert setup.hero_position in (Position.CO, Position.BTN, Position.SB)
        assert setup.current_bet == 2
        keys.add(result.branch_key)
    assert keys <= {"Premium", "Strong", "Playable:IP", "Playable:OOP", "Marginal", "Trash"}
    assert len(keys) >= 2


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_squeeze_play_matches_tier(difficulty: Difficulty) -> None:
    keys = set()
    for seed in SEEDS:
        result = _run(Topic.SQUEEZE_PLAY, seed, difficulty)
        expected = decide_squeeze(squeeze_tier(classify_hand(result.table_setup.hero_hand)))
        assert result.branch_key == expected.branch_key
        assert result.correct_answer.id == expected.correct
        assert result.table_setup.hero_position is Position.BTN
        keys.add(result.branch_key)
    assert keys <= {"Premium:Squeeze", "Speculative:Call", "Weak:Fold"}
    assert len(keys) >= 2


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_big_blind_defense_matches_tier(difficulty: Difficulty) -> None:
    keys = set()
    for seed in SEEDS:
        result = _run(Topic.BIG_BLIND_DEFENSE, seed, difficulty)
        setup = result.table_setup
        expected = decide_big_blind_defense(defense_tier(classify_hand(setup.hero_hand)))
        assert result.branch_key == expected.branch_key
        assert result.correct_answer.id == expected.correct
        assert setup.hero_position is Position.BB
        assert 0 < setup.current_bet < setup.pot_size
        keys.add(result.branch_key)
    assert keys <= {"Strong:ThreeBet", "Playable:Call", "Weak:Fold"}
    assert len(keys) >= 2


def test_beginner_squeeze_uses_fixed_sizing() -> None:
    result = _run(Topic.SQUEEZE_PLAY, 7)
    # one caller of a 3 BB open plus the big blind
    assert result.table_setup.current_bet == 6
    assert result.table_setup.pot_size == 14
    assert all(player.stack == 200 for player in result.table_setup.players)
