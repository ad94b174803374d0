"""Scenario assembler: seed, pick the topic, run its table, verify the result."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from .core.errors import ScenarioInvariantError
from .core.models import Street, Topic, TrainingRequest, TrainingScenario
from .dynamic.rng import DrillRng
from .topics import (
    anti_limper_isolation,
    big_blind_defense,
    bluff_spot,
    check_raise_spot,
    continuation_bet,
    delayed_cbet,
    icm_push_fold,
    pot_odds_and_equity,
    preflop_decision,
    river_call_or_fold,
    river_value_bet,
    semi_bluff_decision,
    squeeze_play,
    three_bet_pot_cbet,
    turn_barrel_decision,
    turn_probe_bet,
)
from .topics.base import TopicContext

__all__ = ["TOPIC_TABLES", "generate", "resolve_topic", "scenario_id", "verify_scenario"]

logger = logging.getLogger(__name__)

TopicTable = Callable[[TopicContext], TrainingScenario]

TOPIC_TABLES: Mapping[Topic, TopicTable] = {
    Topic.PREFLOP_DECISION: preflop_decision,
    Topic.ICM_AND_TOURNAMENT_DECISION: icm_push_fold,
    Topic.ANTI_LIMPER_ISOLATION: anti_limper_isolation,
    Topic.SQUEEZE_PLAY: squeeze_play,
    Topic.BIG_BLIND_DEFENSE: big_blind_defense,
    Topic.POSTFLOP_CONTINUATION_BET: continuation_bet,
    Topic.POT_ODDS_AND_EQUITY: pot_odds_and_equity,
    Topic.CHECK_RAISE_SPOT: check_raise_spot,
    Topic.SEMI_BLUFF_DECISION: semi_bluff_decision,
    Topic.THREE_BET_POT_CBET: three_bet_pot_cbet,
    Topic.TURN_BARREL_DECISION: turn_barrel_decision,
    Topic.TURN_PROBE_BET: turn_probe_bet,
    Topic.DELAYED_CBET: delayed_cbet,
    Topic.BLUFF_SPOT: bluff_spot,
    Topic.RIVER_VALUE_BET: river_value_bet,
    Topic.RIVER_CALL_OR_FOLD: river_call_or_fold,
}

if set(TOPIC_TABLES) != set(Topic):  # pragma: no cover - guarded at import
    missing = ", ".join(topic.value for topic in Topic if topic not in TOPIC_TABLES)
    raise RuntimeError(f"no decision table registered for: {missing}")

_ANSWER_IDS = "ABCD"


def scenario_id(topic: Topic, value: int) -> str:
    return f"{topic.prefix}-{value & 0xFFFFFFFF:08X}"


def resolve_topic(selector: Topic | Street, rng: DrillRng) -> Topic:
    """Concrete topics pass through; a street costs exactly one draw."""

    if isinstance(selector, Topic):
        return selector
    return rng.choice(selector.topics())


def generate(request: TrainingRequest) -> TrainingScenario:
    rng = DrillRng(request.seed)
    raw_id = rng.next_u32()
    topic = resolve_topic(request.topic, rng)
    ctx = TopicContext(
        rng=rng,
        difficulty=request.difficulty,
        scenario_id=scenario_id(topic, raw_id),
        style=request.text_style,
    )
    result = TOPIC_TABLES[topic](ctx)
    verify_scenario(result, topic)
    logger.debug(
        "generated scenario",
        extra={"scenario_id": result.scenario_id, "topic": topic.value, "branch_key": result.branch_key},
    )
    return result


def verify_scenario(result: TrainingScenario, topic: Topic) -> None:
    """Raise :class:`ScenarioInvariantError` on the first broken structural rule."""

    if result.topic is not topic:
        raise ScenarioInvariantError(f"scenario topic {result.topic.value} does not match {topic.value}")
    if not result.scenario_id.startswith(f"{topic.prefix}-"):
        raise ScenarioInvariantError(f"scenario id {result.scenario_id!r} lacks prefix {topic.prefix}")
    if not result.branch_key:
        raise ScenarioInvariantError(f"{result.scenario_id}: empty branch key")
    if not result.question:
        raise ScenarioInvariantError(f"{result.scenario_id}: empty question")

    answers = result.answers
    if not 2 <= len(answers) <= 4:
        raise ScenarioInvariantError(f"{result.scenario_id}: expected 2-4 answers, got {len(answers)}")
    ids = [answer.id for answer in answers]
    if ids != list(_ANSWER_IDS[: len(answers)]):
        raise ScenarioInvariantError(f"{result.scenario_id}: answer ids {ids} are not sequential from A")
    correct = [answer.id for answer in answers if answer.is_correct]
    if len(correct) != 1:
        raise ScenarioInvariantError(f"{result.scenario_id}: expected one correct answer, got {correct}")
    for answer in answers:
        if not answer.text or not answer.explanation:
            raise ScenarioInvariantError(f"{result.scenario_id}: answer {answer.id} missing text or explanation")

    setup = result.table_setup
    expected = topic.street.board_size
    if len(setup.board) != expected:
        raise ScenarioInvariantError(
            f"{result.scenario_id}: board has {len(setup.board)} cards, {topic.street.value} needs {expected}"
        )
    if len(set(setup.board)) != len(setup.board):
        raise ScenarioInvariantError(f"{result.scenario_id}: duplicate board card")
    if setup.hero_hand[0] == setup.hero_hand[1] or set(setup.hero_hand) & set(setup.board):
        raise ScenarioInvariantError(f"{result.scenario_id}: hero cards collide with the board")
    heroes = [player for player in setup.players if player.is_hero]
    if len(heroes) != 1 or heroes[0].position is not setup.hero_position:
        raise ScenarioInvariantError(f"{result.scenario_id}: hero seat does not match hero position")
