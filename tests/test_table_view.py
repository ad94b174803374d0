from __future__ import annotations

import json

from pokerdrill.core.models import Topic, TrainingRequest, TrainingScenario
from pokerdrill.dynamic.cards import client_card
from pokerdrill.features.table_view import game_state_name, to_table_state
from pokerdrill.generator import generate


def _run(topic: Topic, seed: int) -> TrainingScenario:
    return generate(TrainingRequest(topic=topic, seed=seed))


def test_game_state_names() -> None:
    assert [game_state_name(n) for n in (0, 3, 4, 5)] == ["PreFlop", "Flop", "Turn", "River"]


def test_river_call_projection() -> None:
    scenario = _run(Topic.RIVER_CALL_OR_FOLD, 12)
    setup = scenario.table_setup
    message = to_table_state(scenario)

    assert message["nt_type"] == "NtTableState"
    assert message["player_id"] == 1
    data = message["data"]
    state = data["data_state"]
    assert state["display_table_id"] == f"training/{scenario.scenario_id}"
    assert state["pot"] == [float(setup.pot_size)]
    assert state["seat_idx_button"] == 1
    assert state["seat_idx_bb"] == 2
    assert state["seat_idx_sb"] == 0

    table = data["table_state"]
    assert table["game_state"] == "River"
    assert [slot["card"] for slot in table["community_cards"]] == [client_card(card) for card in setup.board]

    seats = data["seats_state"]
    assert [seat["seat_idx"] for seat in seats] == list(range(6))
    hero, villain = seats[1], seats[2]
    assert hero["name"] == "You"
    assert [slot["card"] for slot in hero["cards"]] == [client_card(card) for card in setup.hero_hand]
    assert hero["action_option"]["call_amount"] == float(setup.current_bet)
    assert villain["bet"] == float(setup.current_bet)
    assert villain["last_action"] == "Bet"
    assert [slot["card"] for slot in villain["cards"]] == ["b", "b"]
    assert not any(seat["is_playing"] for seat in (seats[0], *seats[3:]))
    json.dumps(message)


def test_preflop_projection_has_empty_board() -> None:
    scenario = _run(Topic.PREFLOP_DECISION, 42)
    message = to_table_state(scenario, hero_player_id=7)

    assert message["player_id"] == 7
    table = message["data"]["table_state"]
    assert table["game_state"] == "PreFlop"
    assert [slot["card"] for slot in table["community_cards"]] == [""] * 5
    seats = message["data"]["seats_state"]
    assert seats[1]["player_id"] == 7
    assert seats[2]["player_id"] == 8
    expected_action = "Bet" if scenario.table_setup.current_bet else ""
    assert seats[2]["last_action"] == expected_action


def test_big_blind_hero_sits_in_bb_seat() -> None:
    state = to_table_state(_run(Topic.TURN_PROBE_BET, 5))["data"]["data_state"]
    assert state["seat_idx_bb"] == 1
    assert state["seat_idx_button"] == 2
