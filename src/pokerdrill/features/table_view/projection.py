"""Render a :class:`TrainingScenario` as an ``NtTableState`` message.

The table client expects a six-seat layout.  Hero always sits in seat 1 and
the first non-hero player in seat 2.  The other seats are empty.  Nothing here
touches the generator, so the same scenario always renders the same payload.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ...core.models import Card, PlayerState, Position, TrainingScenario
from ...dynamic.cards import client_card

__all__ = ["SEAT_COUNT", "game_state_name", "to_table_state"]

SEAT_COUNT = 6
HERO_SEAT = 1
VILLAIN_SEAT = 2
TRAINING_TABLE_ID = 9999
DEFAULT_STACK = 100
_CURRENCY = "xPKR"


def game_state_name(board_len: int) -> str:
    if board_len == 0:
        return "PreFlop"
    if board_len == 3:
        return "Flop"
    if board_len == 4:
        return "Turn"
    return "River"


def _card_slot(index: int, card: str) -> dict[str, Any]:
    return {"id": index, "card": card, "isCombination": False, "isNoCombination": False}


def _community_cards(board: Sequence[Card]) -> list[dict[str, Any]]:
    return [_card_slot(i, client_card(board[i]) if i < len(board) else "") for i in range(5)]


def _pre_actions() -> dict[str, bool]:
    return {"check": False, "call": False, "fold": False, "raise": False, "bet": False}


def _seat(
    seat_idx: int,
    *,
    player_id: int = 0,
    playing: bool = False,
    active: bool = False,
    stack: int = 0,
    name: str = "",
    bet: float = 0,
    last_action: str = "",
    cards: list[dict[str, Any]] | None = None,
    call_amount: float = 0,
) -> dict[str, Any]:
    return {
        "seat_idx": seat_idx,
        "player_id": player_id,
        "is_playing": playing,
        "is_active": active,
        "is_folded": False,
        "is_all_in": False,
        "is_in_sit_out": False,
        "rebuy_time": None,
        "stack": {"value": stack, "currency": _CURRENCY},
        "name": name,
        "bet": bet,
        "last_action": last_action,
        "cards": cards or [],
        "action_option": {"actions": [], "min_bet": 0, "max_bet": 0, "call_amount": call_amount},
        "pre_actions": _pre_actions(),
        "country": None,
        "image": None,
        "isShowdown": False,
        "emoji": None,
    }


def _blind_seats(hero: Position, villain: Position) -> dict[str, int]:
    seats = {"seat_idx_bb": 0, "seat_idx_sb": 0, "seat_idx_button": 0}
    keys = {Position.BB: "seat_idx_bb", Position.SB: "seat_idx_sb", Position.BTN: "seat_idx_button"}
    for position in (hero, villain):
        key = keys.get(position)
        if key is not None:
            seats[key] = HERO_SEAT if position is hero else VILLAIN_SEAT
    return seats


def _find(players: Sequence[PlayerState], *, hero: bool) -> PlayerState | None:
    return next((player for player in players if player.is_hero is hero), None)


def to_table_state(scenario: TrainingScenario, hero_player_id: int = 1) -> dict[str, Any]:
    setup = scenario.table_setup
    villain = _find(setup.players, hero=False)
    hero = _find(setup.players, hero=True)
    villain_position = villain.position if villain else Position.BB
    villain_stack = villain.stack if villain else DEFAULT_STACK
    hero_stack = hero.stack if hero else DEFAULT_STACK

    pot = float(setup.pot_size)
    current_bet = float(setup.current_bet)

    hero_seat = _seat(
        HERO_SEAT,
        player_id=hero_player_id,
        playing=True,
        active=True,
        stack=hero_stack,
        name="You",
        cards=[_card_slot(i, client_card(card)) for i, card in enumerate(setup.hero_hand)],
        call_amount=current_bet,
    )
    villain_seat = _seat(
        VILLAIN_SEAT,
        player_id=hero_player_id + 1,
        playing=True,
        stack=villain_stack,
        name="Villain",
        bet=current_bet,
        last_action="Bet" if setup.current_bet > 0 else "",
        cards=[_card_slot(0, "b"), _card_slot(1, "b")],
    )
    seats = [_seat(0), hero_seat, villain_seat, *(_seat(idx) for idx in range(3, SEAT_COUNT))]

    return {
        "nt_type": "NtTableState",
        "player_id": hero_player_id,
        "pool_id": 0,
        "data": {
            "data_state": {
                "table_id": TRAINING_TABLE_ID,
                "display_table_id": f"training/{scenario.scenario_id}",
                "active_seat_idx": HERO_SEAT,
                **_blind_seats(setup.hero_position, villain_position),
                "pot": [pot],
                "sb_amount": 1.0,
                "bb_amount": 2.0,
                "action_time_limit": {"secs": 0, "nanos": 0},
                "delay_type": "UserActionDelay",
                "pool_type": "CommonHoldem",
                "blitz": False,
                "spectating": False,
                "pots": [[{"pot_id": 0, "value": pot, "displayValue": pot, "position": ""}]],
            },
            "table_state": {
                "game_state": game_state_name(len(setup.board)),
                "community_cards": _community_cards(setup.board),
                "showdown_state": {"first_seat_idx_to_show": 0, "winners": {}},
            },
            "seats_state": seats,
        },
        "service_type": "free",
    }
