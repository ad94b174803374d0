from __future__ import annotations

import json

from pokerdrill.core.models import Card, Suit, Topic, TrainingRequest, TrainingScenario
from pokerdrill.generator import generate


def test_scenario_round_trips_through_json() -> None:
    scenario = generate(TrainingRequest(topic=Topic.RIVER_CALL_OR_FOLD, seed=31))
    payload = json.loads(json.dumps(scenario.to_dict()))

    assert payload["topic"] == "RiverCallOrFold"
    assert payload["scenario_id"].startswith("RF-")
    assert len(payload["table_setup"]["board"]) == 5
    assert [answer["id"] for answer in payload["answers"]] == ["A", "B", "C"]
    assert TrainingScenario.from_dict(payload) == scenario


def test_card_dict_uses_enum_names() -> None:
    card = Card(10, Suit.HEARTS)
    assert card.to_dict() == {"rank": 10, "suit": "HEARTS", "display": "Th"}
    assert Card.from_dict(card.to_dict()) == card
