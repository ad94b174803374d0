from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from pokerdrill.features.drill import DrillManager, DrillServiceConfig
from pokerdrill.features.drill.router import create_drill_routers
from pokerdrill.web.app import create_app


def _client(manager: DrillManager | None = None) -> tuple[TestClient, DrillManager]:
    manager = manager if manager is not None else DrillManager()
    app = FastAPI()
    app.include_router(create_drill_routers(manager))
    return TestClient(app), manager


def test_scenario_then_answer_round_trip() -> None:
    client, manager = _client()

    response = client.get("/api/v1/drill/scenario", params={"topic": "CheckRaiseSpot", "seed": 77})
    assert response.status_code == 200
    data = response.json()
    drill = data["drill"]
    assert drill["scenario_id"].startswith("CR-")
    assert data["table_state"]["data"]["table_state"]["game_state"] == "Flop"
    assert all("is_correct" not in answer for answer in drill["answers"])

    correct_id = manager.get_scenario(drill["scenario_id"]).correct_answer.id
    answer = client.post(
        "/api/v1/drill/answer",
        json={"scenario_id": drill["scenario_id"], "answer_id": f" {correct_id.lower()} "},
    )
    assert answer.status_code == 200
    result = answer.json()
    assert result["is_correct"] is True
    assert result["correct_id"] == correct_id
    assert result["branch_key"] == drill["branch_key"]

    stats = client.get("/api/v1/drill/stats").json()
    assert stats["answered"] == 1
    assert stats["by_topic"]["CheckRaiseSpot"]["correct"] == 1


def test_same_seed_same_payload() -> None:
    client, _ = _client()
    params = {"street": "river", "difficulty": "Intermediate", "style": "Technical", "seed": 5}
    first = client.get("/api/v1/drill/scenario", params=params).json()
    second = client.get("/api/v1/drill/scenario", params=params).json()
    assert first == second


def test_bad_requests_return_400() -> None:
    client, _ = _client()
    assert client.get("/api/v1/drill/scenario").status_code == 400
    both = client.get("/api/v1/drill/scenario", params={"topic": "BluffSpot", "street": "river"})
    assert both.status_code == 400
    assert "exactly one" in both.json()["detail"]
    assert client.get("/api/v1/drill/scenario", params={"topic": "nope"}).status_code == 400
    assert client.get("/api/v1/drill/scenario", params={"topic": "BluffSpot", "difficulty": "expert"}).status_code == 400

    scenario_id = client.get("/api/v1/drill/scenario", params={"topic": "BluffSpot"}).json()["drill"]["scenario_id"]
    bad_answer = client.post("/api/v1/drill/answer", json={"scenario_id": scenario_id, "answer_id": "Z"})
    assert bad_answer.status_code == 400
    assert "Unknown answer_id" in bad_answer.json()["detail"]


def test_unknown_scenario_returns_404() -> None:
    client, _ = _client()
    response = client.post("/api/v1/drill/answer", json={"scenario_id": "BL-00000000", "answer_id": "A"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Scenario not found or expired"


def test_evicted_scenario_returns_404() -> None:
    client, _ = _client(DrillManager(DrillServiceConfig(cache_size=1)))
    first = client.get("/api/v1/drill/scenario", params={"topic": "TurnProbeBet", "seed": 1}).json()
    client.get("/api/v1/drill/scenario", params={"topic": "TurnProbeBet", "seed": 2})
    response = client.post(
        "/api/v1/drill/answer", json={"scenario_id": first["drill"]["scenario_id"], "answer_id": "A"}
    )
    assert response.status_code == 404


def test_topics_endpoint() -> None:
    client, _ = _client()
    topics = client.get("/api/v1/drill/topics").json()["topics"]
    assert len(topics) == 16
    assert {"topic": "ThreeBetPotCbet", "prefix": "3B", "name": "3-Bet Pot C-Bet", "street": "Flop"} in topics


def test_app_health_and_router() -> None:
    manager = DrillManager()
    client = TestClient(create_app(manager))
    assert client.get("/healthz").json() == {"status": "ok"}
    response = client.get("/api/v1/drill/scenario", params={"topic": "ICMAndTournamentDecision", "seed": 3})
    assert response.status_code == 200
    assert len(manager) == 1
