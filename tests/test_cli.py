from __future__ import annotations

import json

import pytest

from pokerdrill.cli import build_parser, build_requests, main
from pokerdrill.core.models import Difficulty, Street, TextStyle, Topic, TrainingRequest
from pokerdrill.generator import generate


def test_build_requests_steps_the_seed() -> None:
    args = build_parser().parse_args(["--street", "flop", "--seed", "10", "--count", "3", "--style", "technical"])
    requests = build_requests(args)
    assert [request.seed for request in requests] == [10, 11, 12]
    assert all(request.topic is Street.FLOP for request in requests)
    assert all(request.text_style is TextStyle.TECHNICAL for request in requests)
    assert all(request.difficulty is Difficulty.BEGINNER for request in requests)


def test_json_output_single(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--topic", "BluffSpot", "--seed", "3", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == generate(TrainingRequest(topic=Topic.BLUFF_SPOT, seed=3)).to_dict()


def test_json_output_many(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--topic", "River Call or Fold", "--seed", "3", "--count", "3", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert isinstance(payload, list)
    assert [item["scenario_id"][:3] for item in payload] == ["RF-"] * 3
    assert len({item["scenario_id"] for item in payload}) == 3


def test_interactive_session(capsys: pytest.CaptureFixture[str]) -> None:
    expected = [
        generate(TrainingRequest(topic=Topic.SQUEEZE_PLAY, seed=seed)).correct_answer.id for seed in (1, 2)
    ]
    replies = iter(["x", expected[0], expected[1].lower()])

    code = main(["--topic", "SqueezePlay", "--seed", "1", "--count", "2", "--no-color"], input_fn=lambda _: next(replies))
    assert code == 0
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Correct" in out
    assert "Session Summary" in out
    assert "2 (100%)" in out


def test_quit_before_answering(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--street", "preflop", "--seed", "4", "--no-color"], input_fn=lambda _: "q") == 0
    assert "No drills answered." in capsys.readouterr().out


def test_reveal_skips_prompt(capsys: pytest.CaptureFixture[str]) -> None:
    def _no_input(_: str) -> str:
        raise AssertionError("reveal mode must not prompt")

    assert main(["--topic", "TurnProbeBet", "--seed", "8", "--reveal", "--no-color"], input_fn=_no_input) == 0
    out = capsys.readouterr().out
    scenario = generate(TrainingRequest(topic=Topic.TURN_PROBE_BET, seed=8))
    assert scenario.scenario_id in out
    assert "Session Summary" not in out


def test_bad_arguments_exit() -> None:
    with pytest.raises(SystemExit):
        main(["--topic", "Flopzilla"])
    with pytest.raises(SystemExit):
        main(["--seed", "1"])
    with pytest.raises(SystemExit):
        main(["--topic", "BluffSpot", "--difficulty", "expert"])
