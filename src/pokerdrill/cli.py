from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Sequence

from .core.errors import DrillValidationError
from .core.models import (
    Street,
    Topic,
    TrainingRequest,
    parse_difficulty,
    parse_street,
    parse_text_style,
    parse_topic,
)
from .features.stats import AnswerLog, AnswerRecord
from .generator import generate
from .ui.presenters import RichDrillPresenter

__all__ = ["build_parser", "build_requests", "main"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pokerdrill", description="Seeded poker decision drills")
    selector = parser.add_mutually_exclusive_group(required=True)
    selector.add_argument("--topic", help="Drill topic, e.g. PreflopDecision or 'Bluff Spot'")
    selector.add_argument("--street", help="Pick a random topic on this street (preflop/flop/turn/river)")
    parser.add_argument("--difficulty", default="Beginner", help="Beginner, Intermediate or Advanced")
    # Successive drills use seed, seed+1, ... so a run can be replayed.
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (random if omitted)")
    parser.add_argument("--style", default="Simple", help="Explanation style: Simple or Technical")
    parser.add_argument("--count", type=int, default=1, help="Number of drills to generate")
    parser.add_argument("--json", action="store_true", help="Print scenarios as JSON instead of quizzing")
    parser.add_argument("--reveal", action="store_true", help="Show answers and explanations without prompting")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output (default is colored)")
    parser.add_argument("--verbose", action="store_true", help="Log generator debug output to stderr")
    return parser


def build_requests(args: argparse.Namespace) -> list[TrainingRequest]:
    selector: Topic | Street = parse_topic(args.topic) if args.topic else parse_street(args.street)
    difficulty = parse_difficulty(args.difficulty)
    style = parse_text_style(args.style)
    count = max(1, args.count)
    return [
        TrainingRequest(
            topic=selector,
            difficulty=difficulty,
            seed=None if args.seed is None else args.seed + offset,
            text_style=style,
        )
        for offset in range(count)
    ]


def main(argv: Sequence[str] | None = None, *, input_fn: Callable[[str], str] = input) -> int:
    parser = build_parser()
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        requests = build_requests(args)
    except DrillValidationError as exc:
        parser.error(str(exc))

    scenarios = [generate(request) for request in requests]

    if args.json:
        payload = [scenario.to_dict() for scenario in scenarios]
        print(json.dumps(payload if len(payload) > 1 else payload[0], indent=2))
        return 0

    presenter = RichDrillPresenter(no_color=args.no_color, input_fn=input_fn)
    log = AnswerLog()
    for index, (request, scenario) in enumerate(zip(requests, scenarios), 1):
        presenter.show_scenario(scenario, index, len(scenarios))
        if args.reveal:
            presenter.reveal(scenario)
            continue
        answer_id = presenter.prompt_answer(scenario)
        if answer_id is None:
            break
        chosen = scenario.answer(answer_id)
        presenter.feedback(scenario, chosen)
        log.append(
            AnswerRecord(
                scenario_id=scenario.scenario_id,
                topic=scenario.topic,
                branch_key=scenario.branch_key,
                difficulty=request.difficulty,
                answer_id=chosen.id,
                is_correct=chosen.is_correct,
            )
        )

    if not args.reveal:
        presenter.summary(log.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
