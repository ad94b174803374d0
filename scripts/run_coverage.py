#!/usr/bin/env python3

"""Print branch-key coverage for the drill topics as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

if __package__ is None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

from pokerdrill.analysis.coverage import CoverageConfig, run_coverage
from pokerdrill.core.models import Topic, parse_difficulty, parse_topic


def _parse_topics(raw: str) -> tuple[Topic, ...]:
    try:
        return tuple(parse_topic(item) for item in raw.split(",") if item.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run deterministic branch coverage over seed ranges")
    parser.add_argument("--samples", type=int, default=200, help="Seeds per topic")
    parser.add_argument("--first-seed", type=int, default=0, help="First seed of the range")
    parser.add_argument("--difficulty", type=str, default="Beginner", help="Beginner/Intermediate/Advanced")
    parser.add_argument(
        "--topics",
        type=_parse_topics,
        default=tuple(Topic),
        help="Comma-separated topic names (default: all)",
    )
    args = parser.parse_args(argv)

    config = CoverageConfig(
        topics=args.topics,
        first_seed=args.first_seed,
        samples=args.samples,
        difficulty=parse_difficulty(args.difficulty),
    )
    json.dump(run_coverage(config).to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
