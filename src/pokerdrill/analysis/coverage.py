"""Deterministic branch-coverage harness for the topic tables.

Each run generates one topic across a contiguous seed range and tallies which
branch keys and correct answers came out.  The seeds are fixed, so a change in
the tallies means a decision table or classifier changed behaviour.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..core.models import Difficulty, TextStyle, Topic, TrainingRequest
from ..generator import generate

__all__ = ["CoverageConfig", "CoverageReport", "TopicCoverage", "run_coverage"]


@dataclass(frozen=True)
class CoverageConfig:
    topics: tuple[Topic, ...] = tuple(Topic)
    first_seed: int = 0
    samples: int = 200
    difficulty: Difficulty = Difficulty.BEGINNER
    text_style: TextStyle = TextStyle.SIMPLE

    def __post_init__(self) -> None:
        if self.samples <= 0:
            raise ValueError("samples must be positive")
        if not self.topics:
            raise ValueError("at least one topic is required")

    @property
    def seeds(self) -> range:
        return range(self.first_seed, self.first_seed + self.samples)


@dataclass(frozen=True)
class TopicCoverage:
    topic: Topic
    samples: int
    branches: Counter[str] = field(default_factory=Counter)
    correct_ids: Counter[str] = field(default_factory=Counter)

    @property
    def branch_keys(self) -> frozenset[str]:
        return frozenset(self.branches)

    def to_dict(self) -> dict[str, Any]:
        return {
            "topic": self.topic.value,
            "samples": self.samples,
            "branches": dict(sorted(self.branches.items())),
            "correct_ids": dict(sorted(self.correct_ids.items())),
        }


@dataclass(frozen=True)
class CoverageReport:
    config: CoverageConfig
    runs: tuple[TopicCoverage, ...]

    def for_topic(self, topic: Topic) -> TopicCoverage:
        for run in self.runs:
            if run.topic is topic:
                return run
        raise KeyError(f"topic '{topic.value}' not covered")

    def to_dict(self) -> dict[str, Any]:
        return {
            "first_seed": self.config.first_seed,
            "samples": self.config.samples,
            "difficulty": self.config.difficulty.value,
            "runs": [run.to_dict() for run in self.runs],
        }


def _cover(topic: Topic, config: CoverageConfig) -> TopicCoverage:
    branches: Counter[str] = Counter()
    correct: Counter[str] = Counter()
    for seed in config.seeds:
        scenario = generate(
            TrainingRequest(topic=topic, difficulty=config.difficulty, seed=seed, text_style=config.text_style)
        )
        branches[scenario.branch_key] += 1
        correct[scenario.correct_answer.id] += 1
    return TopicCoverage(topic=topic, samples=config.samples, branches=branches, correct_ids=correct)


def run_coverage(config: CoverageConfig | None = None, *, topics: Sequence[Topic] | None = None) -> CoverageReport:
    cfg = config or CoverageConfig()
    selected = tuple(topics) if topics else cfg.topics
    return CoverageReport(config=cfg, runs=tuple(_cover(topic, cfg) for topic in selected))
