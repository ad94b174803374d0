from __future__ import annotations

import threading
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ...core.models import Difficulty, Topic

__all__ = ["AnswerLog", "AnswerRecord", "BucketStats", "SummaryStats", "summarize"]


@dataclass(frozen=True)
class AnswerRecord:
    scenario_id: str
    topic: Topic
    branch_key: str
    difficulty: Difficulty
    answer_id: str
    is_correct: bool
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenario_id": self.scenario_id,
            "topic": self.topic.value,
            "branch_key": self.branch_key,
            "difficulty": self.difficulty.name,
            "answer_id": self.answer_id,
            "is_correct": self.is_correct,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class BucketStats:
    answered: int
    correct: int

    @property
    def accuracy_pct(self) -> float:
        if self.answered == 0:
            return 0.0
        return 100.0 * self.correct / self.answered

    def to_dict(self) -> dict[str, Any]:
        return {"answered": self.answered, "correct": self.correct, "accuracy_pct": self.accuracy_pct}


@dataclass(frozen=True)
class SummaryStats:
    answered: int
    correct: int
    accuracy_pct: float
    by_topic: dict[str, BucketStats]
    by_branch: dict[str, BucketStats]

    def to_dict(self) -> dict[str, Any]:
        return {
            "answered": self.answered,
            "correct": self.correct,
            "accuracy_pct": self.accuracy_pct,
            "by_topic": {key: bucket.to_dict() for key, bucket in self.by_topic.items()},
            "by_branch": {key: bucket.to_dict() for key, bucket in self.by_branch.items()},
        }


class AnswerLog:
    """Append-only, thread-safe history of submitted answers."""

    def __init__(self, records: Iterable[AnswerRecord] = ()) -> None:
        self._records: list[AnswerRecord] = list(records)
        self._lock = threading.Lock()

    def append(self, record: AnswerRecord) -> None:
        with self._lock:
            self._records.append(record)

    def records(self) -> tuple[AnswerRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def summary(self) -> SummaryStats:
        return summarize(self.records())


def _bucket(records: Sequence[AnswerRecord]) -> BucketStats:
    return BucketStats(answered=len(records), correct=sum(1 for r in records if r.is_correct))


def summarize(records: Sequence[AnswerRecord]) -> SummaryStats:
    if not records:
        return SummaryStats(answered=0, correct=0, accuracy_pct=0.0, by_topic={}, by_branch={})

    topics: dict[str, list[AnswerRecord]] = {}
    branches: dict[str, list[AnswerRecord]] = {}
    for record in records:
        topics.setdefault(record.topic.value, []).append(record)
        # branch keys repeat across topics, so they are namespaced by prefix
        branches.setdefault(f"{record.topic.prefix}:{record.branch_key}", []).append(record)

    overall = _bucket(records)
    return SummaryStats(
        answered=overall.answered,
        correct=overall.correct,
        accuracy_pct=overall.accuracy_pct,
        by_topic={key: _bucket(group) for key, group in sorted(topics.items())},
        by_branch={key: _bucket(group) for key, group in sorted(branches.items())},
    )
