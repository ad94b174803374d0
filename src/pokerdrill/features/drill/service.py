from __future__ import annotations

import logging
import os
import threading
from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass

from ...core import feature_flags
from ...core.errors import DrillValidationError
from ...core.models import (
    Difficulty,
    Street,
    TextStyle,
    Topic,
    TrainingRequest,
    TrainingScenario,
    parse_difficulty,
    parse_street,
    parse_text_style,
    parse_topic,
)
from ...generator import generate
from ..stats import AnswerLog, AnswerRecord
from ..table_view import to_table_state
from .concurrency import run_blocking
from .schemas import (
    AnswerResult,
    BucketPayload,
    DrillPayload,
    PublicAnswer,
    ScenarioResponse,
    StatsPayload,
    TopicPayload,
)

__all__ = ["DrillManager", "DrillServiceConfig", "SCENARIO_NOT_FOUND"]

logger = logging.getLogger(__name__)

SCENARIO_NOT_FOUND = "Scenario not found or expired"
_CACHE_ENV = "POKERDRILL_CACHE_SIZE"


@dataclass(frozen=True)
class DrillServiceConfig:
    """Configuration for the drill service."""

    cache_size: int = 1000
    hero_player_id: int = 1

    def __post_init__(self) -> None:
        if self.cache_size < 1:
            raise ValueError("cache_size must be at least 1")
        if self.hero_player_id < 1:
            raise ValueError("hero_player_id must be positive")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DrillServiceConfig:
        env = os.environ if environ is None else environ
        raw = (env.get(_CACHE_ENV) or "").strip()
        if not raw:
            return cls()
        try:
            size = int(raw)
        except ValueError as exc:
            raise ValueError(f"{_CACHE_ENV} must be an integer, got '{raw}'") from exc
        return cls(cache_size=size)


def _selector(topic: str | Topic | None, street: str | Street | None) -> Topic | Street:
    has_topic = topic not in (None, "")
    has_street = street not in (None, "")
    if has_topic == has_street:
        raise DrillValidationError("Provide exactly one of 'topic' or 'street'")
    return parse_topic(topic) if has_topic else parse_street(street)


class DrillManager:
    """Hands out scenarios and grades answers without revealing them up front.

    Generated scenarios are kept in a bounded cache.  When it is full the
    oldest entry is evicted and answers for it report not found.
    """

    def __init__(self, config: DrillServiceConfig | None = None, log: AnswerLog | None = None) -> None:
        self.config = config or DrillServiceConfig()
        self.log = log if log is not None else AnswerLog()
        self._scenarios: OrderedDict[str, tuple[TrainingScenario, Difficulty]] = OrderedDict()
        self._lock = threading.Lock()
        logger.debug(
            "drill manager ready",
            extra={"cache_size": self.config.cache_size, "flags": sorted(feature_flags.active_flags())},
        )

    # ------------------------------------------------------------------ scenarios
    def new_scenario(
        self,
        *,
        topic: str | Topic | None = None,
        street: str | Street | None = None,
        difficulty: str | Difficulty = Difficulty.BEGINNER,
        style: str | TextStyle = TextStyle.SIMPLE,
        seed: int | None = None,
    ) -> ScenarioResponse:
        request = TrainingRequest(
            topic=_selector(topic, street),
            difficulty=parse_difficulty(difficulty),
            seed=seed,
            text_style=parse_text_style(style),
        )
        scenario = generate(request)
        self._remember(scenario, request.difficulty)
        return self._public_payload(scenario, request.difficulty)

    async def new_scenario_async(self, **kwargs: object) -> ScenarioResponse:
        return await run_blocking(self.new_scenario, **kwargs)

    def _remember(self, scenario: TrainingScenario, difficulty: Difficulty) -> None:
        with self._lock:
            self._scenarios[scenario.scenario_id] = (scenario, difficulty)
            self._scenarios.move_to_end(scenario.scenario_id)
            while len(self._scenarios) > self.config.cache_size:
                evicted, _ = self._scenarios.popitem(last=False)
                logger.debug("evicted drill scenario", extra={"scenario_id": evicted})

    def _public_payload(self, scenario: TrainingScenario, difficulty: Difficulty) -> ScenarioResponse:
        hide_key = feature_flags.is_enabled(feature_flags.HIDE_BRANCH_KEY)
        return ScenarioResponse(
            table_state=to_table_state(scenario, self.config.hero_player_id),
            drill=DrillPayload(
                scenario_id=scenario.scenario_id,
                topic=scenario.topic.value,
                topic_name=scenario.topic.display_name,
                street=scenario.topic.street.value,
                difficulty=difficulty.value,
                branch_key=None if hide_key else scenario.branch_key,
                question=scenario.question,
                answers=[PublicAnswer(id=answer.id, text=answer.text) for answer in scenario.answers],
            ),
        )

    def get_scenario(self, scenario_id: str) -> TrainingScenario:
        with self._lock:
            scenario, _ = self._require_scenario(scenario_id)
        return scenario

    # ------------------------------------------------------------------ answers
    def submit_answer(self, scenario_id: str, answer_id: str) -> AnswerResult:
        with self._lock:
            scenario, difficulty = self._require_scenario(scenario_id)
        chosen = scenario.answer(answer_id)
        correct = scenario.correct_answer
        self.log.append(
            AnswerRecord(
                scenario_id=scenario.scenario_id,
                topic=scenario.topic,
                branch_key=scenario.branch_key,
                difficulty=difficulty,
                answer_id=chosen.id,
                is_correct=chosen.is_correct,
            )
        )
        logger.debug(
            "drill answer submitted",
            extra={"scenario_id": scenario.scenario_id, "answer_id": chosen.id, "is_correct": chosen.is_correct},
        )
        return AnswerResult(
            is_correct=chosen.is_correct,
            explanation=chosen.explanation,
            correct_id=correct.id,
            branch_key=scenario.branch_key,
        )

    async def submit_answer_async(self, scenario_id: str, answer_id: str) -> AnswerResult:
        return await run_blocking(self.submit_answer, scenario_id, answer_id)

    def _require_scenario(self, scenario_id: str) -> tuple[TrainingScenario, Difficulty]:
        entry = self._scenarios.get(scenario_id)
        if entry is None:
            raise KeyError(SCENARIO_NOT_FOUND)
        return entry

    # ------------------------------------------------------------------ read-only views
    def stats(self) -> StatsPayload:
        summary = self.log.summary()
        return StatsPayload(
            answered=summary.answered,
            correct=summary.correct,
            accuracy_pct=summary.accuracy_pct,
            by_topic={key: BucketPayload(**bucket.to_dict()) for key, bucket in summary.by_topic.items()},
            by_branch={key: BucketPayload(**bucket.to_dict()) for key, bucket in summary.by_branch.items()},
        )

    def topics(self) -> list[TopicPayload]:
        return [
            TopicPayload(topic=topic.value, prefix=topic.prefix, name=topic.display_name, street=topic.street.value)
            for topic in Topic
        ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._scenarios)
