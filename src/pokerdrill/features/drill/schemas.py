from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

__all__ = [
    "AnswerRequest",
    "AnswerResult",
    "BucketPayload",
    "DrillPayload",
    "PublicAnswer",
    "ScenarioResponse",
    "StatsPayload",
    "TopicPayload",
]


class _APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class PublicAnswer(_APIModel):
    """An answer as shown before it is chosen: no correctness, no explanation."""

    id: str
    text: str


class DrillPayload(_APIModel):
    scenario_id: str
    topic: str
    topic_name: str
    street: str
    difficulty: str
    branch_key: str | None = None
    question: str
    answers: list[PublicAnswer]


class ScenarioResponse(_APIModel):
    table_state: dict[str, Any]
    drill: DrillPayload


class AnswerRequest(BaseModel):
    scenario_id: str = Field(min_length=1)
    answer_id: str = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        for key in ("scenario_id", "answer_id"):
            value = cleaned.get(key)
            if isinstance(value, str):
                cleaned[key] = value.strip()
        answer = cleaned.get("answer_id")
        if isinstance(answer, str):
            cleaned["answer_id"] = answer.upper()
        return cleaned


class AnswerResult(_APIModel):
    is_correct: bool
    explanation: str
    correct_id: str
    branch_key: str


class BucketPayload(_APIModel):
    answered: int
    correct: int
    accuracy_pct: float


class StatsPayload(_APIModel):
    answered: int
    correct: int
    accuracy_pct: float
    by_topic: dict[str, BucketPayload]
    by_branch: dict[str, BucketPayload]


class TopicPayload(_APIModel):
    topic: str
    prefix: str
    name: str
    street: str
