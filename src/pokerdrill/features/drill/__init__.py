"""Drill feature: scenario cache, answer grading, schemas and API router."""

from .router import create_drill_routers
from .schemas import (
    AnswerRequest,
    AnswerResult,
    BucketPayload,
    DrillPayload,
    PublicAnswer,
    ScenarioResponse,
    StatsPayload,
    TopicPayload,
)
from .service import SCENARIO_NOT_FOUND, DrillManager, DrillServiceConfig

__all__ = [
    "AnswerRequest",
    "AnswerResult",
    "BucketPayload",
    "DrillManager",
    "DrillPayload",
    "DrillServiceConfig",
    "PublicAnswer",
    "SCENARIO_NOT_FOUND",
    "ScenarioResponse",
    "StatsPayload",
    "TopicPayload",
    "create_drill_routers",
]
