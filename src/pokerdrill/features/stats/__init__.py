"""Answer history and accuracy summaries for drill sessions."""

from .log import AnswerLog, AnswerRecord, BucketStats, SummaryStats, summarize

__all__ = ["AnswerLog", "AnswerRecord", "BucketStats", "SummaryStats", "summarize"]
