"""Pydantic schemas package."""

from skill_tracker.schemas.progress import (
    ChartPoint,
    HistoryItem,
    MasteryLevel,
    NextLevel,
    SkillSummary,
)
from skill_tracker.schemas.skill import LogEntry, Skill, SkillBase, SkillCreate
from skill_tracker.schemas.time_log import TimeLogRequest, TimeUnit

__all__ = [
    "ChartPoint",
    "HistoryItem",
    "LogEntry",
    "MasteryLevel",
    "NextLevel",
    "Skill",
    "SkillBase",
    "SkillCreate",
    "SkillSummary",
    "TimeLogRequest",
    "TimeUnit",
]
