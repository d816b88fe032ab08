"""Database models package."""

from skill_tracker.models.log_entry import LogEntry
from skill_tracker.models.skill import Skill

__all__ = ["Skill", "LogEntry"]
