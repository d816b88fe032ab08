"""Services package."""

from skill_tracker.services.ledger import InvalidInputError, SkillNotFoundError, TimeLedger
from skill_tracker.services.storage import JsonFileStore, SkillStore, SqlSkillStore, create_store

__all__ = [
    "InvalidInputError",
    "JsonFileStore",
    "SkillNotFoundError",
    "SkillStore",
    "SqlSkillStore",
    "TimeLedger",
    "create_store",
]
