"""Persistence collaborators for the skill collection."""

from __future__ import annotations

import logging
from datetime import timezone
from typing import Protocol

from sqlalchemy.orm import Session, sessionmaker

from skill_tracker.config import Settings
from skill_tracker.database import SessionLocal
from skill_tracker.init_db import init_database
from skill_tracker.models.log_entry import LogEntry as LogEntryRecord
from skill_tracker.models.skill import Skill as SkillRecord
from skill_tracker.schemas.skill import LogEntry, Skill
from skill_tracker.utils.file_storage import file_exists, load_json, save_json

logger = logging.getLogger(__name__)


class SkillStore(Protocol):
    """Loads the skill collection on start and durably stores it on change."""

    def load(self) -> list[Skill]: ...

    def save(self, skills: list[Skill]) -> None: ...


class JsonFileStore:
    """
    Store the whole collection as one JSON array in a local file.

    Each skill is written as ``{id, name, hours, history: [{timestamp,
    hoursAdded, totalHours}]}``. A missing file loads as an empty collection.
    """

    def __init__(self, filepath: str) -> None:
        """
        Initialize the store.

        Args:
            filepath: Snapshot path (absolute or relative to data_root)
        """
        self.filepath = filepath

    def load(self) -> list[Skill]:
        if not file_exists(self.filepath):
            logger.debug("No skills file at %s, starting empty", self.filepath)
            return []
        data = load_json(self.filepath)
        skills = [Skill.model_validate(item) for item in data]
        logger.debug("Loaded %d skills from %s", len(skills), self.filepath)
        return skills

    def save(self, skills: list[Skill]) -> None:
        payload = [skill.model_dump(mode="json", by_alias=True) for skill in skills]
        path = save_json(payload, self.filepath)
        logger.debug("Saved %d skills to %s", len(skills), path)


class SqlSkillStore:
    """
    Store the collection in the ``skills`` and ``log_entries`` tables.

    ``save`` replaces the stored snapshot inside a single transaction, so a
    failed save leaves the previous snapshot intact.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        """
        Initialize the store.

        Args:
            session_factory: SQLAlchemy session factory bound to an engine
                whose tables already exist
        """
        self.session_factory = session_factory

    def load(self) -> list[Skill]:
        with self.session_factory() as db:
            records = db.query(SkillRecord).order_by(SkillRecord.position).all()
            entries = db.query(LogEntryRecord).order_by(
                LogEntryRecord.skill_id, LogEntryRecord.position
            ).all()

            history: dict[int, list[LogEntry]] = {}
            for entry in entries:
                history.setdefault(entry.skill_id, []).append(
                    LogEntry(
                        timestamp=entry.timestamp.replace(tzinfo=timezone.utc),
                        hours_added=entry.hours_added,
                        total_hours=entry.total_hours,
                    )
                )

            skills = [
                Skill(
                    id=record.id,
                    name=record.name,
                    hours=record.hours,
                    history=tuple(history.get(record.id, [])),
                )
                for record in records
            ]
        logger.debug("Loaded %d skills from database", len(skills))
        return skills

    def save(self, skills: list[Skill]) -> None:
        with self.session_factory() as db:
            try:
                db.query(LogEntryRecord).delete()
                db.query(SkillRecord).delete()
                db.add_all(
                    SkillRecord(id=skill.id, name=skill.name, hours=skill.hours, position=position)
                    for position, skill in enumerate(skills)
                )
                db.flush()  # Skill rows must exist before their entries
                db.add_all(
                    LogEntryRecord(
                        skill_id=skill.id,
                        position=index,
                        timestamp=entry.timestamp.astimezone(timezone.utc).replace(tzinfo=None),
                        hours_added=entry.hours_added,
                        total_hours=entry.total_hours,
                    )
                    for skill in skills
                    for index, entry in enumerate(skill.history)
                )
                db.commit()
            except Exception:
                db.rollback()
                raise
        logger.debug("Saved %d skills to database", len(skills))


def create_store(settings: Settings) -> SkillStore:
    """
    Build the store selected by ``settings.storage_backend``.

    Args:
        settings: Application settings

    Returns:
        A JSON file store or a SQLite-backed store
    """
    if settings.storage_backend == "sqlite":
        init_database()
        return SqlSkillStore(SessionLocal)

    assert settings.skills_file is not None, "skills_file must be set in Settings"
    return JsonFileStore(settings.skills_file)
