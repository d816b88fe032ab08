"""Time ledger: the skill collection and its append-only practice history."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from pydantic import ValidationError

from skill_tracker.schemas.skill import LogEntry, Skill, SkillCreate
from skill_tracker.schemas.time_log import TimeLogRequest, TimeUnit
from skill_tracker.services.storage import SkillStore

logger = logging.getLogger(__name__)


class InvalidInputError(Exception):
    """Raised when a caller submits a name, amount or skill id the ledger rejects."""


class SkillNotFoundError(InvalidInputError):
    """Raised when an operation targets a skill id that does not exist."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimeLedger:
    """
    In-memory skill repository with persistence injected.

    Handles:
    - Hydrating the collection from the store on construction
    - Creating skills and appending practice time to them
    - Emitting the full collection to the store on every mutation

    Every mutation builds the updated collection first and only commits it
    in memory once the store has saved it, so a rejected input or a failed
    save leaves the ledger unchanged.
    """

    def __init__(self, store: SkillStore, clock: Callable[[], datetime] = _utcnow) -> None:
        """
        Initialize the ledger.

        Args:
            store: Persistence collaborator providing load/save
            clock: Source of entry timestamps (timezone-aware)

        Raises:
            ValueError: If the stored collection repeats a skill id
        """
        self.store = store
        self.clock = clock
        self._skills = self._hydrate(store.load())
        logger.info("Ledger hydrated with %d skills", len(self._skills))

    @staticmethod
    def _hydrate(skills: list[Skill]) -> dict[int, Skill]:
        """
        Index loaded skills by id, keeping their order.

        Raises:
            ValueError: If two loaded skills share an id
        """
        indexed: dict[int, Skill] = {}
        for skill in skills:
            if skill.id in indexed:
                raise ValueError(f"Stored collection has duplicate skill id {skill.id}")
            indexed[skill.id] = skill
        return indexed

    @property
    def skills(self) -> list[Skill]:
        """All skills in creation order."""
        return list(self._skills.values())

    def get_skill(self, skill_id: int) -> Skill:
        """
        Look up a skill by id.

        Raises:
            SkillNotFoundError: If no skill has this id
        """
        try:
            return self._skills[skill_id]
        except KeyError:
            raise SkillNotFoundError(f"Skill {skill_id} not found") from None

    def create_skill(self, name: str) -> Skill:
        """
        Create an empty skill.

        Args:
            name: Skill name; surrounding whitespace is stripped

        Returns:
            The new skill with zero hours and no history

        Raises:
            InvalidInputError: If the name is empty or whitespace-only
        """
        try:
            request = SkillCreate(name=name)
        except ValidationError as exc:
            raise InvalidInputError("Skill name must not be empty") from exc

        skill = Skill(id=self._next_id(), name=request.name)
        self._commit(skill)
        logger.info("Created skill %d (%s)", skill.id, skill.name)
        return skill

    def log_time(
        self, skill_id: int, amount: float, unit: TimeUnit | str = TimeUnit.HOURS
    ) -> Skill:
        """
        Append practice time to a skill.

        Args:
            skill_id: Id of the skill to log against
            amount: Positive, finite duration in ``unit``
            unit: ``hours`` or ``minutes``

        Returns:
            The updated skill

        Raises:
            InvalidInputError: If the amount or unit is invalid
            SkillNotFoundError: If the skill does not exist
        """
        try:
            request = TimeLogRequest(amount=amount, unit=unit)
        except ValidationError as exc:
            raise InvalidInputError(
                f"Time must be a positive number of hours or minutes, got {amount!r} {unit!r}"
            ) from exc

        skill = self.get_skill(skill_id)
        hours_added = request.to_hours()
        total = skill.hours + hours_added
        entry = LogEntry(timestamp=self.clock(), hours_added=hours_added, total_hours=total)
        updated = skill.model_copy(update={"hours": total, "history": (*skill.history, entry)})

        self._commit(updated)
        logger.info("Logged %.4f h to skill %d (total %.4f h)", hours_added, skill_id, total)
        return updated

    def history(self, skill_id: int) -> list[LogEntry]:
        """
        Get a skill's log entries, most recent first.

        Raises:
            SkillNotFoundError: If the skill does not exist
        """
        return list(reversed(self.get_skill(skill_id).history))

    def _next_id(self) -> int:
        return max(self._skills, default=0) + 1

    def _commit(self, skill: Skill) -> None:
        """Save the collection with ``skill`` inserted or replaced, then apply it."""
        staged = dict(self._skills)
        staged[skill.id] = skill
        self.store.save(list(staged.values()))
        self._skills = staged
