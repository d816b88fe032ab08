"""Shared fixtures for the skill tracker tests."""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone

import pytest

from skill_tracker.schemas.skill import Skill


class MemoryStore:
    """Store that keeps saved snapshots in a list."""

    def __init__(self, initial: list[Skill] | None = None) -> None:
        self.initial = list(initial or [])
        self.snapshots: list[list[Skill]] = []

    def load(self) -> list[Skill]:
        return list(self.initial)

    def save(self, skills: list[Skill]) -> None:
        self.snapshots.append(copy.copy(skills))

    @property
    def last(self) -> list[Skill]:
        return self.snapshots[-1]


class FailingStore(MemoryStore):
    """Store whose saves always fail."""

    def save(self, skills: list[Skill]) -> None:
        raise OSError("disk full")


class StepClock:
    """Clock advancing one minute per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 3, 1, 18, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(minutes=1)
        return current


@pytest.fixture
def memory_store():
    """Empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def clock():
    """Deterministic timestamp source."""
    return StepClock()


@pytest.fixture
def make_store():
    """Factory for in-memory stores preloaded with skills."""

    def _make(initial: list[Skill] | None = None) -> MemoryStore:
        return MemoryStore(initial)

    return _make


@pytest.fixture
def make_failing_store():
    """Factory for stores that load the given skills but refuse to save."""

    def _make(initial: list[Skill] | None = None) -> FailingStore:
        return FailingStore(initial)

    return _make
