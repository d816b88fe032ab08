"""Mastery level resolution and progress calculation."""

from __future__ import annotations

from skill_tracker.schemas.progress import MasteryLevel, NextLevel

# Ascending, strictly increasing, first threshold 0: every hour total maps to a level.
MASTERY_LEVELS: tuple[MasteryLevel, ...] = (
    MasteryLevel(hours=0, title="Complete Beginner"),
    MasteryLevel(hours=1, title="Complete Noob"),
    MasteryLevel(hours=10, title="Noob"),
    MasteryLevel(hours=25, title="Novice"),
    MasteryLevel(hours=50, title="Amateur"),
    MasteryLevel(hours=100, title="Apprentice"),
    MasteryLevel(hours=250, title="Intermediate"),
    MasteryLevel(hours=500, title="Advanced"),
    MasteryLevel(hours=1000, title="Master"),
    MasteryLevel(hours=2500, title="Grand Master"),
    MasteryLevel(hours=5000, title="Expert"),
    MasteryLevel(hours=10000, title="Dedicated Expert"),
)


def current_level(hours: float) -> str:
    """
    Get the mastery title for an hour total.

    Args:
        hours: Accumulated practice hours

    Returns:
        Title of the highest level whose threshold has been reached

    Examples:
        >>> current_level(0)
        'Complete Beginner'
        >>> current_level(1.5)
        'Complete Noob'
    """
    for level in reversed(MASTERY_LEVELS):
        if hours >= level.hours:
            return level.title
    return MASTERY_LEVELS[0].title


def next_level(hours: float) -> NextLevel | None:
    """
    Get the next mastery level above an hour total.

    Args:
        hours: Accumulated practice hours

    Returns:
        The next level with the hours still needed to reach it, or None
        when the final level has already been reached
    """
    for level in MASTERY_LEVELS:
        if hours < level.hours:
            return NextLevel(
                title=level.title,
                threshold_hours=level.hours,
                hours_remaining=level.hours - hours,
            )
    return None


def _level_index(hours: float) -> int:
    """Index of the level band ``[table[i], table[i+1])`` containing hours."""
    for index in range(len(MASTERY_LEVELS) - 1, -1, -1):
        if hours >= MASTERY_LEVELS[index].hours:
            return index
    return 0


def progress_percent(hours: float) -> float:
    """
    Get progress from the current level toward the next one.

    Args:
        hours: Accumulated practice hours (negative values count as 0)

    Returns:
        Percentage in [0, 100]; exactly 100 at the final level
    """
    hours = max(hours, 0.0)
    index = _level_index(hours)
    if index == len(MASTERY_LEVELS) - 1:
        return 100.0

    floor = MASTERY_LEVELS[index].hours
    span = MASTERY_LEVELS[index + 1].hours - floor
    return min(100.0, (hours - floor) / span * 100)
