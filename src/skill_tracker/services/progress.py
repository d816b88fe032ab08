"""Display records derived on demand from skill hours."""

from __future__ import annotations

from skill_tracker.config import tracker_config
from skill_tracker.schemas.progress import ChartPoint, HistoryItem, SkillSummary
from skill_tracker.schemas.skill import LogEntry, Skill
from skill_tracker.services.mastery import current_level, next_level, progress_percent
from skill_tracker.utils.time_format import format_duration, format_timestamp


def summarize_skill(skill: Skill) -> SkillSummary:
    """
    Build the card view of a skill.

    Args:
        skill: Skill record

    Returns:
        Summary with formatted hours, mastery title, next level and progress
    """
    return SkillSummary(
        id=skill.id,
        name=skill.name,
        hours=skill.hours,
        hours_display=format_duration(skill.hours),
        mastery_title=current_level(skill.hours),
        next_level=next_level(skill.hours),
        progress_percent=progress_percent(skill.hours),
        entries=len(skill.history),
    )


def history_items(entries: list[LogEntry], timestamp_format: str | None = None) -> list[HistoryItem]:
    """Render log entries as history table rows, preserving their order."""
    fmt = timestamp_format or tracker_config.timestamp_format
    return [
        HistoryItem(
            timestamp=entry.timestamp,
            timestamp_display=format_timestamp(entry.timestamp, fmt),
            hours_added=entry.hours_added,
            hours_added_display=format_duration(entry.hours_added),
            total_hours=entry.total_hours,
            total_hours_display=format_duration(entry.total_hours),
        )
        for entry in entries
    ]


def truncate_label(name: str, max_chars: int) -> str:
    """
    Shorten a chart label.

    Examples:
        >>> truncate_label("Woodworking", 10)
        'Woodworkin...'
        >>> truncate_label("Guitar", 10)
        'Guitar'
    """
    if len(name) <= max_chars:
        return name
    return name[:max_chars] + "..."


def chart_data(skills: list[Skill], max_chars: int | None = None) -> list[ChartPoint]:
    """
    Build the hours-per-skill chart series.

    Args:
        skills: Skills in display order
        max_chars: Label length before truncation (defaults to tracker config)

    Returns:
        One point per skill
    """
    limit = max_chars or tracker_config.chart_label_max_chars
    return [ChartPoint(name=truncate_label(skill.name, limit), hours=skill.hours) for skill in skills]
