"""Mastery and progress display schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MasteryLevel(BaseModel):
    """A named tier unlocked once cumulative hours reach its threshold."""

    model_config = ConfigDict(frozen=True)

    hours: float
    title: str


class NextLevel(BaseModel):
    """The next tier above a given hour total."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    title: str
    threshold_hours: float
    hours_remaining: float


class SkillSummary(BaseModel):
    """Everything a skill card shows, derived from the skill's hours."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    hours: float
    hours_display: str
    mastery_title: str
    next_level: NextLevel | None
    progress_percent: float
    entries: int


class HistoryItem(BaseModel):
    """One row of a skill's history table."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    timestamp: datetime
    timestamp_display: str
    hours_added: float
    hours_added_display: str
    total_hours: float
    total_hours_display: str


class ChartPoint(BaseModel):
    """One bar of the hours-per-skill chart."""

    name: str
    hours: float
