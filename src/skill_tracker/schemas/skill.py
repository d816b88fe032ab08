"""Skill Pydantic schemas."""

import math
from typing import Annotated

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

SkillName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class LogEntry(BaseModel):
    """One practice-time submission and the running total right after it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    timestamp: AwareDatetime
    hours_added: float = Field(gt=0, allow_inf_nan=False)
    total_hours: float = Field(gt=0, allow_inf_nan=False)


class SkillBase(BaseModel):
    """Base skill schema with common fields."""

    name: SkillName


class SkillCreate(SkillBase):
    """Schema for creating a new skill."""

    pass


class Skill(SkillBase):
    """
    Complete skill record as held by the ledger and persisted by the stores.

    Serialized with camelCase keys (``hoursAdded``, ``totalHours``) so the
    persisted shape matches what the browser client stored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    hours: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    history: tuple[LogEntry, ...] = ()

    @model_validator(mode="after")
    def check_running_total(self) -> "Skill":
        """Reject records whose entry totals or hours disagree with the history sums."""
        running = 0.0
        for position, entry in enumerate(self.history):
            running += entry.hours_added
            if not math.isclose(entry.total_hours, running, rel_tol=1e-9, abs_tol=1e-9):
                raise ValueError(
                    f"history[{position}].totalHours ({entry.total_hours}) must equal "
                    f"the sum of hoursAdded up to that entry ({running})"
                )
        if not math.isclose(self.hours, running, rel_tol=1e-9, abs_tol=1e-9):
            raise ValueError(
                f"hours ({self.hours}) must equal the running total of its history ({running})"
            )
        return self
