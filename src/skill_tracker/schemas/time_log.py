"""Time logging Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, Field


class TimeUnit(str, Enum):
    """Unit a practice duration is entered in."""

    HOURS = "hours"
    MINUTES = "minutes"


class TimeLogRequest(BaseModel):
    """
    Validated practice-time submission.

    ``amount`` is strict: numeric strings and booleans are rejected rather
    than coerced, as are zero, negatives, NaN and infinities.
    """

    amount: float = Field(gt=0, allow_inf_nan=False, strict=True)
    unit: TimeUnit = TimeUnit.HOURS

    def to_hours(self) -> float:
        """Convert the submitted amount to hours."""
        if self.unit is TimeUnit.MINUTES:
            return self.amount / 60
        return self.amount
