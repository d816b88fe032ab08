"""Duration and timestamp formatting for display."""

import math
from datetime import datetime


def format_duration(hours: float) -> str:
    """
    Format a fractional hour quantity as hours and minutes.

    Minutes are rounded half-up. A value that rounds to 60 minutes carries
    into the next whole hour and keeps an explicit "0 min", so it never
    renders as "60 min".

    Args:
        hours: Non-negative number of hours

    Returns:
        "<m> min" under one hour, "<h> hr" on a whole hour,
        otherwise "<h> hr <m> min"

    Examples:
        >>> format_duration(1.5)
        '1 hr 30 min'
        >>> format_duration(0.25)
        '15 min'
        >>> format_duration(2)
        '2 hr'
        >>> format_duration(1.9999)
        '2 hr 0 min'
    """
    whole_hours = math.floor(hours)
    minutes = math.floor((hours - whole_hours) * 60 + 0.5)
    if minutes == 60:
        return f"{whole_hours + 1} hr 0 min"

    if whole_hours == 0:
        return f"{minutes} min"
    if minutes == 0:
        return f"{whole_hours} hr"
    return f"{whole_hours} hr {minutes} min"


def format_timestamp(timestamp: datetime, fmt: str = "%Y-%m-%d %H:%M") -> str:
    """
    Format a log entry timestamp in local time.

    Args:
        timestamp: Timezone-aware instant
        fmt: strftime pattern

    Returns:
        The formatted local time
    """
    return timestamp.astimezone().strftime(fmt)
