"""
Clock helpers for rendering and advancing points in time.
"""

from datetime import datetime, timedelta
from ..core.constants import CLOCK_FORMAT


def format_clock(moment: datetime) -> str:
    """Format a point in time as a 12-hour clock label, e.g. ``09:00AM``."""
    return moment.strftime(CLOCK_FORMAT)


def advance_clock(moment: datetime, minutes: int) -> datetime:
    """Return a new point in time ``minutes`` after ``moment``."""
    advanced = moment + timedelta(minutes=minutes)
    # pytz zones need normalize() to pick the right offset after arithmetic
    tz = advanced.tzinfo
    if tz is not None and hasattr(tz, "normalize"):
        advanced = tz.normalize(advanced)
    return advanced
