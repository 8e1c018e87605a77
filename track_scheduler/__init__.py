"""
track_scheduler

Capacity accounting and timetable rendering for a conference track's
morning, lunch and noon slots.
"""

from .config import DayPlan, SlotSettings, get_day_plan
from .exceptions import (
    SchedulingError,
    InvalidDurationError,
    InsufficientCapacityError,
    SlotError,
    SlotFullError,
    SlotClosedError,
)
from .schemas import SchedulableEvent
from .scheduling import Slot, Duration

__version__ = "1.0.0"

__all__ = [
    "Slot",
    "Duration",
    "SchedulableEvent",
    "DayPlan",
    "SlotSettings",
    "get_day_plan",
    "SchedulingError",
    "InvalidDurationError",
    "InsufficientCapacityError",
    "SlotError",
    "SlotFullError",
    "SlotClosedError",
]
