"""
Track Scheduling Core

Slots with a minute budget that events are placed into, plus the
rendering of a slot's timetable.
"""

from .core.slot import Slot
from .core.duration import Duration
from .core.constants import MIN_ROOM_MINUTES, CLOCK_FORMAT
