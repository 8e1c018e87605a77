"""
Slot representation for a single track day.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ... import config
from ...exceptions import SlotClosedError, SlotFullError
from ...schemas import SchedulableEvent
from ..utils.time_utils import advance_clock, format_clock
from .constants import MIN_ROOM_MINUTES, DISPLAY_DELIMITER
from .duration import Duration

logger = logging.getLogger(__name__)


class Slot:
    """
    One contiguous span of a track (morning, lunch, noon, ...).

    The slot owns its remaining Duration and the ordered list of events
    placed in it; the order events are added is the order they run in.
    A networking event closes the slot: it always fits, and nothing can be
    added after it.
    """
    def __init__(self, start_time: datetime, duration: Duration, name: str = ""):
        self._start_time = start_time
        self._initial_duration = duration.copy()
        self._duration = duration.copy()
        self._events: List[SchedulableEvent] = []
        self._closed = False
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def end_time(self) -> datetime:
        return self._initial_duration.add_to(self._start_time)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def remaining_duration(self) -> Duration:
        # Copy so callers can't spend the budget behind the slot's back
        return self._duration.copy()

    @property
    def initial_duration(self) -> Duration:
        return self._initial_duration.copy()

    @property
    def used_duration(self) -> Duration:
        return Duration(self._initial_duration.length_in_minutes - self._duration.length_in_minutes)

    @property
    def events(self) -> Tuple[SchedulableEvent, ...]:
        return tuple(self._events)

# ================================
# CAPACITY CHECKS
# ================================

    def has_room_for(self, event: SchedulableEvent) -> bool:
        return self._duration.can_accommodate(event.duration)

    def has_room_left(self) -> bool:
        """True while the slot could still take a short event."""
        return self._duration.length_in_minutes >= MIN_ROOM_MINUTES

# ================================
# PLACEMENT
# ================================

    def add_event(self, event: SchedulableEvent):
        """
        Append an event to the end of the slot and spend its duration.

        Raises SlotClosedError if the slot has been closed and SlotFullError
        if the event is longer than the remaining time. The slot is left
        untouched when either is raised.
        """
        self._place(event, len(self._events))
        logger.debug(f"Added '{event.name}' to '{self._name}', {self._duration.length_in_minutes}min left")

    def replace_event(self, old_event: SchedulableEvent, new_event: SchedulableEvent):
        """
        Swap a placed event (matched by name) for another one in the same position.

        Does nothing if no placed event has old_event's name. If the new event
        can't be placed, the old one is put back where it was and the
        SlotFullError/SlotClosedError is re-raised.
        """
        index = self._find_event_index(old_event.name)
        if index is None:
            logger.warning(f"Replace skipped: '{old_event.name}' is not placed in '{self._name}'")
            return

        removed = self._events.pop(index)
        self._duration.add_by(removed.duration)
        try:
            self._place(new_event, index)
        except (SlotFullError, SlotClosedError):
            self._events.insert(index, removed)
            self._duration.reduce_by(removed.duration)
            raise
        logger.debug(f"Replaced '{removed.name}' with '{new_event.name}' in '{self._name}'")

    def add_networking_event(self, event: SchedulableEvent):
        """Append a closing event regardless of remaining time and close the slot."""
        self._events.append(event)
        self._closed = True
        logger.debug(f"Closed '{self._name}' with networking event '{event.name}'")

    def _place(self, event: SchedulableEvent, index: int):
        if self._closed:
            logger.warning(f"Rejected '{event.name}': '{self._name}' is closed")
            raise SlotClosedError(event.name, self._name)
        if not self.has_room_for(event):
            logger.warning(
                f"Rejected '{event.name}' ({event.duration.length_in_minutes}min): "
                f"only {self._duration.length_in_minutes}min left in '{self._name}'"
            )
            raise SlotFullError(event.name, self._name)

        self._events.insert(index, event)
        self._duration.reduce_by(event.duration)

    def _find_event_index(self, name: str) -> Optional[int]:
        for index, placed in enumerate(self._events):
            if placed.name == name:
                return index
        return None

# ================================
# RENDERING
# ================================

    @property
    def schedule(self) -> Dict[str, str]:
        """Clock label -> display text, in the order the events run."""
        schedule = {}
        clock = self._start_time
        for event in self._events:
            schedule[format_clock(clock)] = event.display_string
            clock = advance_clock(clock, event.duration.length_in_minutes)
        return schedule

    @property
    def display_string(self) -> str:
        segments = [f" [{time_label}-{text}] " for time_label, text in self.schedule.items()]
        return DISPLAY_DELIMITER.join(segments)

# ================================
# FACTORIES
# ================================

    @classmethod
    def new(cls, start_time: datetime, length_in_minutes: int, name: str = "") -> "Slot":
        return cls(start_time, Duration.create(length_in_minutes), name)

    @classmethod
    def from_standard(cls, standard: "config.StandardSlot") -> "Slot":
        # Fresh Duration every time; slots never share a budget
        return cls.new(standard.start_time, standard.length_in_minutes, standard.name)

    @classmethod
    def new_morning_slot(cls, plan: Optional["config.DayPlan"] = None) -> "Slot":
        return cls.from_standard((plan or config.get_day_plan()).morning)

    @classmethod
    def new_lunch_slot(cls, plan: Optional["config.DayPlan"] = None) -> "Slot":
        return cls.from_standard((plan or config.get_day_plan()).lunch)

    @classmethod
    def new_noon_slot(cls, plan: Optional["config.DayPlan"] = None) -> "Slot":
        return cls.from_standard((plan or config.get_day_plan()).noon)

    def __repr__(self):
        return (
            f"Slot({self._name or 'unnamed'}, {self._start_time.strftime('%I:%M %p')} - "
            f"{self.end_time.strftime('%I:%M %p')}, remaining={self._duration.length_in_minutes}min)"
        )
