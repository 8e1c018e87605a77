"""
Errors raised by the track scheduling core.
"""


class SchedulingError(Exception):
    """Base class for every error raised by track_scheduler."""


class InvalidDurationError(SchedulingError, ValueError):
    """A duration was created with a negative or non-integer length."""

    def __init__(self, length_in_minutes):
        self.length_in_minutes = length_in_minutes
        super().__init__(f"Invalid duration length: {length_in_minutes!r} (must be a non-negative integer)")


class InsufficientCapacityError(SchedulingError):
    """A duration was asked to give up more minutes than it holds."""

    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(f"Cannot reduce {available}min by {requested}min")


class SlotError(SchedulingError):
    """An event could not be placed in a slot."""

    reason = "cannot place event"

    def __init__(self, event_name: str, slot_name: str = ""):
        self.event_name = event_name
        self.slot_name = slot_name
        where = f" in '{slot_name}'" if slot_name else ""
        super().__init__(f"{self.reason}{where}: {event_name}")


class SlotFullError(SlotError):
    reason = "not enough room to fit this event"


class SlotClosedError(SlotError):
    reason = "slot is closed, cannot add event"
