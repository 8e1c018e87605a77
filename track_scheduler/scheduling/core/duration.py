"""
Minute-length budget used by slots to track consumed and remaining time.
"""

from datetime import datetime
from ...exceptions import InvalidDurationError, InsufficientCapacityError
from ..utils.time_utils import advance_clock


class Duration:
    """
    A non-negative length of time in whole minutes.

    A Duration is mutable: reduce_by/add_by change it in place so a Slot can
    consume and restore its budget, which also makes it unhashable. It is
    meant to be owned by a single Slot; hand out copy() to anyone else.
    """
    __hash__ = None

    def __init__(self, length_in_minutes: int):
        if isinstance(length_in_minutes, bool) or not isinstance(length_in_minutes, int) or length_in_minutes < 0:
            raise InvalidDurationError(length_in_minutes)
        self._length_in_minutes = length_in_minutes

    @classmethod
    def create(cls, length_in_minutes: int) -> "Duration":
        return cls(length_in_minutes)

    @property
    def length_in_minutes(self) -> int:
        return self._length_in_minutes

    def can_accommodate(self, other) -> bool:
        return other.length_in_minutes <= self._length_in_minutes

    def reduce_by(self, other):
        if not self.can_accommodate(other):
            raise InsufficientCapacityError(self._length_in_minutes, other.length_in_minutes)
        self._length_in_minutes -= other.length_in_minutes

    def add_by(self, other):
        self._length_in_minutes += other.length_in_minutes

    def add_to(self, moment: datetime) -> datetime:
        """Return ``moment`` advanced by this duration. Does not mutate either."""
        return advance_clock(moment, self._length_in_minutes)

    def copy(self) -> "Duration":
        return Duration(self._length_in_minutes)

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self._length_in_minutes == other._length_in_minutes

    def __repr__(self):
        return f"Duration({self._length_in_minutes}min)"
