"""
Capability contract for anything a Slot can schedule.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasLength(Protocol):
    @property
    def length_in_minutes(self) -> int: ...


@runtime_checkable
class SchedulableEvent(Protocol):
    """
    An event placed into a slot. Slots only read these attributes:
    - name: stable identity, used by replace_event to find a placed event
    - duration: how long the event runs (anything exposing length_in_minutes)
    - display_string: text rendered in the schedule
    """

    @property
    def name(self) -> str: ...

    @property
    def duration(self) -> HasLength: ...

    @property
    def display_string(self) -> str: ...
