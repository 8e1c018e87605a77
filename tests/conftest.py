"""
Pytest configuration and shared fixtures for track_scheduler tests.
"""
import pytest
from datetime import date, datetime, time

import pytz
from pydantic import BaseModel, Field

from track_scheduler import config
from track_scheduler.config import SlotSettings, build_day_plan
from track_scheduler.scheduling import Duration, Slot


class Talk(BaseModel):
    """Minimal event collaborator, the way a track builder would hand events in."""
    name: str
    length_in_minutes: int = Field(..., ge=0)

    @property
    def duration(self) -> Duration:
        return Duration(self.length_in_minutes)

    @property
    def display_string(self) -> str:
        return f"{self.name} {self.length_in_minutes}min"


@pytest.fixture
def talk():
    """Factory for talks: talk("A", 60)."""
    def _make(name: str, length_in_minutes: int) -> Talk:
        return Talk(name=name, length_in_minutes=length_in_minutes)
    return _make


@pytest.fixture
def nine_am():
    return pytz.UTC.localize(datetime(2026, 10, 19, 9, 0))


@pytest.fixture
def slot(nine_am):
    """A generic 120 minute slot starting at 09:00."""
    return Slot.new(nine_am, 120, "Test Slot")


@pytest.fixture
def day_plan():
    return build_day_plan(SlotSettings(timezone="UTC", schedule_date=date(2026, 10, 19), morning_start=time(9, 0)))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep env overrides and the cached day plan from leaking between tests."""
    for env_name in config.ENV_VARS:
        monkeypatch.delenv(env_name, raising=False)
    config.get_day_plan.cache_clear()
    yield
    config.get_day_plan.cache_clear()
