"""
Configuration for the standard track day.

Settings come from the environment (optionally a .env file). The canonical
morning/lunch/noon start times are computed once into a frozen DayPlan that
slot factories read from; nothing here is mutated after it is built.
"""

import os
import logging
from datetime import date, datetime, time
from functools import lru_cache
from typing import Optional

import pytz
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .scheduling.core.constants import MORNING_SLOT_NAME, LUNCH_SLOT_NAME, NOON_SLOT_NAME
from .scheduling.core.duration import Duration

load_dotenv()

logger = logging.getLogger(__name__)

# Environment variable -> SlotSettings field
ENV_VARS = {
    "TRACK_TIMEZONE": "timezone",
    "TRACK_DATE": "schedule_date",
    "MORNING_SLOT_START": "morning_start",
    "MORNING_SLOT_MINUTES": "morning_minutes",
    "LUNCH_SLOT_MINUTES": "lunch_minutes",
    "NOON_SLOT_MINUTES": "noon_minutes",
}


class SlotSettings(BaseModel):
    timezone: str = "UTC"
    schedule_date: Optional[date] = None
    morning_start: time = time(9, 0)
    morning_minutes: int = Field(180, ge=0)
    lunch_minutes: int = Field(60, ge=0)
    noon_minutes: int = Field(240, ge=0)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            pytz.timezone(value)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown timezone: {value}")
        return value


class StandardSlot(BaseModel):
    name: str
    start_time: datetime
    length_in_minutes: int

    model_config = ConfigDict(frozen=True)


class DayPlan(BaseModel):
    morning: StandardSlot
    lunch: StandardSlot
    noon: StandardSlot

    model_config = ConfigDict(frozen=True)


def load_settings() -> SlotSettings:
    """Build settings from whichever TRACK_/..._SLOT_ variables are set."""
    values = {}
    for env_name, field_name in ENV_VARS.items():
        raw = os.getenv(env_name)
        if raw:
            values[field_name] = raw.strip()
    return SlotSettings(**values)


def build_day_plan(settings: SlotSettings) -> DayPlan:
    """
    Lay out the three standard slots back to back: lunch starts when the
    morning ends and noon starts when lunch ends.
    """
    tz = pytz.timezone(settings.timezone)
    day = settings.schedule_date or datetime.now(tz).date()
    morning_start = tz.localize(datetime.combine(day, settings.morning_start))

    lunch_start = Duration(settings.morning_minutes).add_to(morning_start)
    noon_start = Duration(settings.lunch_minutes).add_to(lunch_start)

    plan = DayPlan(
        morning=StandardSlot(name=MORNING_SLOT_NAME, start_time=morning_start, length_in_minutes=settings.morning_minutes),
        lunch=StandardSlot(name=LUNCH_SLOT_NAME, start_time=lunch_start, length_in_minutes=settings.lunch_minutes),
        noon=StandardSlot(name=NOON_SLOT_NAME, start_time=noon_start, length_in_minutes=settings.noon_minutes),
    )
    logger.info(
        f"Built day plan for {day} ({settings.timezone}): "
        f"morning {morning_start:%H:%M}, lunch {lunch_start:%H:%M}, noon {noon_start:%H:%M}"
    )
    return plan


@lru_cache(maxsize=1)
def get_day_plan() -> DayPlan:
    """The process-wide day plan, computed on first use."""
    return build_day_plan(load_settings())
