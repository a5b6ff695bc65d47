"""Per-weekday working hours."""

from __future__ import annotations

from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, Field

from daylayout.config.settings import settings
from daylayout.layout.enums import Weekday
from daylayout.layout.models import DayConfiguration

# How far ahead next_work_day looks before giving up
MAX_LOOKAHEAD_DAYS = 7


def default_day_configuration(enabled: bool = True) -> DayConfiguration:
    return DayConfiguration(
        enabled=enabled,
        start_time=settings.default_start_time,
        end_time=settings.default_end_time,
        break_minutes=settings.default_break_minutes,
    )


class WeekSchedule(BaseModel):
    """One DayConfiguration per weekday. Weekends are off by default."""

    model_config = ConfigDict(frozen=True)

    monday: DayConfiguration = Field(default_factory=default_day_configuration)
    tuesday: DayConfiguration = Field(default_factory=default_day_configuration)
    wednesday: DayConfiguration = Field(default_factory=default_day_configuration)
    thursday: DayConfiguration = Field(default_factory=default_day_configuration)
    friday: DayConfiguration = Field(default_factory=default_day_configuration)
    saturday: DayConfiguration = Field(default_factory=lambda: default_day_configuration(enabled=False))
    sunday: DayConfiguration = Field(default_factory=lambda: default_day_configuration(enabled=False))

    def for_weekday(self, weekday: Weekday) -> DayConfiguration:
        return getattr(self, weekday.name.lower())

    def for_date(self, day: date) -> DayConfiguration:
        return self.for_weekday(Weekday(day.weekday()))

    def next_work_day(self, today: date) -> date:
        """First enabled day after today.

        Falls back to tomorrow when no weekday is enabled.
        """
        for offset in range(1, MAX_LOOKAHEAD_DAYS + 1):
            candidate = today + timedelta(days=offset)
            if self.for_date(candidate).enabled:
                return candidate
        return today + timedelta(days=1)


def default_week_schedule() -> WeekSchedule:
    return WeekSchedule()
