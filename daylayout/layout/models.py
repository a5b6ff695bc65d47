"""Input and output models for the day layout engine.

Inputs (obligations, items, external blocks, day configuration) are frozen:
the engine reads them and never mutates them. PlacedActivity is the only
mutable model, because the presentation layer updates its status after the
layout has been produced.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from daylayout.layout.enums import (
    ActivitySource,
    ActivityStatus,
    DueBy,
    PreferredTime,
    RecurrenceKind,
    Weekday,
)


def _new_id() -> str:
    return uuid.uuid4().hex[:8]


class RecurrenceRule(BaseModel):
    """When a recurring obligation is due."""

    model_config = ConfigDict(frozen=True)

    kind: RecurrenceKind = Field(default=RecurrenceKind.DAILY, description="Recurrence kind")
    weekdays: tuple[Weekday, ...] = Field(
        default=(),
        description="Selected weekdays (optional filter for daily, the schedule for weekly)",
    )
    day_of_month: int | None = Field(default=None, ge=1, le=31, description="Day of month for monthly rules")


class RecurringObligation(BaseModel):
    """A recurring task performed on a schedule."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id, description="Obligation identifier")
    title: str = Field(min_length=1, description="Display title")
    duration_minutes: int = Field(gt=0, description="Duration of one instance in minutes")
    times_per_day: int = Field(default=1, ge=1, le=5, description="Instances per day")
    recurrence: RecurrenceRule = Field(default_factory=RecurrenceRule, description="Recurrence rule")
    preferred_time: PreferredTime = Field(default=PreferredTime.ANYTIME, description="Preferred placement")
    color: str | None = Field(default=None, description="Display color")

    @model_validator(mode="before")
    @classmethod
    def force_spread_for_repeats(cls, data: Any) -> Any:
        """Obligations repeated more than once a day are always spread."""
        if not isinstance(data, dict):
            return data
        try:
            repeats = int(data.get("times_per_day", 1))
        except (TypeError, ValueError):
            # Field validation reports the bad value
            return data
        if repeats > 1:
            return {**data, "preferred_time": PreferredTime.SPREAD}
        return data

    @property
    def is_spread(self) -> bool:
        return self.times_per_day > 1 or self.preferred_time == PreferredTime.SPREAD


class OneOffItem(BaseModel):
    """A single to-do tagged with a fuzzy due-by window."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id, description="Item identifier")
    title: str = Field(min_length=1, description="Display title")
    description: str | None = Field(default=None, description="Free-text description")
    duration_minutes: int = Field(gt=0, description="Estimated duration in minutes")
    due_by: DueBy = Field(default=DueBy.THIS_WEEK, description="Due-by window")
    completed: bool = Field(default=False, description="Whether the item is done")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Creation timestamp")
    notes: str | None = Field(default=None, description="Optional note, e.g. reason for postponing")

    @field_validator("created_at")
    @classmethod
    def ensure_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class ExternalBlock(BaseModel):
    """A fixed commitment imported from an external calendar."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id, description="Block identifier")
    title: str = Field(description="Event title")
    start: datetime = Field(description="Start instant")
    end: datetime = Field(description="End instant")
    all_day: bool = Field(default=False, description="Whole-day event")
    location: str | None = Field(default=None, description="Event location")

    @model_validator(mode="after")
    def check_order(self) -> ExternalBlock:
        if self.end < self.start:
            raise ValueError(f"Block '{self.title}' ends before it starts")
        return self


class DayConfiguration(BaseModel):
    """Working hours and break length for one day."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=True, description="Whether this is a work day")
    start_time: time = Field(default=time(9, 0), description="Start of work")
    end_time: time = Field(default=time(17, 0), description="End of work")
    break_minutes: int = Field(default=10, ge=0, description="Break inserted after each activity")

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def reject_numeric_times(cls, value: Any) -> Any:
        """Refuse numbers: YAML reads an unquoted 10:00 as the base-60 integer 600."""
        if isinstance(value, int | float) and not isinstance(value, bool):
            raise ValueError(f"got the number {value!r}; quote the time as 'HH:MM'")
        return value

    @model_validator(mode="after")
    def check_window(self) -> DayConfiguration:
        if self.end_time <= self.start_time:
            raise ValueError(f"end_time {self.end_time:%H:%M} must be after start_time {self.start_time:%H:%M}")
        return self


class PlacedActivity(BaseModel):
    """One entry of a laid-out day.

    Created fresh by every layout run. Only status and actual_* are expected
    to change afterwards.
    """

    id: str = Field(default_factory=_new_id, description="Opaque identifier")
    source: ActivitySource = Field(description="What produced this entry")
    source_id: str | None = Field(default=None, description="Obligation, item or block id")
    title: str = Field(description="Display title")
    scheduled_start: datetime = Field(description="Scheduled start instant")
    scheduled_end: datetime = Field(description="Scheduled end instant")
    duration_minutes: float = Field(ge=0, description="Granted duration in minutes")
    due_by: DueBy | None = Field(default=None, description="Due-by window for items")
    status: ActivityStatus = Field(default=ActivityStatus.NOT_STARTED, description="Lifecycle status")
    actual_start: datetime | None = Field(default=None, description="When work actually started")
    actual_end: datetime | None = Field(default=None, description="When work actually ended")
    color: str | None = Field(default=None, description="Display color")
    location: str | None = Field(default=None, description="Location for calendar entries")

    @property
    def is_break(self) -> bool:
        return self.source == ActivitySource.BREAK

    @property
    def is_calendar(self) -> bool:
        return self.source == ActivitySource.CALENDAR
