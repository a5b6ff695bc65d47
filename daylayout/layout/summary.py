"""Totals over a laid-out day.

The engine drops what does not fit without telling anyone. These helpers let
callers compare what was granted with what was asked for.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from pydantic import BaseModel, Field

from daylayout.layout.enums import ActivitySource, ActivityStatus
from daylayout.layout.models import DayConfiguration, PlacedActivity


def _is_work(activity: PlacedActivity) -> bool:
    return activity.source in {ActivitySource.OBLIGATION, ActivitySource.ITEM}


def total_scheduled_minutes(activities: Iterable[PlacedActivity]) -> float:
    """Granted minutes of obligations and items (breaks and calendar entries excluded)."""
    return sum(activity.duration_minutes for activity in activities if _is_work(activity))


def completed_minutes(activities: Iterable[PlacedActivity]) -> float:
    return sum(
        activity.duration_minutes
        for activity in activities
        if _is_work(activity) and activity.status == ActivityStatus.DONE
    )


def day_progress(activities: Iterable[PlacedActivity]) -> float:
    """Completed share of scheduled work, in percent."""
    entries = list(activities)
    total = total_scheduled_minutes(entries)
    if total <= 0:
        return 0.0
    return completed_minutes(entries) / total * 100


def window_minutes(config: DayConfiguration) -> float:
    if not config.enabled:
        return 0.0
    # Any date works: only the difference of the two times matters
    anchor = date(2000, 1, 1)
    start = datetime.combine(anchor, config.start_time)
    end = datetime.combine(anchor, config.end_time)
    return max((end - start).total_seconds() / 60, 0.0)


class DaySummary(BaseModel):
    """Aggregate view of a laid-out day."""

    window_minutes: float = Field(description="Length of the working window")
    scheduled_minutes: float = Field(description="Granted minutes of obligations and items")
    break_minutes: float = Field(description="Minutes spent in breaks")
    calendar_minutes: float = Field(description="Minutes of calendar entries, including outside working hours")
    completed_minutes: float = Field(description="Granted minutes already done")
    progress_percent: float = Field(description="Completed share of scheduled minutes")
    requested_minutes: float | None = Field(default=None, description="Minutes the caller asked for, if known")
    overfilled: bool = Field(default=False, description="Requested minutes exceed granted minutes")


def summarize_day(
    activities: Iterable[PlacedActivity],
    config: DayConfiguration,
    requested_minutes: float | None = None,
) -> DaySummary:
    """Summarize a layout.

    Args:
        activities: Output of the layout engine
        config: Day configuration the layout was produced with
        requested_minutes: Total minutes of the eligible obligations and items,
            used to flag an overfilled day

    Returns:
        DaySummary for the day
    """
    entries = list(activities)
    scheduled = total_scheduled_minutes(entries)
    return DaySummary(
        window_minutes=window_minutes(config),
        scheduled_minutes=scheduled,
        break_minutes=sum(entry.duration_minutes for entry in entries if entry.source == ActivitySource.BREAK),
        calendar_minutes=sum(entry.duration_minutes for entry in entries if entry.source == ActivitySource.CALENDAR),
        completed_minutes=completed_minutes(entries),
        progress_percent=day_progress(entries),
        requested_minutes=requested_minutes,
        overfilled=requested_minutes is not None and requested_minutes > scheduled,
    )
