"""External calendar blocks as seen by the layout engine.

Blocks play two roles: clamped to working hours they are exclusion zones
for the cursor, and with their original times they become calendar entries
of the final timeline.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta, tzinfo

from daylayout.layout.constants import CALENDAR_COLOR
from daylayout.layout.enums import ActivitySource
from daylayout.layout.models import ExternalBlock, PlacedActivity


@dataclass(frozen=True)
class BusyInterval:
    """A block clamped to the working window: [start, end)."""

    start: datetime
    end: datetime
    title: str


def localize(value: datetime, tz: tzinfo) -> datetime:
    """Read naive datetimes in tz, convert aware ones to tz."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def elapsed_minutes(start: datetime, end: datetime) -> float:
    """Real minutes between two aware instants, also across a DST shift."""
    return (end.astimezone(UTC) - start.astimezone(UTC)).total_seconds() / 60


def day_bounds(target_date: date, tz: tzinfo) -> tuple[datetime, datetime]:
    day_start = datetime.combine(target_date, time.min, tzinfo=tz)
    return day_start, day_start + timedelta(days=1)


def timed_blocks_for_date(blocks: Iterable[ExternalBlock], target_date: date, tz: tzinfo) -> list[ExternalBlock]:
    """Blocks overlapping target_date's calendar day, excluding whole-day ones.

    Returns:
        Matching blocks sorted by start (stable for equal starts)
    """
    day_start, day_end = day_bounds(target_date, tz)
    selected = [
        block
        for block in blocks
        if not block.all_day and localize(block.start, tz) < day_end and localize(block.end, tz) > day_start
    ]
    return sorted(selected, key=lambda block: localize(block.start, tz))


def busy_intervals(
    blocks: Iterable[ExternalBlock],
    window_start: datetime,
    window_end: datetime,
    tz: tzinfo | None = None,
) -> list[BusyInterval]:
    """Clamp blocks to the working window, dropping those outside it.

    Naive block times are read in tz (the window's zone by default); the
    intervals come back in the window's zone.
    """
    window_zone = window_start.tzinfo
    tz = tz or window_zone
    intervals: list[BusyInterval] = []
    for block in blocks:
        start = max(localize(block.start, tz).astimezone(window_zone), window_start)
        end = min(localize(block.end, tz).astimezone(window_zone), window_end)
        if end > start:
            intervals.append(BusyInterval(start=start, end=end, title=block.title))
    intervals.sort(key=lambda interval: (interval.start, interval.end))
    return intervals


def calendar_entries(blocks: Iterable[ExternalBlock], tz: tzinfo) -> list[PlacedActivity]:
    """Calendar entries with the blocks' original, unclamped times."""
    entries: list[PlacedActivity] = []
    for block in blocks:
        start = localize(block.start, tz)
        end = localize(block.end, tz)
        entries.append(
            PlacedActivity(
                source=ActivitySource.CALENDAR,
                source_id=block.id,
                title=block.title,
                scheduled_start=start,
                scheduled_end=end,
                duration_minutes=elapsed_minutes(start, end),
                color=CALENDAR_COLOR,
                location=block.location,
            )
        )
    return entries
