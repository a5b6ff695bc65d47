"""Day layout engine.

Lays out one working day from recurring obligations, one-off items and
external calendar blocks. The engine is a pure function of its arguments:
"today" and the time zone are passed in, inputs are never mutated, and every
call builds its own cursor and output list.

Placement is greedy and single-pass. A cursor walks forward from the start
of work; buckets are consumed in a fixed order (morning obligations, urgent
items, midday, afternoon, anytime, remaining items, spread instances) and
each activity is placed at the cursor. Calendar blocks are exclusion zones
while placing and are merged back into the timeline at the end.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, tzinfo

from loguru import logger

from daylayout.config.settings import resolve_timezone, settings
from daylayout.layout.calendar import (
    BusyInterval,
    busy_intervals,
    calendar_entries,
    elapsed_minutes,
    timed_blocks_for_date,
)
from daylayout.layout.constants import (
    BREAK_COLOR,
    BREAK_TITLE,
    DEFAULT_OBLIGATION_COLOR,
    DUE_BY_COLORS,
    SPREAD_LOOKAHEAD,
)
from daylayout.layout.eligibility import eligible_items, eligible_obligations
from daylayout.layout.enums import ActivitySource, DueBy, PreferredTime
from daylayout.layout.models import (
    DayConfiguration,
    ExternalBlock,
    OneOffItem,
    PlacedActivity,
    RecurringObligation,
)
from daylayout.layout.spread import SpreadSlot, build_spread_slots


@dataclass(frozen=True)
class _Request:
    """An activity waiting for the cursor."""

    source: ActivitySource
    source_id: str
    title: str
    duration_minutes: int
    color: str
    due_by: DueBy | None = None


def _obligation_request(obligation: RecurringObligation, title: str | None = None) -> _Request:
    return _Request(
        source=ActivitySource.OBLIGATION,
        source_id=obligation.id,
        title=title or obligation.title,
        duration_minutes=obligation.duration_minutes,
        color=obligation.color or DEFAULT_OBLIGATION_COLOR,
    )


def _spread_request(slot: SpreadSlot) -> _Request:
    return _obligation_request(slot.obligation, title=slot.title)


def _item_request(item: OneOffItem) -> _Request:
    return _Request(
        source=ActivitySource.ITEM,
        source_id=item.id,
        title=item.title,
        duration_minutes=item.duration_minutes,
        color=DUE_BY_COLORS[item.due_by],
        due_by=item.due_by,
    )


class _DayCursor:
    """Forward-only cursor over one working window.

    Owns the activities placed so far. Busy intervals are the calendar
    blocks clamped to the window, sorted by start. All positions are UTC;
    placed activities are handed out in the layout zone tz.
    """

    def __init__(
        self,
        window_start: datetime,
        window_end: datetime,
        break_minutes: int,
        busy: list[BusyInterval],
        tz: tzinfo,
    ):
        self.window_start = window_start
        self.window_end = window_end
        self.position = window_start
        self.placed: list[PlacedActivity] = []
        self._break = timedelta(minutes=break_minutes)
        self._busy = busy
        self._tz = tz

    @property
    def exhausted(self) -> bool:
        return self.settle() >= self.window_end

    def settle(self) -> datetime:
        """Move the cursor out of any busy interval it sits in."""
        moved = True
        while moved:
            moved = False
            for interval in self._busy:
                if interval.start <= self.position < interval.end:
                    self.position = interval.end
                    moved = True
        return self.position

    def wait_until(self, instant: datetime) -> None:
        if instant > self.position:
            self.position = instant

    def _next_busy(self, after: datetime) -> BusyInterval | None:
        return next((interval for interval in self._busy if interval.start >= after), None)

    def place(self, request: _Request) -> PlacedActivity | None:
        """Place an activity at the cursor, clipped to the end of work.

        An activity that would run into a calendar block is not cut short at
        the block; the cursor resumes after the block instead.

        Returns:
            The placed activity, or None once the working window is used up
        """
        length = timedelta(minutes=request.duration_minutes)
        while True:
            start = self.settle()
            if start >= self.window_end:
                logger.debug(f"No room left for '{request.title}'")
                return None
            end = min(start + length, self.window_end)
            upcoming = self._next_busy(start)
            if upcoming is None or end <= upcoming.start:
                break
            logger.debug(
                f"'{request.title}' would run into '{upcoming.title}' at {upcoming.start.astimezone(self._tz):%H:%M}; "
                f"resuming at {upcoming.end.astimezone(self._tz):%H:%M}"
            )
            self.position = upcoming.end

        activity = PlacedActivity(
            source=request.source,
            source_id=request.source_id,
            title=request.title,
            scheduled_start=start.astimezone(self._tz),
            scheduled_end=end.astimezone(self._tz),
            duration_minutes=elapsed_minutes(start, end),
            due_by=request.due_by,
            color=request.color,
        )
        self.placed.append(activity)
        self.position = end
        self._append_break()
        return activity

    def _append_break(self) -> None:
        if self._break <= timedelta(0) or self.position >= self.window_end:
            return
        break_end = self.position + self._break
        if break_end > self.window_end:
            return
        if any(interval.start < break_end and interval.end > self.position for interval in self._busy):
            return

        self.placed.append(
            PlacedActivity(
                source=ActivitySource.BREAK,
                title=BREAK_TITLE,
                scheduled_start=self.position.astimezone(self._tz),
                scheduled_end=break_end.astimezone(self._tz),
                duration_minutes=self._break.total_seconds() / 60,
                color=BREAK_COLOR,
            )
        )
        self.position = break_end


class _SpreadQueue:
    """Pending spread instances, ordered by target instant."""

    def __init__(self, slots: list[SpreadSlot], cursor: _DayCursor):
        self._slots = deque(slots)
        self._cursor = cursor

    def __len__(self) -> int:
        return len(self._slots)

    def flush_due(self) -> None:
        """Place every pending instance whose target has arrived or is imminent."""
        while self._slots and not self._cursor.exhausted:
            slot = self._slots[0]
            # Not enough time for another activity before the target
            if self._cursor.settle() + SPREAD_LOOKAHEAD <= slot.target:
                return
            self._slots.popleft()
            self._cursor.place(_spread_request(slot))

    def flush_remaining(self) -> None:
        """Place what is left; an idle cursor waits for each target."""
        while self._slots and not self._cursor.exhausted:
            slot = self._slots.popleft()
            self._cursor.wait_until(slot.target)
            self._cursor.place(_spread_request(slot))


def _by_start(activities: list[PlacedActivity]) -> list[PlacedActivity]:
    return sorted(activities, key=lambda activity: activity.scheduled_start)


def layout_day(
    obligations: Sequence[RecurringObligation],
    items: Sequence[OneOffItem],
    external_blocks: Sequence[ExternalBlock],
    config: DayConfiguration,
    target_date: date,
    *,
    today: date,
    tz: tzinfo | None = None,
) -> list[PlacedActivity]:
    """Lay out target_date as a list of activities ordered by start.

    Args:
        obligations: Recurring obligations; those not due on target_date are ignored
        items: One-off items; completed or not-yet-due ones are ignored
        external_blocks: Calendar blocks from any date range
        config: Working hours and break length for target_date
        target_date: Day to lay out
        today: Reference day for due-by windows
        tz: Time zone of the working hours (defaults to settings.timezone)

    Returns:
        Placed obligations, items and breaks inside working hours, plus the
        day's calendar blocks with their original times. Empty when the day
        is disabled.
    """
    if not config.enabled:
        logger.debug(f"{target_date} is not a work day; nothing to lay out")
        return []

    zone = tz or resolve_timezone(settings.timezone)
    day_blocks = timed_blocks_for_date(external_blocks, target_date, zone)
    calendar = calendar_entries(day_blocks, zone)

    # Positions are UTC so a window spanning a DST shift keeps its real length
    window_start = datetime.combine(target_date, config.start_time, tzinfo=zone).astimezone(UTC)
    window_end = datetime.combine(target_date, config.end_time, tzinfo=zone).astimezone(UTC)
    if window_end <= window_start:
        logger.warning(
            f"Empty working window on {target_date} ({config.start_time:%H:%M}-{config.end_time:%H:%M}); "
            "returning calendar entries only"
        )
        return _by_start(calendar)

    day_obligations = eligible_obligations(obligations, target_date)
    day_items = eligible_items(items, target_date, today)

    spread = [obligation for obligation in day_obligations if obligation.is_spread]
    regular = [obligation for obligation in day_obligations if not obligation.is_spread]
    morning = [obligation for obligation in regular if obligation.preferred_time == PreferredTime.MORNING]
    midday = [obligation for obligation in regular if obligation.preferred_time == PreferredTime.MIDDAY]
    afternoon = [obligation for obligation in regular if obligation.preferred_time == PreferredTime.AFTERNOON]
    anytime = deque(obligation for obligation in regular if obligation.preferred_time == PreferredTime.ANYTIME)

    third = (window_end - window_start) / 3
    midday_start = window_start + third
    afternoon_start = window_start + third * 2

    busy = busy_intervals(day_blocks, window_start, window_end, zone)
    cursor = _DayCursor(window_start, window_end, config.break_minutes, busy, zone)
    spread_queue = _SpreadQueue(build_spread_slots(spread, window_start, window_end), cursor)
    placed_item_ids: set[str] = set()

    def place_obligation(obligation: RecurringObligation) -> None:
        spread_queue.flush_due()
        cursor.place(_obligation_request(obligation))

    def fill_gap(until: datetime) -> None:
        while anytime and cursor.settle() < until:
            spread_queue.flush_due()
            if cursor.settle() >= until:
                return
            cursor.place(_obligation_request(anytime.popleft()))

    for obligation in morning:
        place_obligation(obligation)

    # Items due today get the rest of the morning; items are sorted by urgency
    for item in day_items:
        if item.due_by != DueBy.TODAY or cursor.settle() >= midday_start:
            break
        spread_queue.flush_due()
        if cursor.settle() >= midday_start:
            break
        if cursor.place(_item_request(item)) is not None:
            placed_item_ids.add(item.id)

    fill_gap(midday_start)
    for obligation in midday:
        place_obligation(obligation)

    fill_gap(afternoon_start)
    for obligation in afternoon:
        place_obligation(obligation)

    while anytime:
        place_obligation(anytime.popleft())

    for item in day_items:
        if item.id in placed_item_ids:
            continue
        if cursor.exhausted:
            break
        spread_queue.flush_due()
        if cursor.exhausted:
            break
        cursor.place(_item_request(item))

    spread_queue.flush_remaining()
    if len(spread_queue):
        logger.debug(f"Dropped {len(spread_queue)} spread instance(s): no room left on {target_date}")

    timeline = _by_start(cursor.placed + calendar)
    logger.info(
        f"Laid out {target_date}: {len(cursor.placed)} placed entries, {len(calendar)} calendar entries "
        f"({len(day_obligations)} obligations and {len(day_items)} items eligible)"
    )
    return timeline
