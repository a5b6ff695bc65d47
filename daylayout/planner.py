"""Entry points that pair the layout engine with a week schedule."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, tzinfo

from loguru import logger

from daylayout.layout.eligibility import eligible_items, eligible_obligations
from daylayout.layout.engine import layout_day
from daylayout.layout.models import ExternalBlock, OneOffItem, PlacedActivity, RecurringObligation
from daylayout.schedule.week import WeekSchedule


def requested_minutes(
    obligations: Sequence[RecurringObligation],
    items: Sequence[OneOffItem],
    target_date: date,
    *,
    today: date,
) -> int:
    """Minutes the eligible obligations and items ask for on target_date."""
    obligation_minutes = sum(
        obligation.duration_minutes * obligation.times_per_day
        for obligation in eligible_obligations(obligations, target_date)
    )
    item_minutes = sum(item.duration_minutes for item in eligible_items(items, target_date, today))
    return obligation_minutes + item_minutes


def plan_day(
    obligations: Sequence[RecurringObligation],
    items: Sequence[OneOffItem],
    external_blocks: Sequence[ExternalBlock],
    week: WeekSchedule,
    target_date: date,
    *,
    today: date,
    tz: tzinfo | None = None,
) -> list[PlacedActivity]:
    """Lay out target_date with the working hours configured for its weekday."""
    config = week.for_date(target_date)
    return layout_day(obligations, items, external_blocks, config, target_date, today=today, tz=tz)


def preview_next_work_day(
    obligations: Sequence[RecurringObligation],
    items: Sequence[OneOffItem],
    external_blocks: Sequence[ExternalBlock],
    week: WeekSchedule,
    *,
    today: date,
    tz: tzinfo | None = None,
) -> tuple[date, list[PlacedActivity]]:
    """Lay out the next enabled day after today.

    Independent of today's layout: items already placed today may show up
    again in the preview.

    Returns:
        Tuple of (previewed date, layout for that date)
    """
    target_date = week.next_work_day(today)
    logger.debug(f"Previewing next work day {target_date} (today is {today})")
    return target_date, plan_day(obligations, items, external_blocks, week, target_date, today=today, tz=tz)
