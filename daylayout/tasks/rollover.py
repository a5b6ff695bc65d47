"""Due-by rollover: promote relative windows once the calendar moves on.

"tomorrow" and "next_week" are relative to the day they were set. When the
day (or week) changes they have to be promoted, otherwise an item tagged
"tomorrow" would stay one day away forever. The layout engine does not do
this itself; callers run the rollover before laying out a new day.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from loguru import logger

from daylayout.layout.eligibility import week_start
from daylayout.layout.enums import DueBy
from daylayout.layout.models import OneOffItem


def rolled_due_by(due_by: DueBy, last_run: date, today: date) -> DueBy:
    """Window an item tagged on last_run should carry on today."""
    if today <= last_run:
        return due_by
    if due_by == DueBy.TOMORROW:
        return DueBy.TODAY
    if due_by == DueBy.NEXT_WEEK and week_start(today) > week_start(last_run):
        return DueBy.THIS_WEEK
    return due_by


def rollover_due_by(items: Iterable[OneOffItem], *, last_run: date, today: date) -> list[OneOffItem]:
    """Promote the due-by windows of incomplete items.

    Args:
        items: Items as last stored by the caller
        last_run: Day the previous rollover ran
        today: Current day

    Returns:
        New list; promoted items are copies, others are passed through
    """
    rolled: list[OneOffItem] = []
    promoted = 0
    for item in items:
        new_due_by = item.due_by if item.completed else rolled_due_by(item.due_by, last_run, today)
        if new_due_by != item.due_by:
            promoted += 1
            rolled.append(item.model_copy(update={"due_by": new_due_by}))
        else:
            rolled.append(item)

    if promoted:
        logger.info(f"Rolled over {promoted} item(s) from {last_run} to {today}")
    return rolled
