"""Date eligibility predicates for obligations and one-off items.

Every predicate takes the dates it compares explicitly. "today" is always a
parameter so the same rules serve today's layout and the preview of a
future day.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from daylayout.layout.constants import DUE_BY_URGENCY
from daylayout.layout.enums import DueBy, RecurrenceKind
from daylayout.layout.models import OneOffItem, RecurrenceRule, RecurringObligation


def week_start(day: date) -> date:
    """Monday of the ISO week containing day."""
    return day - timedelta(days=day.weekday())


def same_week(first: date, second: date) -> bool:
    return week_start(first) == week_start(second)


def recurrence_matches(rule: RecurrenceRule, target_date: date) -> bool:
    """Check whether a recurrence rule is due on target_date.

    Rules:
        - daily: every day, or only the selected weekdays when any are given
        - weekly: only the selected weekdays (none selected never matches)
        - monthly: only the configured day of month
    """
    weekday = target_date.weekday()

    if rule.kind == RecurrenceKind.DAILY:
        if rule.weekdays:
            return weekday in rule.weekdays
        return True

    if rule.kind == RecurrenceKind.WEEKLY:
        return weekday in rule.weekdays

    if rule.kind == RecurrenceKind.MONTHLY:
        return rule.day_of_month == target_date.day

    return False


def obligation_runs_on(obligation: RecurringObligation, target_date: date) -> bool:
    return recurrence_matches(obligation.recurrence, target_date)


def due_by_includes(due_by: DueBy, target_date: date, today: date) -> bool:
    """Check whether a due-by window covers target_date, relative to today.

    Args:
        due_by: Due-by window of the item
        target_date: Day being laid out
        today: Reference day the window is anchored to

    Returns:
        True if an item with this window may be placed on target_date
    """
    if due_by == DueBy.TODAY:
        return target_date == today
    if due_by == DueBy.TOMORROW:
        # Promotion to "today" is the rollover step's job
        return target_date >= today
    if due_by == DueBy.THIS_WEEK:
        return same_week(target_date, today)
    if due_by == DueBy.NEXT_WEEK:
        return week_start(target_date) == week_start(today) + timedelta(days=7)
    if due_by == DueBy.THIS_MONTH:
        return (target_date.year, target_date.month) == (today.year, today.month)
    return due_by == DueBy.SOMEDAY


def item_is_eligible(item: OneOffItem, target_date: date, today: date) -> bool:
    return not item.completed and due_by_includes(item.due_by, target_date, today)


def sort_items_by_urgency(items: Iterable[OneOffItem]) -> list[OneOffItem]:
    """Most urgent window first, then oldest first."""
    return sorted(items, key=lambda item: (DUE_BY_URGENCY[item.due_by], item.created_at))


def eligible_obligations(obligations: Iterable[RecurringObligation], target_date: date) -> list[RecurringObligation]:
    return [obligation for obligation in obligations if obligation_runs_on(obligation, target_date)]


def eligible_items(items: Iterable[OneOffItem], target_date: date, today: date) -> list[OneOffItem]:
    """Incomplete items due on target_date, sorted by urgency."""
    return sort_items_by_urgency(item for item in items if item_is_eligible(item, target_date, today))
