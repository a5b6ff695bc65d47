"""Tests for recurrence and due-by eligibility predicates."""

from datetime import UTC, date, datetime

import pytest

from daylayout.layout.eligibility import (
    due_by_includes,
    eligible_items,
    eligible_obligations,
    item_is_eligible,
    recurrence_matches,
    sort_items_by_urgency,
    week_start,
)
from daylayout.layout.enums import DueBy, RecurrenceKind, Weekday
from daylayout.layout.models import OneOffItem, RecurrenceRule, RecurringObligation

MONDAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)
SUNDAY = date(2026, 10, 25)
NEXT_MONDAY = date(2026, 10, 26)


class TestRecurrence:
    """Tests for recurrence_matches."""

    def test_daily_without_weekdays_always_matches(self):
        rule = RecurrenceRule(kind=RecurrenceKind.DAILY)
        assert recurrence_matches(rule, MONDAY)
        assert recurrence_matches(rule, SUNDAY)

    def test_daily_with_weekdays_matches_only_those(self):
        rule = RecurrenceRule(kind=RecurrenceKind.DAILY, weekdays=(Weekday.MONDAY, Weekday.FRIDAY))
        assert recurrence_matches(rule, MONDAY)
        assert not recurrence_matches(rule, TUESDAY)

    def test_weekly_matches_selected_weekday(self):
        rule = RecurrenceRule(kind=RecurrenceKind.WEEKLY, weekdays=(Weekday.TUESDAY,))
        assert recurrence_matches(rule, TUESDAY)
        assert not recurrence_matches(rule, MONDAY)

    def test_weekly_without_weekdays_never_matches(self):
        rule = RecurrenceRule(kind=RecurrenceKind.WEEKLY)
        assert not recurrence_matches(rule, MONDAY)

    def test_monthly_matches_day_of_month(self):
        rule = RecurrenceRule(kind=RecurrenceKind.MONTHLY, day_of_month=19)
        assert recurrence_matches(rule, MONDAY)
        assert not recurrence_matches(rule, TUESDAY)

    def test_monthly_without_day_never_matches(self):
        assert not recurrence_matches(RecurrenceRule(kind=RecurrenceKind.MONTHLY), MONDAY)

    def test_eligible_obligations_keeps_order(self):
        first = RecurringObligation(title="First", duration_minutes=10)
        skipped = RecurringObligation(
            title="Skipped",
            duration_minutes=10,
            recurrence=RecurrenceRule(kind=RecurrenceKind.WEEKLY, weekdays=(Weekday.SUNDAY,)),
        )
        last = RecurringObligation(title="Last", duration_minutes=10)
        assert [o.title for o in eligible_obligations([first, skipped, last], MONDAY)] == ["First", "Last"]


class TestDueBy:
    """Tests for due-by windows, anchored to today = Monday 2026-10-19."""

    @pytest.mark.parametrize(
        ("due_by", "target", "expected"),
        [
            (DueBy.TODAY, MONDAY, True),
            (DueBy.TODAY, TUESDAY, False),
            (DueBy.TOMORROW, MONDAY, True),
            (DueBy.TOMORROW, TUESDAY, True),
            (DueBy.TOMORROW, date(2026, 10, 18), False),
            (DueBy.THIS_WEEK, SUNDAY, True),
            (DueBy.THIS_WEEK, NEXT_MONDAY, False),
            (DueBy.NEXT_WEEK, SUNDAY, False),
            (DueBy.NEXT_WEEK, NEXT_MONDAY, True),
            (DueBy.NEXT_WEEK, date(2026, 11, 1), True),
            (DueBy.NEXT_WEEK, date(2026, 11, 2), False),
            (DueBy.THIS_MONTH, date(2026, 10, 31), True),
            (DueBy.THIS_MONTH, date(2026, 11, 1), False),
            (DueBy.SOMEDAY, date(2027, 3, 1), True),
        ],
    )
    def test_window(self, due_by, target, expected):
        assert due_by_includes(due_by, target, MONDAY) is expected

    def test_weeks_are_relative_to_today_not_target(self):
        # From Sunday's point of view the following Monday is "next week"
        assert due_by_includes(DueBy.NEXT_WEEK, NEXT_MONDAY, SUNDAY)
        assert not due_by_includes(DueBy.THIS_WEEK, NEXT_MONDAY, SUNDAY)

    def test_week_start_is_monday(self):
        assert week_start(SUNDAY) == MONDAY
        assert week_start(MONDAY) == MONDAY

    def test_completed_item_not_eligible(self):
        item = OneOffItem(title="Done", duration_minutes=10, due_by=DueBy.TODAY, completed=True)
        assert not item_is_eligible(item, MONDAY, MONDAY)


class TestUrgencyOrder:
    """Tests for item sorting."""

    def test_sorted_by_window_then_creation(self):
        def make(title, due_by, hour):
            return OneOffItem(title=title, duration_minutes=10, due_by=due_by, created_at=datetime(2026, 10, 1, hour, tzinfo=UTC))

        items = [
            make("someday", DueBy.SOMEDAY, 1),
            make("week-late", DueBy.THIS_WEEK, 9),
            make("today", DueBy.TODAY, 12),
            make("week-early", DueBy.THIS_WEEK, 3),
            make("tomorrow", DueBy.TOMORROW, 5),
        ]
        assert [i.title for i in sort_items_by_urgency(items)] == ["today", "tomorrow", "week-early", "week-late", "someday"]

    def test_eligible_items_filters_and_sorts(self):
        items = [
            OneOffItem(title="later", duration_minutes=10, due_by=DueBy.NEXT_WEEK),
            OneOffItem(title="now", duration_minutes=10, due_by=DueBy.TODAY),
            OneOffItem(title="month", duration_minutes=10, due_by=DueBy.THIS_MONTH),
        ]
        assert [i.title for i in eligible_items(items, MONDAY, MONDAY)] == ["now", "month"]
