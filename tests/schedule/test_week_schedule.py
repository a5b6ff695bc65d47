"""Tests for the per-weekday schedule."""

from datetime import date, time

from daylayout.layout.enums import Weekday
from daylayout.layout.models import DayConfiguration
from daylayout.schedule.week import WeekSchedule, default_week_schedule

MONDAY = date(2026, 10, 19)
FRIDAY = date(2026, 10, 23)
SATURDAY = date(2026, 10, 24)


class TestWeekSchedule:
    def test_defaults_weekdays_on_weekend_off(self):
        week = default_week_schedule()
        assert week.for_date(MONDAY).enabled
        assert week.for_date(FRIDAY).enabled
        assert not week.for_date(SATURDAY).enabled
        assert week.for_date(MONDAY).start_time == time(9, 0)
        assert week.for_date(MONDAY).end_time == time(17, 0)
        assert week.for_date(MONDAY).break_minutes == 10

    def test_for_weekday(self):
        short_friday = DayConfiguration(start_time=time(9, 0), end_time=time(13, 0))
        week = WeekSchedule(friday=short_friday)
        assert week.for_weekday(Weekday.FRIDAY) == short_friday
        assert week.for_date(FRIDAY) == short_friday


class TestNextWorkDay:
    def test_skips_weekend(self):
        assert default_week_schedule().next_work_day(FRIDAY) == date(2026, 10, 26)

    def test_next_day_when_enabled(self):
        assert default_week_schedule().next_work_day(MONDAY) == date(2026, 10, 20)

    def test_weekend_worker(self):
        week = WeekSchedule(saturday=DayConfiguration(start_time=time(10, 0), end_time=time(14, 0)))
        assert week.next_work_day(FRIDAY) == SATURDAY

    def test_falls_back_to_tomorrow_when_nothing_enabled(self):
        off = DayConfiguration(enabled=False)
        week = WeekSchedule(
            monday=off, tuesday=off, wednesday=off, thursday=off, friday=off, saturday=off, sunday=off
        )
        assert week.next_work_day(MONDAY) == date(2026, 10, 20)
