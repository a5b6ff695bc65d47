from enum import IntEnum, StrEnum


class Weekday(IntEnum):
    """Day of week, numbered like date.weekday()."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class RecurrenceKind(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class PreferredTime(StrEnum):
    MORNING = "morning"
    MIDDAY = "midday"
    AFTERNOON = "afternoon"
    ANYTIME = "anytime"
    SPREAD = "spread"


class DueBy(StrEnum):
    TODAY = "today"
    TOMORROW = "tomorrow"
    THIS_WEEK = "this_week"
    NEXT_WEEK = "next_week"
    THIS_MONTH = "this_month"
    SOMEDAY = "someday"


class ActivitySource(StrEnum):
    OBLIGATION = "obligation"
    ITEM = "item"
    BREAK = "break"
    CALENDAR = "calendar"


class ActivityStatus(StrEnum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    SKIPPED = "skipped"
    OVERRAN = "overran"
