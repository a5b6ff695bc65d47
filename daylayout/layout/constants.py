"""Layout constants shared by the engine and its helpers."""

from datetime import timedelta

from daylayout.layout.enums import DueBy

# Lower rank = more urgent
DUE_BY_URGENCY: dict[DueBy, int] = {
    DueBy.TODAY: 0,
    DueBy.TOMORROW: 1,
    DueBy.THIS_WEEK: 2,
    DueBy.NEXT_WEEK: 3,
    DueBy.THIS_MONTH: 4,
    DueBy.SOMEDAY: 5,
}

DUE_BY_COLORS: dict[DueBy, str] = {
    DueBy.TODAY: "#ef4444",
    DueBy.TOMORROW: "#f97316",
    DueBy.THIS_WEEK: "#f59e0b",
    DueBy.NEXT_WEEK: "#3b82f6",
    DueBy.THIS_MONTH: "#8b5cf6",
    DueBy.SOMEDAY: "#64748b",
}

DEFAULT_OBLIGATION_COLOR = "#6366f1"
BREAK_COLOR = "#64748b"
CALENDAR_COLOR = "#0ea5e9"
BREAK_TITLE = "Break"

# A pending spread slot is flushed once its target is closer than this
SPREAD_LOOKAHEAD = timedelta(minutes=30)
