"""Day layout engine: turns obligations, to-dos and calendar blocks into a workday timeline."""

from daylayout.layout.engine import layout_day
from daylayout.layout.models import (
    DayConfiguration,
    ExternalBlock,
    OneOffItem,
    PlacedActivity,
    RecurrenceRule,
    RecurringObligation,
)
from daylayout.planner import plan_day, preview_next_work_day

__all__ = [
    "DayConfiguration",
    "ExternalBlock",
    "OneOffItem",
    "PlacedActivity",
    "RecurrenceRule",
    "RecurringObligation",
    "layout_day",
    "plan_day",
    "preview_next_work_day",
]
