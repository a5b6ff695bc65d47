"""Spread placement: evenly spaced target instants for repeated obligations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from daylayout.layout.models import RecurringObligation


@dataclass(frozen=True)
class SpreadSlot:
    """One instance of a spread obligation and the instant it aims for."""

    target: datetime
    obligation: RecurringObligation
    instance: int  # 1-based

    @property
    def title(self) -> str:
        total = self.obligation.times_per_day
        if total > 1:
            return f"{self.obligation.title} ({self.instance}/{total})"
        return self.obligation.title


def spread_targets(times_per_day: int, window_start: datetime, window_end: datetime) -> list[datetime]:
    """Centers of times_per_day equal segments of the window.

    Slot i (0-based) targets start + (span/N)*i + (span/N)/2. Pass UTC bounds:
    arithmetic on same-zone aware datetimes ignores DST shifts.
    """
    if times_per_day < 1:
        return []
    segment = (window_end - window_start) / times_per_day
    return [window_start + segment * index + segment / 2 for index in range(times_per_day)]


def build_spread_slots(
    obligations: Iterable[RecurringObligation],
    window_start: datetime,
    window_end: datetime,
) -> list[SpreadSlot]:
    """All slots of all spread obligations, ordered by target instant."""
    slots = [
        SpreadSlot(target=target, obligation=obligation, instance=index + 1)
        for obligation in obligations
        for index, target in enumerate(spread_targets(obligation.times_per_day, window_start, window_end))
    ]
    slots.sort(key=lambda slot: slot.target)
    return slots
