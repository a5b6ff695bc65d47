"""Root conftest for all tests.

Shared fixtures pin "today" and the time zone so no test reads the real
clock.
"""

from collections.abc import Callable
from datetime import UTC, date, datetime, time

import pytest
from loguru import logger

from daylayout.layout.models import DayConfiguration

# Monday
TODAY = date(2026, 10, 19)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by a test so they do not outlive its streams."""
    yield
    logger.remove()
    logger.add(lambda _: None, level="DEBUG")


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def utc():
    return UTC


@pytest.fixture
def workday() -> DayConfiguration:
    """09:00-17:00 without breaks."""
    return DayConfiguration(enabled=True, start_time=time(9, 0), end_time=time(17, 0), break_minutes=0)


@pytest.fixture
def at() -> Callable[..., datetime]:
    """Build a UTC instant on TODAY (or another day)."""

    def _at(hour: int, minute: int = 0, day: date = TODAY) -> datetime:
        return datetime(day.year, day.month, day.day, hour, minute, tzinfo=UTC)

    return _at
