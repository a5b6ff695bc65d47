"""Load layout inputs from a YAML or JSON document.

Expected shape::

    obligations:
      - title: Stand-up notes
        duration_minutes: 15
        preferred_time: morning
    items:
      - title: Renew passport
        duration_minutes: 30
        due_by: this_week
        created_at: 2026-10-12T08:00:00Z
    external_blocks:
      - title: Dentist
        start: 2026-10-19T10:00:00
        end: 2026-10-19T11:00:00
    week:
      saturday: {enabled: true, start_time: "10:00", end_time: "14:00", break_minutes: 5}

Every section is optional.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from daylayout.errors import LayoutInputError
from daylayout.layout.models import ExternalBlock, OneOffItem, RecurringObligation
from daylayout.schedule.week import WeekSchedule


class DayInputs(BaseModel):
    """Everything the engine needs besides the dates."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    obligations: list[RecurringObligation] = Field(default_factory=list)
    items: list[OneOffItem] = Field(default_factory=list)
    external_blocks: list[ExternalBlock] = Field(default_factory=list)
    week: WeekSchedule = Field(default_factory=WeekSchedule)


def parse_day_inputs(document: object, source: str = "<inputs>") -> DayInputs:
    """Validate an already-parsed document.

    Raises:
        LayoutInputError: If the document is not a mapping or fails validation
    """
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise LayoutInputError(source, [f"expected a mapping at top level, got {type(document).__name__}"])
    try:
        return DayInputs.model_validate(document)
    except ValidationError as e:
        details = [f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()]
        raise LayoutInputError(source, details) from e


def load_day_inputs(path: Path) -> DayInputs:
    """Read and validate layout inputs from a file.

    Raises:
        LayoutInputError: If the file cannot be read, parsed or validated
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LayoutInputError(str(path), [f"cannot read file: {e}"]) from e

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LayoutInputError(str(path), [f"malformed document: {e}"]) from e

    inputs = parse_day_inputs(document, source=str(path))
    logger.info(
        f"Loaded {len(inputs.obligations)} obligations, {len(inputs.items)} items, "
        f"{len(inputs.external_blocks)} external blocks from {path}"
    )
    return inputs
