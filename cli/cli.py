"""CLI for the day layout engine.

Reads obligations, items, calendar blocks and the week schedule from a YAML
or JSON file and prints the laid-out day.
"""

import json
from datetime import date
from pathlib import Path
from zoneinfo import ZoneInfoNotFoundError

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from daylayout.config.settings import resolve_timezone, settings
from daylayout.core.logger import setup_logger
from daylayout.errors import LayoutInputError
from daylayout.inputs import DayInputs, load_day_inputs
from daylayout.layout.enums import ActivitySource
from daylayout.layout.models import PlacedActivity
from daylayout.layout.summary import DaySummary, summarize_day
from daylayout.planner import plan_day, preview_next_work_day, requested_minutes

console = Console()

app = typer.Typer(
    name="daylayout",
    help="Lay out a workday from recurring obligations, to-dos and calendar blocks",
    add_completion=False,
)

SOURCE_STYLES = {
    ActivitySource.OBLIGATION: "cyan",
    ActivitySource.ITEM: "yellow",
    ActivitySource.BREAK: "dim",
    ActivitySource.CALENDAR: "magenta",
}


def _setup_logging(debug: bool = False) -> None:
    level = "DEBUG" if debug else settings.log_level
    setup_logger(level=level, log_file=settings.log_file)


def _parse_date(value: str | None, option: str) -> date:
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got '{value}'", param_hint=option) from e


def _parse_timezone(name: str | None):
    try:
        return resolve_timezone(name or settings.timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise typer.BadParameter(f"unknown time zone '{name}'", param_hint="--tz") from e


def _load_inputs(input_file: Path) -> DayInputs:
    try:
        return load_day_inputs(input_file)
    except LayoutInputError as e:
        console.print(f"[red]Error:[/red] could not load {e.source}")
        for detail in e.details:
            console.print(f"  [yellow]{detail}[/yellow]")
        raise typer.Exit(1) from e


def _render(target_date: date, activities: list[PlacedActivity], summary: DaySummary) -> None:
    if not activities:
        console.print(Panel(f"Nothing scheduled for {target_date:%A %Y-%m-%d}", style="yellow"))
        return

    table = Table(title=f"{target_date:%A %Y-%m-%d}")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Title")
    table.add_column("Kind")
    table.add_column("Minutes", justify="right")
    for activity in activities:
        style = SOURCE_STYLES.get(activity.source, "")
        table.add_row(
            f"{activity.scheduled_start:%H:%M}",
            f"{activity.scheduled_end:%H:%M}",
            activity.title,
            activity.source.value,
            f"{activity.duration_minutes:g}",
            style=style,
        )
    console.print(table)

    line = (
        f"Scheduled {summary.scheduled_minutes:g} of {summary.window_minutes:g} working minutes, "
        f"{summary.break_minutes:g} in breaks, {summary.calendar_minutes:g} in calendar events"
    )
    if summary.overfilled:
        line += f"\n[red]Day is overfilled: {summary.requested_minutes:g} minutes requested[/red]"
    console.print(Panel(line, title="Summary"))


def _write_output(output_file: Path, target_date: date, activities: list[PlacedActivity]) -> None:
    payload = {
        "date": target_date.isoformat(),
        "activities": [activity.model_dump(mode="json") for activity in activities],
    }
    output_file.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Wrote {len(activities)} activities to {output_file}")


def _report(
    inputs: DayInputs,
    target_date: date,
    today: date,
    activities: list[PlacedActivity],
    output_file: Path | None,
) -> None:
    requested = requested_minutes(inputs.obligations, inputs.items, target_date, today=today)
    summary = summarize_day(activities, inputs.week.for_date(target_date), requested_minutes=requested)
    _render(target_date, activities, summary)
    if output_file is not None:
        _write_output(output_file, target_date, activities)


@app.command()
def layout(
    input_file: Path = typer.Argument(..., help="YAML or JSON file with obligations, items, blocks and week schedule"),
    target: str | None = typer.Option(None, "--date", "-d", help="Day to lay out (YYYY-MM-DD, default: today)"),
    today_option: str | None = typer.Option(None, "--today", help="Reference day for due-by windows (default: today)"),
    tz_name: str | None = typer.Option(None, "--tz", help="Time zone of the working hours"),
    output_file: Path | None = typer.Option(None, "--output", "-o", help="Write the timeline as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Lay out one day."""
    _setup_logging(debug)
    today = _parse_date(today_option, "--today")
    target_date = _parse_date(target, "--date") if target else today
    tz = _parse_timezone(tz_name)

    inputs = _load_inputs(input_file)
    activities = plan_day(
        inputs.obligations,
        inputs.items,
        inputs.external_blocks,
        inputs.week,
        target_date,
        today=today,
        tz=tz,
    )
    _report(inputs, target_date, today, activities, output_file)


@app.command()
def preview(
    input_file: Path = typer.Argument(..., help="YAML or JSON file with obligations, items, blocks and week schedule"),
    today_option: str | None = typer.Option(None, "--today", help="Reference day (default: today)"),
    tz_name: str | None = typer.Option(None, "--tz", help="Time zone of the working hours"),
    output_file: Path | None = typer.Option(None, "--output", "-o", help="Write the timeline as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Lay out the next work day after today."""
    _setup_logging(debug)
    today = _parse_date(today_option, "--today")
    tz = _parse_timezone(tz_name)

    inputs = _load_inputs(input_file)
    target_date, activities = preview_next_work_day(
        inputs.obligations,
        inputs.items,
        inputs.external_blocks,
        inputs.week,
        today=today,
        tz=tz,
    )
    _report(inputs, target_date, today, activities, output_file)


if __name__ == "__main__":
    app()
