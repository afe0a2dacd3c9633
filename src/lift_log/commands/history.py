"""Workout history command."""

from collections.abc import Sequence
from datetime import datetime

import click

from ..errors import ValidationError
from ..models.catalog import ALL, Timeframe
from ..models.workout import WorkoutEntry
from ..services.tracker import Tracker
from ..utils.dates import format_date_only, format_time_only
from .base import async_command, echo_error, echo_info, ensure_initialized, format_table, open_tracker

TIMEFRAME_CHOICES = [t.value for t in Timeframe]


def echo_history(tracker: Tracker, entries: Sequence[WorkoutEntry]) -> None:
    """Print workout entries as a table."""
    if not entries:
        echo_info("No workouts found.")
        return

    headers = ["ID", "Date", "Time", "Exercise", "Category", "Reps", "Weight (kg)", "Program"]
    rows = [
        [
            entry.id,
            format_date_only(entry.date),
            format_time_only(entry.date),
            entry.exercise,
            entry.category or "-",
            str(entry.reps),
            f"{entry.weight:g}",
            tracker.program_title(entry.program_id) or "-",
        ]
        for entry in entries
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(entries)} workout(s)")


def _as_date(value: datetime | None):
    # Custom range bounds cover whole days
    return value.date() if value is not None else None


@click.command()
@click.option("--category", "-c", default=ALL, help="Category to show (default: all)")
@click.option(
    "--timeframe",
    "-t",
    type=click.Choice(TIMEFRAME_CHOICES),
    default=Timeframe.LAST_WEEK.value,
    help="Time window (default: lastWeek)",
)
@click.option("--start", type=click.DateTime(formats=["%Y-%m-%d"]), help="Custom range start")
@click.option("--end", type=click.DateTime(formats=["%Y-%m-%d"]), help="Custom range end")
@click.option("--program", "-p", default=ALL, help="Program id to show (default: all)")
@click.option("--match", "-m", default=ALL, help="Category or program id (matches either)")
@click.pass_context
@async_command
async def history(
    ctx: click.Context,
    category: str,
    timeframe: str,
    start: datetime | None,
    end: datetime | None,
    program: str,
    match: str,
):
    """Show logged workouts.

    Examples:

        # Everything from the last 7 days
        lift-log history

        # Chest work in January
        lift-log history -c chest -t custom --start 2024-01-01 --end 2024-01-31

        # Legs work, or anything logged from the full-body program
        lift-log history -m legs
        lift-log history -m full-body
    """
    ensure_initialized(ctx)
    tracker = await open_tracker(ctx)

    try:
        tracker.set_filters(
            category=category,
            timeframe=timeframe,
            start=_as_date(start),
            end=_as_date(end),
            program=program,
        )
    except ValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    label = Timeframe(timeframe).label
    if program != ALL:
        label += f", program: {tracker.program_title(program)}"
    click.echo(click.style(f"Workout History ({label})", bold=True))
    echo_history(tracker, tracker.history(match=match))
