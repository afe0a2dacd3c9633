"""Workout logging commands."""

from datetime import datetime

import click

from ..errors import NotFoundError, ValidationError
from ..models.catalog import CATEGORIES, EXERCISE_CATEGORIES, exercises_for_category
from ..utils.dates import format_datetime
from .base import (
    async_command,
    confirm_with,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    open_tracker,
)

DATE_FORMATS = ["%Y-%m-%d %H:%M", "%Y-%m-%d"]


@click.command(name="log")
@click.argument("category")
@click.argument("exercise")
@click.option("--reps", "-r", required=True, help="Number of reps")
@click.option("--weight", "-w", required=True, help="Weight in kg")
@click.option("--program", "program_id", default=None, help="Tag with a program id")
@click.pass_context
@async_command
async def log_workout(
    ctx: click.Context,
    category: str,
    exercise: str,
    reps: str,
    weight: str,
    program_id: str | None,
):
    """Log an exercise.

    CATEGORY is one of the catalog categories (see 'lift-log catalog').

    Example:

        lift-log log chest "Bench Press" --reps 10 --weight 40
    """
    ensure_initialized(ctx)
    tracker = await open_tracker(ctx)

    try:
        entry = await tracker.log_workout(category, exercise, reps, weight, program_id=program_id)
    except ValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Logged {entry.get_summary()} (ID: {entry.id})")


@click.command()
@click.argument("entry_id")
@click.option("--category", "-c", default=None, help="New category")
@click.option("--exercise", "-e", default=None, help="New exercise name")
@click.option("--reps", "-r", default=None, help="New rep count")
@click.option("--weight", "-w", default=None, help="New weight in kg")
@click.option("--program", "program_id", default=None, help="Tag with a program id")
@click.option("--clear-program", is_flag=True, help="Remove the program tag")
@click.option("--date", "when", type=click.DateTime(formats=DATE_FORMATS), default=None,
              help="New date (YYYY-MM-DD [HH:MM])")
@click.pass_context
@async_command
async def edit(
    ctx: click.Context,
    entry_id: str,
    category: str | None,
    exercise: str | None,
    reps: str | None,
    weight: str | None,
    program_id: str | None,
    clear_program: bool,
    when: datetime | None,
):
    """Edit a logged workout.

    Only the given fields change. ENTRY_ID is shown by 'lift-log history'.
    """
    ensure_initialized(ctx)
    tracker = await open_tracker(ctx)

    try:
        entry = await tracker.edit_workout(
            entry_id,
            category=category,
            exercise=exercise,
            reps=reps,
            weight=weight,
            program_id=program_id,
            clear_program=clear_program,
            when=when,
        )
    except (NotFoundError, ValidationError) as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Updated {entry.id}: {entry.get_summary()}, {format_datetime(entry.date)}")
    if not tracker.in_default_window(entry):
        echo_info("Not in the last week; see it with 'lift-log history -t custom'")


@click.command()
@click.argument("entry_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx: click.Context, entry_id: str, force: bool):
    """Delete a logged workout."""
    ensure_initialized(ctx)
    tracker = await open_tracker(ctx)

    entry = tracker.workouts.get(entry_id)
    if entry is None:
        echo_error(f"Workout {entry_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Workout: {entry.get_summary()}, {format_datetime(entry.date)}")

    deleted = await tracker.delete_workout(entry_id, confirm_with(force))
    if not deleted:
        echo_info("Cancelled")
        return

    echo_success(f"Workout {entry_id} deleted")


@click.command()
@click.argument("category", required=False)
@click.pass_context
def catalog(ctx: click.Context, category: str | None):
    """List exercise categories, or the suggested exercises in one."""
    if category is None:
        for name in CATEGORIES:
            click.echo(f"{name} ({len(EXERCISE_CATEGORIES[name])} exercises)")
        return

    exercises = exercises_for_category(category)
    if not exercises:
        echo_error(f"Unknown category '{category}'. Choose one of: {', '.join(CATEGORIES)}")
        ctx.exit(1)

    click.echo(click.style(category, bold=True))
    for name in exercises:
        click.echo(f"  - {name}")
