"""Program management commands."""

import click

from ..clients.program_editor import ProgramEditorClient
from ..errors import NotFoundError
from ..models.catalog import Timeframe
from .base import (
    async_command,
    confirm_with,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    open_tracker,
)
from .history import TIMEFRAME_CHOICES, echo_history


@click.group()
@click.pass_context
def programs(ctx):
    """Manage workout programs.

    Commands for listing, applying, editing, and deleting programs.
    """
    ensure_initialized(ctx)


@programs.command(name="list")
@click.pass_context
@async_command
async def list_programs(ctx):
    """List all programs."""
    tracker = await open_tracker(ctx)
    all_programs = tracker.programs.programs

    if not all_programs:
        echo_info("No programs yet. Create one with 'lift-log programs new'")
        return

    headers = ["ID", "Title", "Exercises"]
    rows = [
        [
            prog.id,
            prog.title[:30] + "..." if len(prog.title) > 30 else prog.title,
            str(len(prog.exercises)),
        ]
        for prog in all_programs
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_programs)} program(s)")


@programs.command()
@click.argument("program_id")
@click.pass_context
@async_command
async def show(ctx, program_id: str):
    """Show the exercises of a program."""
    tracker = await open_tracker(ctx)

    program = tracker.programs.get(program_id)
    if not program:
        echo_error(f"Program {program_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo(program.get_summary())


@programs.command()
@click.argument("program_id")
@click.pass_context
@async_command
async def apply(ctx, program_id: str):
    """Log every exercise of a program for today with its defaults."""
    tracker = await open_tracker(ctx)

    try:
        entries = await tracker.apply_program(program_id)
    except NotFoundError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(
        f"Added {len(entries)} workout(s) from {tracker.program_title(program_id)}"
    )
    echo_history(tracker, tracker.history())


@programs.command(name="history")
@click.argument("program_id")
@click.option(
    "--timeframe",
    "-t",
    type=click.Choice(TIMEFRAME_CHOICES),
    default=Timeframe.LAST_WEEK.value,
    help="Time window (default: lastWeek)",
)
@click.pass_context
@async_command
async def program_history(ctx, program_id: str, timeframe: str):
    """Show workouts logged from a program."""
    tracker = await open_tracker(ctx)
    tracker.set_filters(timeframe=timeframe)

    click.echo(click.style(f"Program: {tracker.program_title(program_id)}", bold=True))
    echo_history(tracker, tracker.show_program_history(program_id))


@programs.command()
@click.pass_context
@async_command
async def new(ctx):
    """Create a program and edit it interactively."""
    tracker = await open_tracker(ctx)

    session = await tracker.create_program()
    echo_success(f"Created program {session.program_id}")

    program = await ProgramEditorClient().run(tracker)
    if program is None:
        echo_info("Edit cancelled; the program keeps its default title")
        return
    echo_success(f"Saved program: {program.title}")


@programs.command()
@click.argument("program_id")
@click.pass_context
@async_command
async def edit(ctx, program_id: str):
    """Edit a program interactively.

    Changes are kept in a scratch copy and only written when you save.
    """
    tracker = await open_tracker(ctx)

    try:
        tracker.start_program_edit(program_id)
    except NotFoundError as e:
        echo_error(str(e))
        ctx.exit(1)

    program = await ProgramEditorClient().run(tracker)
    if program is None:
        echo_info("Cancelled, no changes saved")
        return
    echo_success(f"Saved program: {program.title}")


@programs.command()
@click.argument("program_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, program_id: str, force: bool):
    """Delete a program.

    Workouts already logged from it are kept.
    """
    tracker = await open_tracker(ctx)

    try:
        deleted = await tracker.delete_program(program_id, confirm_with(force))
    except NotFoundError as e:
        echo_error(str(e))
        ctx.exit(1)

    if not deleted:
        echo_info("Cancelled")
        return

    echo_success(f"Program {program_id} deleted")
