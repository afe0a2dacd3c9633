"""Initialize project command."""

import click

from ..db import LocalStorage, ProgramRepository, init_db
from .base import async_command, db_path_for, echo_info, echo_success


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Initialize the lift-log database.

    Creates the data directory and the local storage table, and seeds the
    preset programs.
    """
    db_path = db_path_for(ctx)

    echo_info(f"Initializing lift-log in {db_path.parent}")

    await init_db(db_path)
    echo_success("Database initialized")

    count = await ProgramRepository(LocalStorage(db_path)).seed()
    if count:
        echo_success(f"Preset programs added ({count} programs)")
    else:
        echo_info("Programs already present, leaving them unchanged")

    click.echo()
    click.echo("lift-log is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Log a set:")
    click.echo("     lift-log log chest 'Bench Press' --reps 10 --weight 40")
    click.echo()
    click.echo("  2. Or apply a program for today:")
    click.echo("     lift-log programs list")
    click.echo("     lift-log programs apply push-pull-legs")
    click.echo()
    click.echo("  3. Review your history:")
    click.echo("     lift-log history --timeframe lastWeek")
