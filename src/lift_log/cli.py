"""CLI entry point for lift-log."""

import logging
from pathlib import Path

import click

from . import __version__
from .commands import catalog, delete, edit, history, init, log_workout, programs, serve, settings


@click.group()
@click.version_option(version=__version__, prog_name="lift-log")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Where to keep the database (default: $LIFT_LOG_DATA_DIR or ./data)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, data_dir: Path | None, verbose: bool):
    """lift-log: Personal Workout Log.

    Record exercises, apply workout programs, and review your history.

    Example usage:

        # Initialize the project
        lift-log init

        # Log a set
        lift-log log legs Squats --reps 8 --weight 80

        # Apply a program for today
        lift-log programs apply full-body

        # Review the last week
        lift-log history
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


# Register commands
main.add_command(init)
main.add_command(log_workout)
main.add_command(edit)
main.add_command(delete)
main.add_command(history)
main.add_command(catalog)
main.add_command(programs)
main.add_command(settings)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
