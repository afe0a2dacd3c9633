"""Shared CLI utilities."""

import asyncio
from functools import wraps
from pathlib import Path

import click

from ..db import LocalStorage, get_db_path
from ..services.tracker import Tracker


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_data_dir(ctx: click.Context) -> Path | None:
    """Data directory chosen with --data-dir, if any."""
    obj = ctx.find_root().obj or {}
    return obj.get("data_dir")


def db_path_for(ctx: click.Context) -> Path:
    """Database path for the current invocation."""
    return get_db_path(get_data_dir(ctx))


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = db_path_for(ctx)
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'lift-log init' first."
        )
        ctx.exit(1)


async def open_tracker(ctx: click.Context) -> Tracker:
    """Load the tracker state from the local database."""
    return await Tracker.load(LocalStorage(db_path_for(ctx)))


def confirm_with(force: bool):
    """Confirmation callback: always yes with --force, else ask."""
    if force:
        return lambda message: True
    return lambda message: click.confirm(message)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip(),
        "".join("-" * w + " " * padding for w in widths).rstrip(),
    ]
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
