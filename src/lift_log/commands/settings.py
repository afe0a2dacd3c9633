"""Display settings commands."""

import click

from ..db import LocalStorage, SettingsRepository
from .base import async_command, db_path_for, echo_info, echo_success, ensure_initialized


@click.group()
@click.pass_context
def settings(ctx):
    """View and change display settings."""
    ensure_initialized(ctx)


@settings.command("dark-mode")
@click.argument("state", type=click.Choice(["on", "off"]), required=False)
@click.pass_context
@async_command
async def dark_mode(ctx: click.Context, state: str | None):
    """Show or set dark mode."""
    repo = SettingsRepository(LocalStorage(db_path_for(ctx)))

    if state is None:
        enabled = await repo.get_dark_mode()
        echo_info(f"Dark mode is {'on' if enabled else 'off'}")
        return

    await repo.set_dark_mode(state == "on")
    echo_success(f"Dark mode turned {state}")
