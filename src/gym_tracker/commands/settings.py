"""Settings and data reset commands."""

import click

from ..db import ScheduleRepository
from ..services import ScheduleStore
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    open_settings,
)


@click.group()
def settings():
    """View and change preferences."""
    pass


@settings.command(name="show")
@click.pass_context
@async_command
async def show_settings(ctx):
    """Show current settings."""
    store = await open_settings(ctx)
    click.echo(f"Dark mode: {'on' if store.dark_mode else 'off'}")


@settings.command(name="dark-mode")
@click.argument("state", type=click.Choice(["on", "off"]))
@click.pass_context
@async_command
async def dark_mode(ctx, state: str):
    """Turn dark mode on or off."""
    store = await open_settings(ctx)
    await store.set_dark_mode(state == "on")
    echo_success(f"Dark mode {state}")


@click.command()
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def reset(ctx, force: bool):
    """Delete all exercises and history and restore the default week."""
    db_path = ensure_initialized(ctx)

    if not force:
        if not click.confirm("All exercises and logs will be permanently deleted. Continue?"):
            echo_info("Cancelled")
            return

    store = ScheduleStore(ScheduleRepository(db_path))
    await store.clear_all()
    echo_success("All schedule data cleared")
