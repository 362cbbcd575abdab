"""Export and import commands."""

from datetime import date

import click

from ..data.transfer import dump_schedule, export_filename, read_import, write_export
from ..errors import ScheduleImportError
from .base import async_command, echo_error, echo_success, open_schedule


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write to this file (defaults to gym_backup_<date>.json)",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print to stdout instead of a file")
@click.pass_context
@async_command
async def export(ctx, output: str | None, to_stdout: bool):
    """Export the whole schedule as a JSON backup."""
    store = await open_schedule(ctx)
    data = store.export_schedule()

    if to_stdout:
        click.echo(dump_schedule(data))
        return

    path = write_export(output or export_filename(date.today()), data)
    echo_success(f"Exported to {path}")


@click.command(name="import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def import_data(ctx, path: str, force: bool):
    """Replace the schedule with a JSON backup.

    Everything currently stored is replaced, including days that are not in
    the backup. A malformed file leaves the schedule untouched.
    """
    store = await open_schedule(ctx)

    if not force and not click.confirm("This replaces your whole schedule. Continue?"):
        return

    try:
        raw = read_import(path)
        schedule = await store.import_schedule(raw)
    except ScheduleImportError as e:
        echo_error(f"Import failed: {e}")
        ctx.exit(1)

    total = sum(len(day.exercises) for day in schedule.days)
    echo_success(f"Imported {len(schedule.days)} days with {total} exercises")
