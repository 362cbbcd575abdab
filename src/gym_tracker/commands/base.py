"""Shared CLI utilities."""

import asyncio
from functools import wraps
from pathlib import Path

import click

from ..db import ScheduleRepository, SettingsRepository, get_db_path
from ..errors import ScheduleImportError
from ..models.schedule import DaySchedule, Exercise
from ..services import ScheduleStore, SettingsStore


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_data_dir(ctx: click.Context) -> Path | None:
    """Data directory chosen on the command line or via environment."""
    obj = ctx.find_root().obj or {}
    return obj.get("data_dir")


def ensure_initialized(ctx: click.Context) -> Path:
    """Ensure the database is initialized and return its path."""
    db_path = get_db_path(get_data_dir(ctx))
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'gym-tracker init' first."
        )
        ctx.exit(1)
    return db_path


async def open_schedule(ctx: click.Context) -> ScheduleStore:
    """Load the schedule store for the current data directory."""
    store = ScheduleStore(ScheduleRepository(ensure_initialized(ctx)))
    try:
        await store.load()
    except ScheduleImportError as e:
        echo_error(f"Stored schedule is unreadable: {e}")
        ctx.exit(1)
    return store


async def open_settings(ctx: click.Context) -> SettingsStore:
    """Load the settings store for the current data directory."""
    store = SettingsStore(SettingsRepository(ensure_initialized(ctx)))
    await store.load()
    return store


def require_day(ctx: click.Context, store: ScheduleStore, day_id: str) -> DaySchedule:
    """Look up a day or exit with an error."""
    day = store.find_day(day_id)
    if day is None:
        echo_error(f"Day '{day_id}' not found")
        ctx.exit(1)
    return day


def require_exercise(ctx: click.Context, day: DaySchedule, ref: str) -> Exercise:
    """Look up an exercise by ID or unique ID prefix, or exit with an error."""
    exercise = day.find_exercise(ref)
    if exercise is not None:
        return exercise

    matches = [e for e in day.exercises if e.id.startswith(ref)]
    if len(matches) == 1:
        return matches[0]

    if matches:
        echo_error(f"Exercise ID '{ref}' is ambiguous on {day.name}")
    else:
        echo_error(f"Exercise '{ref}' not found on {day.name}")
    ctx.exit(1)


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


def format_weight(weight: float) -> str:
    """Format a weight in kg without trailing zeros."""
    return f"{weight:g} kg"


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []

    header_line = ""
    for i, h in enumerate(headers):
        header_line += h.ljust(widths[i] + padding)
    lines.append(header_line.rstrip())

    sep_line = ""
    for w in widths:
        sep_line += "-" * w + " " * padding
    lines.append(sep_line.rstrip())

    for row in rows:
        row_line = ""
        for i, cell in enumerate(row):
            row_line += str(cell).ljust(widths[i] + padding)
        lines.append(row_line.rstrip())

    return "\n".join(lines)
