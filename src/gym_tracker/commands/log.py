"""Weight logging command."""

from datetime import date

import click

from ..errors import ScheduleValidationError
from .base import (
    async_command,
    echo_error,
    echo_success,
    format_weight,
    open_schedule,
    require_day,
    require_exercise,
)


@click.command(name="log")
@click.argument("day_id")
@click.argument("exercise_id")
@click.argument("weight", type=float)
@click.option(
    "--date",
    "-d",
    "on_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Date of the session (defaults to today)",
)
@click.pass_context
@async_command
async def log_weight(ctx, day_id: str, exercise_id: str, weight: float, on_date):
    """Record the weight lifted for an exercise.

    Logging twice on the same day replaces that day's entry.

    Example:
        gym-tracker log mon 3f2a 62.5
    """
    store = await open_schedule(ctx)
    day = require_day(ctx, store, day_id)
    target = require_exercise(ctx, day, exercise_id)

    today = on_date.date() if on_date else date.today()
    entries_before = len(target.history)

    try:
        entry = await store.record_weight(day_id, target.id, weight, today)
    except ScheduleValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    action = "Logged" if len(target.history) > entries_before else "Updated"
    echo_success(f"{action} {target.name}: {format_weight(entry.weight)} on {entry.date.isoformat()}")
