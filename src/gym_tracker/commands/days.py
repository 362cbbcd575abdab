"""Day management commands."""

import click

from .base import (
    async_command,
    echo_info,
    echo_success,
    format_table,
    format_weight,
    open_schedule,
    require_day,
)


@click.group()
def days():
    """View and edit the days of the week."""
    pass


@days.command(name="list")
@click.option("--work", "-w", is_flag=True, help="Only show training days")
@click.pass_context
@async_command
async def list_days(ctx, work: bool):
    """List the days of the week."""
    store = await open_schedule(ctx)
    selected = store.work_days() if work else store.days

    if not selected:
        echo_info("No training days. Use 'gym-tracker days rest <day>' to activate one.")
        return

    headers = ["ID", "Name", "Status", "Exercises"]
    rows = []
    for day in selected:
        rows.append([
            day.id,
            day.name or "(unnamed)",
            "Rest" if day.is_rest else "Training",
            str(len(day.exercises)),
        ])

    click.echo()
    click.echo(format_table(headers, rows))


@days.command()
@click.argument("day_id")
@click.pass_context
@async_command
async def show(ctx, day_id: str):
    """Show the exercises planned for a day."""
    store = await open_schedule(ctx)
    day = require_day(ctx, store, day_id)

    click.echo()
    click.echo(click.style(f"{day.name or day.id}", bold=True) + (" (rest day)" if day.is_rest else ""))
    click.echo("=" * 50)

    if not day.exercises:
        echo_info("No exercises yet. Add one with 'gym-tracker exercise add'.")
        return

    headers = ["ID", "Exercise", "Sets x Reps", "Weight", "Muscle", "Position"]
    rows = []
    for exercise in day.exercises:
        rows.append([
            exercise.id[:8],
            exercise.name,
            f"{exercise.sets} x {exercise.reps}",
            format_weight(exercise.weight),
            exercise.muscle_type.value,
            exercise.position.value,
        ])
    click.echo(format_table(headers, rows))


@days.command()
@click.argument("day_id")
@click.argument("name")
@click.pass_context
@async_command
async def rename(ctx, day_id: str, name: str):
    """Rename a day."""
    store = await open_schedule(ctx)
    require_day(ctx, store, day_id)

    await store.rename_day(day_id, name)
    echo_success(f"Day '{day_id}' renamed to '{name}'")


@days.command()
@click.argument("day_id")
@click.pass_context
@async_command
async def rest(ctx, day_id: str):
    """Toggle a day between training and rest.

    Exercises on the day are kept either way.
    """
    store = await open_schedule(ctx)
    day = require_day(ctx, store, day_id)

    await store.toggle_rest_day(day_id)
    state = "a rest day" if day.is_rest else "a training day"
    echo_success(f"{day.name or day.id} is now {state}")
