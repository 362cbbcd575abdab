"""Exercise management commands."""

import click

from ..clients import ExerciseFormClient
from ..errors import ScheduleValidationError
from ..models.schedule import ExerciseDraft, MuscleType, Position
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    format_weight,
    open_schedule,
    require_day,
    require_exercise,
)

MUSCLE_CHOICES = click.Choice([m.value for m in MuscleType])
POSITION_CHOICES = click.Choice([p.value for p in Position])


@click.group()
def exercise():
    """Add, edit, and delete exercises."""
    pass


@exercise.command()
@click.argument("day_id")
@click.option("--name", "-n", help="Exercise name")
@click.option("--sets", "-s", type=int, default=3, show_default=True)
@click.option("--reps", "-r", type=int, default=12, show_default=True)
@click.option("--weight", "-w", type=float, default=0.0, show_default=True, help="Weight in kg")
@click.option("--muscle", "-m", type=MUSCLE_CHOICES, default="chest", show_default=True)
@click.option("--secondary", default="", help="Secondary muscles (free text)")
@click.option("--position", "-p", type=POSITION_CHOICES, default="middle", show_default=True)
@click.option("--image", help="Image reference (URL or data URL)")
@click.option("--interactive", "-i", is_flag=True, help="Fill in the form interactively")
@click.pass_context
@async_command
async def add(
    ctx,
    day_id: str,
    name: str | None,
    sets: int,
    reps: int,
    weight: float,
    muscle: str,
    secondary: str,
    position: str,
    image: str | None,
    interactive: bool,
):
    """Add an exercise to a day.

    Examples:
        gym-tracker exercise add mon --name "Bench Press" --sets 4 --reps 8

        gym-tracker exercise add tue --interactive
    """
    store = await open_schedule(ctx)
    require_day(ctx, store, day_id)

    if interactive:
        draft = await ExerciseFormClient().collect_draft()
    else:
        draft = ExerciseDraft(
            name=name or "",
            sets=sets,
            reps=reps,
            weight=weight,
            muscle_type=MuscleType(muscle),
            secondary_muscles=secondary,
            position=Position(position),
            image=image,
        )

    try:
        created = await store.add_or_update_exercise(day_id, draft)
    except ScheduleValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Added '{created.name}' (ID: {created.id})")


@exercise.command()
@click.argument("day_id")
@click.argument("exercise_id")
@click.option("--name", "-n", help="New name")
@click.option("--sets", "-s", type=int)
@click.option("--reps", "-r", type=int)
@click.option("--weight", "-w", type=float, help="Weight in kg")
@click.option("--muscle", "-m", type=MUSCLE_CHOICES)
@click.option("--secondary", help="Secondary muscles (free text)")
@click.option("--position", "-p", type=POSITION_CHOICES)
@click.option("--image", help="Image reference; pass an empty string to remove it")
@click.option("--interactive", "-i", is_flag=True, help="Edit the form interactively")
@click.pass_context
@async_command
async def edit(
    ctx,
    day_id: str,
    exercise_id: str,
    name: str | None,
    sets: int | None,
    reps: int | None,
    weight: float | None,
    muscle: str | None,
    secondary: str | None,
    position: str | None,
    image: str | None,
    interactive: bool,
):
    """Edit an exercise. Options not given keep their current value."""
    store = await open_schedule(ctx)
    day = require_day(ctx, store, day_id)
    current = require_exercise(ctx, day, exercise_id)

    if interactive:
        draft = await ExerciseFormClient().collect_draft(current)
    else:
        draft = ExerciseDraft.from_exercise(current)
        if name is not None:
            draft.name = name
        if sets is not None:
            draft.sets = sets
        if reps is not None:
            draft.reps = reps
        if weight is not None:
            draft.weight = weight
        if muscle is not None:
            draft.muscle_type = MuscleType(muscle)
        if secondary is not None:
            draft.secondary_muscles = secondary
        if position is not None:
            draft.position = Position(position)
        draft.image = image

    try:
        updated = await store.add_or_update_exercise(day_id, draft)
    except ScheduleValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Updated '{updated.name}'")


@exercise.command()
@click.argument("day_id")
@click.argument("exercise_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, day_id: str, exercise_id: str, force: bool):
    """Delete an exercise and its weight history."""
    store = await open_schedule(ctx)
    day = require_day(ctx, store, day_id)
    target = require_exercise(ctx, day, exercise_id)

    if not force:
        click.echo(f"Exercise: {target.name} ({len(target.history)} log entries)")
        if not click.confirm("Are you sure you want to delete this exercise?"):
            echo_info("Cancelled")
            return

    await store.delete_exercise(day_id, target.id)
    echo_success(f"Deleted '{target.name}'")


@exercise.command()
@click.argument("day_id")
@click.argument("exercise_id")
@click.pass_context
@async_command
async def show(ctx, day_id: str, exercise_id: str):
    """Show an exercise and its weight history."""
    store = await open_schedule(ctx)
    day = require_day(ctx, store, day_id)
    target = require_exercise(ctx, day, exercise_id)

    click.echo()
    click.echo("=" * 50)
    click.echo(f"{target.name} (ID: {target.id})")
    click.echo("=" * 50)
    click.echo(f"Day: {day.name or day.id}")
    click.echo(f"Sets x Reps: {target.sets} x {target.reps}")
    click.echo(f"Current weight: {format_weight(target.weight)}")
    click.echo(f"Muscle: {target.muscle_type.value}")
    if target.secondary_muscles:
        click.echo(f"Secondary: {target.secondary_muscles}")
    click.echo(f"Position: {target.position.value}")
    click.echo()

    click.echo("History:")
    click.echo("-" * 40)
    if not target.history:
        click.echo("  No entries yet")
        return
    for log in reversed(target.history):
        click.echo(f"  {log.date.isoformat()}  {format_weight(log.weight)}")
