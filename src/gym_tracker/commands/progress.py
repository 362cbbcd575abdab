"""Progress statistics command."""

from datetime import date

import click

from ..services.progress import HistoryPeriod, filter_history, summarize_history
from .base import (
    async_command,
    echo_info,
    format_table,
    format_weight,
    open_schedule,
    require_day,
    require_exercise,
)


@click.command()
@click.argument("day_id")
@click.argument("exercise_id")
@click.option(
    "--period",
    "-p",
    type=click.Choice([p.value for p in HistoryPeriod]),
    default=HistoryPeriod.ALL.value,
    show_default=True,
    help="Time window to show",
)
@click.option("--start", type=click.DateTime(formats=["%Y-%m-%d"]), help="Custom period start")
@click.option("--end", type=click.DateTime(formats=["%Y-%m-%d"]), help="Custom period end")
@click.pass_context
@async_command
async def progress(ctx, day_id: str, exercise_id: str, period: str, start, end):
    """Show weight progression for an exercise.

    Example:
        gym-tracker progress mon 3f2a --period month
    """
    store = await open_schedule(ctx)
    day = require_day(ctx, store, day_id)
    target = require_exercise(ctx, day, exercise_id)

    if not target.history:
        echo_info(f"No history for {target.name} yet")
        return

    filtered = filter_history(
        target.history,
        HistoryPeriod(period),
        date.today(),
        start=start.date() if start else None,
        end=end.date() if end else None,
    )
    summary = summarize_history(target.history, filtered)

    click.echo()
    click.echo(click.style(f"{target.name}", bold=True))
    click.echo("=" * 50)
    click.echo(f"Max: {format_weight(summary.max_weight)}")
    click.echo(f"Last: {format_weight(summary.last_weight)}")
    click.echo(f"Improvement: {summary.improvement:+.1f}%")
    click.echo()

    if not filtered:
        echo_info("No entries in this period")
        return

    rows = [[log.date.isoformat(), format_weight(log.weight)] for log in filtered]
    click.echo(format_table(["Date", "Weight"], rows))
