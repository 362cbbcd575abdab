"""Initialize project command."""

import click

from ..db import ScheduleRepository, get_db_path, init_db
from ..services import ScheduleStore
from .base import async_command, echo_info, echo_success, get_data_dir


@click.command()
@click.pass_context
@async_command
async def init(ctx):
    """Initialize the gym-tracker database.

    Creates the data directory and database, and stores the default week
    (Monday to Saturday as training days, Sunday as a rest day) unless a
    schedule already exists.
    """
    db_path = get_db_path(get_data_dir(ctx))

    echo_info(f"Initializing gym-tracker in {db_path.parent}")

    await init_db(db_path)
    echo_success("Database initialized")

    store = ScheduleStore(ScheduleRepository(db_path))
    stored = await store.repository.load()
    if stored is None:
        await store.repository.save(store.schedule)
        echo_success("Default week created")
    else:
        echo_info(f"Existing schedule kept ({len(stored.days)} days)")

    click.echo()
    click.echo("gym-tracker is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Add an exercise to a day:")
    click.echo('     gym-tracker exercise add mon --name "Bench Press" --muscle chest')
    click.echo()
    click.echo("  2. Log the weight you lifted:")
    click.echo("     gym-tracker log mon <exercise-id> 60")
