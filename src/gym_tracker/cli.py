"""CLI entry point for gym-tracker."""

from pathlib import Path

import click

from . import __version__
from .commands import (
    days,
    exercise,
    export,
    import_data,
    init,
    log_weight,
    progress,
    reset,
    settings,
)
from .logger import setup_logger


@click.group()
@click.version_option(version=__version__, prog_name="gym-tracker")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="GYM_TRACKER_DATA_DIR",
    help="Directory holding the database",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_dir: Path | None, debug: bool):
    """gym-tracker: weekly workout schedule and weight log.

    Organize exercises into weekdays, log the weight you lift, and follow
    your progress over time.

    Example usage:

        # Initialize the project
        gym-tracker init

        # Add an exercise to Monday
        gym-tracker exercise add mon --name "Squat" --muscle legs

        # Log today's weight
        gym-tracker log mon <exercise-id> 80

        # Back up everything
        gym-tracker export
    """
    setup_logger("DEBUG" if debug else "WARNING")
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


# Register commands
main.add_command(init)
main.add_command(days)
main.add_command(exercise)
main.add_command(log_weight)
main.add_command(progress)
main.add_command(export)
main.add_command(import_data)
main.add_command(settings)
main.add_command(reset)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
