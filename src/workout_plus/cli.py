"""CLI entry point for workout-plus."""

import click

from . import __version__
from .commands import exercises, init, programs, seed, serve
from .config import configure_logging, get_settings


@click.group()
@click.version_option(version=__version__, prog_name="workout-plus")
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level")
def main(verbose: bool):
    """workout-plus: workout training program management.

    Example usage:

        # Create the database and seed the exercise catalog
        workout-plus init

        # Run the JSON API
        workout-plus serve

        # Inspect programs
        workout-plus programs list
        workout-plus programs show 1 --exercises
    """
    configure_logging("DEBUG" if verbose else get_settings().log_level)


# Register commands
main.add_command(init)
main.add_command(seed)
main.add_command(serve)
main.add_command(programs)
main.add_command(exercises)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
