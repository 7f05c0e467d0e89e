"""Initialize database and catalog commands."""

from pathlib import Path

import click

from ..config import get_settings
from ..data import load_catalog, seed_exercises
from ..db import get_db_path, init_db
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    open_database,
    reports_errors,
)


@click.command()
@async_command
@reports_errors
async def init():
    """Initialize the workout-plus database.

    Creates the SQLite schema and seeds the exercise catalog. Safe to run
    again: existing data is kept and only missing exercises are added.
    """
    settings = get_settings()
    echo_info(f"Initializing database at {get_db_path()}")

    async with open_database() as database:
        await init_db(database)
        echo_success("Database initialized")

        count = await seed_exercises(database, load_catalog(settings.catalog_file))
        echo_success(f"Exercise catalog ready ({count} exercises added)")

    click.echo()
    click.echo("Start the API with:  workout-plus serve")


@click.command()
@click.option(
    "--file",
    "catalog_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON catalog to seed instead of the built-in list",
)
@click.pass_context
@async_command
@reports_errors
async def seed(ctx: click.Context, catalog_file: Path | None):
    """Add missing exercises to the catalog.

    Exercises are matched by exact name; existing rows are never changed.
    """
    ensure_initialized(ctx)

    exercises = load_catalog(catalog_file or get_settings().catalog_file)
    async with open_database() as database:
        count = await seed_exercises(database, exercises)

    echo_success(f"{count} of {len(exercises)} exercises added")
