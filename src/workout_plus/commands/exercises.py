"""Exercise catalog commands."""

import click

from ..db import ExerciseRepository
from .base import (
    async_command,
    echo_info,
    ensure_initialized,
    format_table,
    open_database,
    reports_errors,
)


@click.group()
@click.pass_context
def exercises(ctx):
    """Browse the exercise catalog."""
    ensure_initialized(ctx)


@exercises.command(name="list")
@click.option("--tag", "-t", help="Only exercises carrying this type tag")
@async_command
@reports_errors
async def list_exercises(tag: str | None):
    """List catalog exercises ordered by name."""
    async with open_database() as database:
        catalog = await ExerciseRepository(database).list_all()

    if tag:
        wanted = tag.strip().lower()
        catalog = [e for e in catalog if wanted in (t.lower() for t in e.tags)]

    if not catalog:
        echo_info("No exercises found.")
        return

    rows = [[str(e.id), e.name, e.type] for e in catalog]
    click.echo(format_table(["ID", "Name", "Type"], rows))
