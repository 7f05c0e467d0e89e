"""Program management commands."""

import click

from ..db import ProgramRepository, WorkoutRepository
from ..services import HierarchyManager
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    open_database,
    reports_errors,
)


@click.group()
@click.pass_context
def programs(ctx):
    """Manage training programs.

    Commands for listing, viewing, and deleting programs.
    """
    ensure_initialized(ctx)


@programs.command(name="list")
@async_command
@reports_errors
async def list_programs():
    """List all programs."""
    async with open_database() as database:
        all_programs = await ProgramRepository(database).list_all()

    if not all_programs:
        echo_info("No programs found.")
        return

    headers = ["ID", "Name", "Level", "Type", "Category"]
    rows = [
        [
            str(p.id),
            p.name[:30] + "..." if len(p.name) > 30 else p.name,
            p.level,
            p.type,
            p.category or "-",
        ]
        for p in all_programs
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_programs)} program(s)")


@programs.command()
@click.argument("program_id", type=int)
@click.option("--exercises", "-e", is_flag=True, help="Show each workout's exercises")
@async_command
@reports_errors
async def show(program_id: int, exercises: bool):
    """Show a program and its workouts."""
    async with open_database() as database:
        detail = await ProgramRepository(database).get_with_workouts(program_id)

        workout_repo = WorkoutRepository(database)
        workout_exercises = {}
        if exercises:
            for workout in detail.workouts:
                workout_exercises[workout.id] = await workout_repo.list_exercises(
                    workout.id
                )

    program = detail.program
    click.echo()
    click.echo(click.style(program.name, bold=True))
    click.echo(f"Level: {program.level}   Type: {program.type}   Category: {program.category or '-'}")
    click.echo(program.description)
    click.echo()

    if not detail.workouts:
        echo_info("No workouts scheduled.")
        return

    for workout in detail.workouts:
        click.echo(f"  Week {workout.week_number} / Day {workout.day_number}: {workout.name} (#{workout.id})")
        for item in workout_exercises.get(workout.id, []):
            a = item.assignment
            sets_reps = f"{a.sets or '-'} x {a.reps or '-'}"
            click.echo(f"      {a.order_index}. {item.exercise_name}  {sets_reps}  {a.weight or ''}")


@programs.command()
@click.argument("program_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@async_command
@reports_errors
async def delete(program_id: int, yes: bool):
    """Delete a program with all of its workouts."""
    if not yes and not click.confirm(f"Delete program {program_id} and all its workouts?"):
        echo_info("Cancelled")
        return

    async with open_database() as database:
        result = await HierarchyManager(database).delete_program(program_id)

    echo_success(
        f"Deleted program {program_id} "
        f"({result.workouts} workouts, {result.assignments} exercise assignments)"
    )
