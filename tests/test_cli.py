"""Tests for the command line interface."""

import asyncio
import json

import pytest
from click.testing import CliRunner

from workout_plus.cli import main
from workout_plus.config import get_settings
from workout_plus.db import (
    Database,
    ExerciseRepository,
    ProgramRepository,
    WorkoutExerciseRepository,
    WorkoutRepository,
)
from workout_plus.models import COMMON_EXERCISES, Program, Workout, WorkoutExercise


@pytest.fixture
def runner(temp_db_path, monkeypatch):
    """CLI runner pointed at a temporary database."""
    monkeypatch.setenv("WORKOUT_PLUS_DATABASE_PATH", str(temp_db_path))
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


def _add_program(db_path) -> int:
    """Store a one-day program with a squat assignment, return its id."""

    async def build():
        async with Database(db_path) as database:
            program = await ProgramRepository(database).create(
                Program(name="Strength A", level="beginner", type="strength", description="Big lifts")
            )
            workout = await WorkoutRepository(database).create(
                Workout(program_id=program.id, name="Day 1", day_number=1, week_number=1)
            )
            squat = await ExerciseRepository(database).get_by_name("Squat")
            await WorkoutExerciseRepository(database).assign(
                WorkoutExercise(workout_id=workout.id, exercise_id=squat.id, order_index=0, sets=5, reps="5")
            )
            return program.id

    return asyncio.run(build())


class TestCli:
    def test_commands_require_init(self, runner):
        result = runner.invoke(main, ["programs", "list"])

        assert result.exit_code == 1
        assert "workout-plus init" in result.output

    def test_init_seeds_catalog_once(self, runner):
        first = runner.invoke(main, ["init"])
        second = runner.invoke(main, ["init"])

        assert first.exit_code == 0, first.output
        assert f"{len(COMMON_EXERCISES)} exercises added" in first.output
        assert "0 exercises added" in second.output

    def test_exercises_list_filters_by_tag(self, runner):
        runner.invoke(main, ["init"])

        result = runner.invoke(main, ["exercises", "list", "--tag", "biceps"])

        assert result.exit_code == 0
        assert "Pull Ups" in result.output
        assert "Squat" not in result.output

    def test_programs_list_empty(self, runner):
        runner.invoke(main, ["init"])

        result = runner.invoke(main, ["programs", "list"])

        assert result.exit_code == 0
        assert "No programs found" in result.output

    def test_show_missing_program(self, runner):
        runner.invoke(main, ["init"])

        result = runner.invoke(main, ["programs", "show", "42"])

        assert result.exit_code == 1
        assert "Program 42 not found" in result.output

    def test_show_with_exercises(self, runner, temp_db_path):
        runner.invoke(main, ["init"])
        program_id = _add_program(temp_db_path)

        result = runner.invoke(main, ["programs", "show", str(program_id), "--exercises"])

        assert result.exit_code == 0, result.output
        assert "Week 1 / Day 1: Day 1" in result.output
        assert "Squat  5 x 5" in result.output

    def test_delete_cascades(self, runner, temp_db_path):
        runner.invoke(main, ["init"])
        program_id = _add_program(temp_db_path)

        result = runner.invoke(main, ["programs", "delete", str(program_id), "--yes"])

        assert result.exit_code == 0, result.output
        assert "1 workouts, 1 exercise assignments" in result.output
        assert "No programs found" in runner.invoke(main, ["programs", "list"]).output

    def test_seed_from_file(self, runner, tmp_path):
        runner.invoke(main, ["init"])
        catalog = tmp_path / "extra.json"
        catalog.write_text(json.dumps([
            {"name": "Farmer Carry", "type": "Full Body"},
            {"name": "Squat", "type": "Legs"},
        ]))

        result = runner.invoke(main, ["seed", "--file", str(catalog)])

        assert result.exit_code == 0, result.output
        assert "1 of 2 exercises added" in result.output
