"""Pytest configuration and fixtures."""

import sqlite3
import tempfile
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from workout_plus.config import Settings
from workout_plus.db import (
    Database,
    ExerciseRepository,
    ProgramRepository,
    WorkoutExerciseRepository,
    WorkoutRepository,
    init_db,
)
from workout_plus.models import Exercise, Program, Workout
from workout_plus.services import HierarchyManager
from workout_plus.web import create_app


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest_asyncio.fixture
async def database(temp_db_path):
    """An open database with the schema created."""
    db = Database(temp_db_path)
    await db.open()
    await init_db(db)
    yield db
    await db.close()


@pytest.fixture
def program_repo(database):
    return ProgramRepository(database)


@pytest.fixture
def workout_repo(database):
    return WorkoutRepository(database)


@pytest.fixture
def exercise_repo(database):
    return ExerciseRepository(database)


@pytest.fixture
def assignment_repo(database):
    return WorkoutExerciseRepository(database)


@pytest.fixture
def hierarchy(database):
    return HierarchyManager(database)


@pytest.fixture
def sample_program():
    """Create a sample program for testing."""
    return Program(
        name="Strength A",
        level="intermediate",
        type="strength",
        category="gym",
        description="Three full-body days per week",
    )


@pytest_asyncio.fixture
async def stored_program(program_repo, sample_program):
    return await program_repo.create(sample_program)


@pytest_asyncio.fixture
async def stored_workout(workout_repo, stored_program):
    return await workout_repo.create(
        Workout(program_id=stored_program.id, name="Day 1", day_number=1, week_number=1)
    )


@pytest_asyncio.fixture
async def squat(exercise_repo):
    return await exercise_repo.create(Exercise(name="Squat", type="Legs"))


@pytest_asyncio.fixture
async def bench(exercise_repo):
    return await exercise_repo.create(Exercise(name="Bench Press", type="Chest, Triceps"))


@pytest.fixture
def test_settings(temp_db_path) -> Settings:
    """Settings pointing at a temporary database."""
    return Settings(
        _env_file=None,
        environment="test",
        database_path=temp_db_path,
        seed_on_startup=True,
    )


@pytest.fixture
def client(test_settings):
    """API client with the lifespan (schema + catalog seed) running."""
    app = create_app(settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failure_trigger(temp_db_path):
    """Install a trigger that aborts ``event`` on ``table`` when ``when`` holds."""

    def install(name: str, event: str, table: str, when: str = "1") -> None:
        conn = sqlite3.connect(temp_db_path)
        try:
            conn.execute(
                f"""
                CREATE TRIGGER {name} BEFORE {event} ON {table}
                WHEN {when}
                BEGIN
                    SELECT RAISE(ABORT, 'simulated failure');
                END
                """
            )
            conn.commit()
        finally:
            conn.close()

    return install
