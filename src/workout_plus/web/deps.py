"""FastAPI dependency providers.

The storage handle lives on ``app.state``; repositories and services are
built per request around it. Tests can swap any provider through
``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from ..db import (
    Database,
    ExerciseRepository,
    ProgramRepository,
    WorkoutExerciseRepository,
    WorkoutRepository,
)
from ..services import HierarchyManager


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_program_repo(database: Database = Depends(get_database)) -> ProgramRepository:
    return ProgramRepository(database)


def get_workout_repo(database: Database = Depends(get_database)) -> WorkoutRepository:
    return WorkoutRepository(database)


def get_exercise_repo(database: Database = Depends(get_database)) -> ExerciseRepository:
    return ExerciseRepository(database)


def get_assignment_repo(
    database: Database = Depends(get_database),
) -> WorkoutExerciseRepository:
    return WorkoutExerciseRepository(database)


def get_hierarchy(database: Database = Depends(get_database)) -> HierarchyManager:
    return HierarchyManager(database)
