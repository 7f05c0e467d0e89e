"""Database layer for workout-plus."""

from .engine import Database, get_db_path, init_db
from .repositories import (
    ExerciseRepository,
    ProgramRepository,
    WorkoutExerciseRepository,
    WorkoutRepository,
)

__all__ = [
    "Database",
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "ProgramRepository",
    "WorkoutExerciseRepository",
    "WorkoutRepository",
]
