"""Data models for workout-plus."""

from .exercises import (
    COMMON_EXERCISES,
    AssignmentUpdate,
    Exercise,
    WorkoutExercise,
    WorkoutExerciseDetail,
)
from .program import Program, ProgramDetail, Workout

__all__ = [
    "AssignmentUpdate",
    "COMMON_EXERCISES",
    "Exercise",
    "Program",
    "ProgramDetail",
    "Workout",
    "WorkoutExercise",
    "WorkoutExerciseDetail",
]
