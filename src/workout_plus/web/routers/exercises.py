"""Exercise catalog routes."""

from fastapi import APIRouter, Depends

from ...db import ExerciseRepository
from ..deps import get_exercise_repo
from ..schemas import ExerciseCreate

router = APIRouter(prefix="/api/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(repo: ExerciseRepository = Depends(get_exercise_repo)):
    """List the exercise catalog ordered by name."""
    exercises = await repo.list_all()
    return [e.to_dict() for e in exercises]


@router.post("", status_code=201)
async def create_exercise(
    body: ExerciseCreate,
    repo: ExerciseRepository = Depends(get_exercise_repo),
):
    """Add an exercise to the catalog (duplicates by name are allowed)."""
    exercise = await repo.create(body.to_model())
    return exercise.to_dict()
