"""Workout and workout-exercise routes."""

from fastapi import APIRouter, Depends

from ...db import WorkoutExerciseRepository, WorkoutRepository
from ...services import HierarchyManager
from ..deps import get_assignment_repo, get_hierarchy, get_workout_repo
from ..schemas import AssignmentCreate, AssignmentFields, WorkoutRename

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@router.put("/{workout_id}")
async def rename_workout(
    workout_id: int,
    body: WorkoutRename,
    repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Rename a workout."""
    await repo.rename(workout_id, body.name)
    return {"message": "Workout updated successfully"}


@router.delete("/{workout_id}")
async def delete_workout(
    workout_id: int,
    hierarchy: HierarchyManager = Depends(get_hierarchy),
):
    """Delete a workout with its exercise assignments."""
    result = await hierarchy.delete_workout(workout_id)
    return {"message": "Workout deleted successfully", "deleted": result.to_dict()}


@router.get("/{workout_id}/exercises")
async def list_workout_exercises(
    workout_id: int,
    repo: WorkoutRepository = Depends(get_workout_repo),
):
    """List a workout's exercises in order."""
    details = await repo.list_exercises(workout_id)
    return [d.to_dict() for d in details]


@router.post("/{workout_id}/exercises", status_code=201)
async def add_workout_exercise(
    workout_id: int,
    body: AssignmentCreate,
    repo: WorkoutExerciseRepository = Depends(get_assignment_repo),
):
    """Assign a catalog exercise to a workout."""
    assignment = await repo.assign(body.to_model(workout_id))
    return assignment.to_dict()


@router.put("/{workout_id}/exercises/{assignment_id}")
async def update_workout_exercise(
    workout_id: int,
    assignment_id: int,
    body: AssignmentFields,
    repo: WorkoutExerciseRepository = Depends(get_assignment_repo),
):
    """Update sets, reps, weight, rest time and notes of an assignment."""
    await repo.update(workout_id, assignment_id, body.to_update())
    return {"message": "Exercise updated successfully"}


@router.delete("/{workout_id}/exercises/{assignment_id}")
async def delete_workout_exercise(
    workout_id: int,
    assignment_id: int,
    repo: WorkoutExerciseRepository = Depends(get_assignment_repo),
):
    """Remove an assignment, only if it belongs to this workout."""
    await repo.remove_from_workout(workout_id, assignment_id)
    return {"message": "Exercise deleted successfully"}


# Unscoped assignment routes
assignments_router = APIRouter(prefix="/api/workout-exercises", tags=["workouts"])


@assignments_router.delete("/{assignment_id}")
async def delete_assignment(
    assignment_id: int,
    repo: WorkoutExerciseRepository = Depends(get_assignment_repo),
):
    """Remove an assignment by its ID alone."""
    await repo.remove(assignment_id)
    return {"message": "Exercise deleted successfully"}
