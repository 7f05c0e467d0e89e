"""Program routes."""

from fastapi import APIRouter, Depends

from ...db import ProgramRepository, WorkoutRepository
from ...services import HierarchyManager
from ..deps import get_hierarchy, get_program_repo, get_workout_repo
from ..schemas import ProgramCreate, WorkoutCreate

router = APIRouter(prefix="/api/programs", tags=["programs"])


@router.get("")
async def list_programs(repo: ProgramRepository = Depends(get_program_repo)):
    """List all programs."""
    programs = await repo.list_all()
    return [p.to_dict() for p in programs]


@router.post("", status_code=201)
async def create_program(
    body: ProgramCreate,
    repo: ProgramRepository = Depends(get_program_repo),
):
    """Create a program."""
    program = await repo.create(body.to_model())
    return program.to_dict()


@router.get("/{program_id}")
async def get_program(
    program_id: int,
    repo: ProgramRepository = Depends(get_program_repo),
):
    """Get a program with its workouts in schedule order."""
    detail = await repo.get_with_workouts(program_id)
    return detail.to_dict()


@router.post("/{program_id}/workouts", status_code=201)
async def create_workout(
    program_id: int,
    body: WorkoutCreate,
    repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Add a workout (training day) to a program."""
    workout = await repo.create(body.to_model(program_id))
    return workout.to_dict()


@router.delete("/{program_id}")
async def delete_program(
    program_id: int,
    hierarchy: HierarchyManager = Depends(get_hierarchy),
):
    """Delete a program with all of its workouts and assignments."""
    result = await hierarchy.delete_program(program_id)
    return {"message": "Program deleted successfully", "deleted": result.to_dict()}
