"""Cascade deletes across the program -> workout -> assignment hierarchy."""

import logging
from dataclasses import dataclass

from ..db.engine import Database
from ..errors import NotFoundError

logger = logging.getLogger(__name__)


@dataclass
class CascadeResult:
    """Row counts removed by a cascade delete."""

    assignments: int = 0
    workouts: int = 0
    programs: int = 0

    def to_dict(self) -> dict:
        return {
            "assignments": self.assignments,
            "workouts": self.workouts,
            "programs": self.programs,
        }


class HierarchyManager:
    """Removes a parent entity together with everything that depends on it.

    Children are always deleted before their parent: assignments, then
    workouts, then the program. Each cascade is a single transaction on the
    storage handle, so a failing step leaves the whole subtree in place.
    """

    def __init__(self, database: Database):
        self.database = database

    async def delete_workout(self, workout_id: int) -> CascadeResult:
        """Delete a workout and its exercise assignments.

        Raises:
            NotFoundError: if the workout does not exist
            StorageError: if any step fails (nothing is deleted)
        """
        result = CascadeResult()
        async with self.database.connect() as db:
            cursor = await db.execute(
                "SELECT 1 FROM workouts WHERE id = ?", (workout_id,)
            )
            if await cursor.fetchone() is None:
                raise NotFoundError("Workout", workout_id)

            cursor = await db.execute(
                "DELETE FROM workout_exercises WHERE workout_id = ?", (workout_id,)
            )
            result.assignments = cursor.rowcount

            cursor = await db.execute(
                "DELETE FROM workouts WHERE id = ?", (workout_id,)
            )
            result.workouts = cursor.rowcount

        logger.info(
            "Deleted workout %s (%d assignments)", workout_id, result.assignments
        )
        return result

    async def delete_program(self, program_id: int) -> CascadeResult:
        """Delete a program, its workouts and their exercise assignments.

        Raises:
            NotFoundError: if the program does not exist
            StorageError: if any step fails (nothing is deleted)
        """
        result = CascadeResult()
        async with self.database.connect() as db:
            cursor = await db.execute(
                "SELECT 1 FROM programs WHERE id = ?", (program_id,)
            )
            if await cursor.fetchone() is None:
                raise NotFoundError("Program", program_id)

            # Assignments reference workouts, not programs
            cursor = await db.execute(
                """
                DELETE FROM workout_exercises
                WHERE workout_id IN (SELECT id FROM workouts WHERE program_id = ?)
                """,
                (program_id,),
            )
            result.assignments = cursor.rowcount

            cursor = await db.execute(
                "DELETE FROM workouts WHERE program_id = ?", (program_id,)
            )
            result.workouts = cursor.rowcount

            cursor = await db.execute(
                "DELETE FROM programs WHERE id = ?", (program_id,)
            )
            result.programs = cursor.rowcount

        logger.info(
            "Deleted program %s (%d workouts, %d assignments)",
            program_id,
            result.workouts,
            result.assignments,
        )
        return result
