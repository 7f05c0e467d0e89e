"""Data access layer for workout-plus."""

import aiosqlite

from ..errors import InvalidReferenceError, NotFoundError
from ..models.exercises import (
    AssignmentUpdate,
    Exercise,
    WorkoutExercise,
    WorkoutExerciseDetail,
)
from ..models.program import Program, ProgramDetail, Workout, require_text
from .engine import Database


async def _exists(db: aiosqlite.Connection, table: str, row_id: int) -> bool:
    cursor = await db.execute(f"SELECT 1 FROM {table} WHERE id = ?", (row_id,))
    return await cursor.fetchone() is not None


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, database: Database):
        self.database = database

    async def list_all(self) -> list[Exercise]:
        """List all exercises ordered by name."""
        async with self.database.connect() as db:
            cursor = await db.execute("SELECT * FROM exercises ORDER BY name, id")
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def get(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by ID."""
        async with self.database.connect() as db:
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def get_by_name(self, name: str) -> Exercise | None:
        """Get the first exercise with exactly this name."""
        async with self.database.connect() as db:
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE name = ? ORDER BY id LIMIT 1", (name,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def create(self, exercise: Exercise) -> Exercise:
        """Add a new exercise.

        Names are not checked for duplicates here; only the seeder
        deduplicates by name.
        """
        exercise.validate()
        async with self.database.connect() as db:
            cursor = await db.execute(
                "INSERT INTO exercises (name, type, video_url) VALUES (?, ?, ?)",
                (exercise.name, exercise.type, exercise.video_url),
            )
            return Exercise(
                id=cursor.lastrowid,
                name=exercise.name,
                type=exercise.type,
                video_url=exercise.video_url,
            )

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        return Exercise(
            id=row["id"],
            name=row["name"],
            type=row["type"],
            video_url=row["video_url"],
        )


class ProgramRepository:
    """Repository for training programs."""

    def __init__(self, database: Database):
        self.database = database

    async def create(self, program: Program) -> Program:
        """Create a new program."""
        program.validate()
        async with self.database.connect() as db:
            cursor = await db.execute(
                """
                INSERT INTO programs (name, level, type, category, description)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    program.name,
                    program.level,
                    program.type,
                    program.category,
                    program.description,
                ),
            )
            return Program.from_dict(program.to_dict(), id=cursor.lastrowid)

    async def get(self, program_id: int) -> Program | None:
        """Get a program by ID."""
        async with self.database.connect() as db:
            cursor = await db.execute(
                "SELECT * FROM programs WHERE id = ?", (program_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_program(row)

    async def list_all(self) -> list[Program]:
        """List all programs."""
        async with self.database.connect() as db:
            cursor = await db.execute("SELECT * FROM programs ORDER BY id")
            rows = await cursor.fetchall()
            return [self._row_to_program(row) for row in rows]

    async def get_with_workouts(self, program_id: int) -> ProgramDetail:
        """Get a program with its workouts in (week, day) order.

        Raises:
            NotFoundError: if the program does not exist
        """
        async with self.database.connect() as db:
            cursor = await db.execute(
                "SELECT * FROM programs WHERE id = ?", (program_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                raise NotFoundError("Program", program_id)
            program = self._row_to_program(row)

            cursor = await db.execute(
                """
                SELECT * FROM workouts
                WHERE program_id = ?
                ORDER BY week_number, day_number, id
                """,
                (program_id,),
            )
            rows = await cursor.fetchall()
            workouts = [WorkoutRepository._row_to_workout(r) for r in rows]

        return ProgramDetail(program=program, workouts=workouts)

    def _row_to_program(self, row: aiosqlite.Row) -> Program:
        """Convert a database row to a Program."""
        return Program(
            id=row["id"],
            name=row["name"],
            level=row["level"],
            type=row["type"],
            category=row["category"],
            description=row["description"],
        )


class WorkoutRepository:
    """Repository for workouts (training days)."""

    def __init__(self, database: Database):
        self.database = database

    async def create(self, workout: Workout) -> Workout:
        """Create a workout under an existing program.

        Raises:
            ValidationError: if name or day/week numbers are invalid
            InvalidReferenceError: if the program does not exist
        """
        workout.validate()
        async with self.database.connect() as db:
            if not await _exists(db, "programs", workout.program_id):
                raise InvalidReferenceError("Program", workout.program_id)

            cursor = await db.execute(
                """
                INSERT INTO workouts (program_id, name, day_number, week_number)
                VALUES (?, ?, ?, ?)
                """,
                (
                    workout.program_id,
                    workout.name,
                    workout.day_number,
                    workout.week_number,
                ),
            )
            return Workout(
                id=cursor.lastrowid,
                program_id=workout.program_id,
                name=workout.name,
                day_number=workout.day_number,
                week_number=workout.week_number,
            )

    async def get(self, workout_id: int) -> Workout | None:
        """Get a workout by ID."""
        async with self.database.connect() as db:
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE id = ?", (workout_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row)

    async def rename(self, workout_id: int, name: str) -> None:
        """Change a workout's name.

        Raises:
            NotFoundError: if no workout matched
        """
        require_text(name, "name")
        async with self.database.connect() as db:
            cursor = await db.execute(
                "UPDATE workouts SET name = ? WHERE id = ?", (name, workout_id)
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Workout", workout_id)

    async def list_exercises(self, workout_id: int) -> list[WorkoutExerciseDetail]:
        """List a workout's assignments by order_index, ties in insertion order."""
        async with self.database.connect() as db:
            cursor = await db.execute(
                """
                SELECT we.*, e.name AS exercise_name, e.type AS exercise_type
                FROM workout_exercises we
                JOIN exercises e ON we.exercise_id = e.id
                WHERE we.workout_id = ?
                ORDER BY we.order_index, we.id
                """,
                (workout_id,),
            )
            rows = await cursor.fetchall()
            return [
                WorkoutExerciseDetail(
                    assignment=WorkoutExerciseRepository._row_to_assignment(row),
                    exercise_name=row["exercise_name"],
                    exercise_type=row["exercise_type"],
                )
                for row in rows
            ]

    @staticmethod
    def _row_to_workout(row: aiosqlite.Row) -> Workout:
        """Convert a database row to a Workout."""
        return Workout(
            id=row["id"],
            program_id=row["program_id"],
            name=row["name"],
            day_number=row["day_number"],
            week_number=row["week_number"],
        )


class WorkoutExerciseRepository:
    """Repository for exercise assignments within workouts."""

    def __init__(self, database: Database):
        self.database = database

    async def assign(self, assignment: WorkoutExercise) -> WorkoutExercise:
        """Assign a catalog exercise to a workout.

        Raises:
            ValidationError: if the assignment parameters are invalid
            InvalidReferenceError: if the workout or exercise does not exist
        """
        assignment.validate()
        async with self.database.connect() as db:
            if not await _exists(db, "workouts", assignment.workout_id):
                raise InvalidReferenceError("Workout", assignment.workout_id)
            if not await _exists(db, "exercises", assignment.exercise_id):
                raise InvalidReferenceError("Exercise", assignment.exercise_id)

            cursor = await db.execute(
                """
                INSERT INTO workout_exercises
                (workout_id, exercise_id, sets, reps, weight, rest_time, notes, order_index)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    assignment.workout_id,
                    assignment.exercise_id,
                    assignment.sets,
                    assignment.reps,
                    assignment.weight,
                    assignment.rest_time,
                    assignment.notes,
                    assignment.order_index,
                ),
            )
            data = assignment.to_dict()
            data["id"] = cursor.lastrowid
            return WorkoutExercise(**data)

    async def get(self, assignment_id: int) -> WorkoutExercise | None:
        """Get an assignment by ID."""
        async with self.database.connect() as db:
            cursor = await db.execute(
                "SELECT * FROM workout_exercises WHERE id = ?", (assignment_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_assignment(row)

    async def update(
        self, workout_id: int, assignment_id: int, changes: AssignmentUpdate
    ) -> None:
        """Update the mutable fields of an assignment.

        Only matches when the assignment belongs to ``workout_id``.

        Raises:
            NotFoundError: if no assignment matched the pair
        """
        changes.validate()
        async with self.database.connect() as db:
            cursor = await db.execute(
                """
                UPDATE workout_exercises SET
                    sets = ?, reps = ?, weight = ?, rest_time = ?, notes = ?
                WHERE workout_id = ? AND id = ?
                """,
                (
                    changes.sets,
                    changes.reps,
                    changes.weight,
                    changes.rest_time,
                    changes.notes,
                    workout_id,
                    assignment_id,
                ),
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Workout exercise", assignment_id)

    async def remove(self, assignment_id: int) -> None:
        """Delete an assignment by ID alone.

        Raises:
            NotFoundError: if no assignment matched
        """
        async with self.database.connect() as db:
            cursor = await db.execute(
                "DELETE FROM workout_exercises WHERE id = ?", (assignment_id,)
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Workout exercise", assignment_id)

    async def remove_from_workout(self, workout_id: int, assignment_id: int) -> None:
        """Delete an assignment only if it belongs to ``workout_id``.

        Raises:
            NotFoundError: if no assignment matched the pair
        """
        async with self.database.connect() as db:
            cursor = await db.execute(
                "DELETE FROM workout_exercises WHERE workout_id = ? AND id = ?",
                (workout_id, assignment_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Workout exercise", assignment_id)

    @staticmethod
    def _row_to_assignment(row: aiosqlite.Row) -> WorkoutExercise:
        """Convert a database row to a WorkoutExercise."""
        return WorkoutExercise(
            id=row["id"],
            workout_id=row["workout_id"],
            exercise_id=row["exercise_id"],
            sets=row["sets"],
            reps=row["reps"],
            weight=row["weight"],
            rest_time=row["rest_time"],
            notes=row["notes"],
            order_index=row["order_index"],
        )
