"""Tests for cascade deletes."""

import asyncio

import pytest

from workout_plus.errors import InvalidReferenceError, NotFoundError, StorageError
from workout_plus.models import Exercise, Workout, WorkoutExercise
from workout_plus.services import CascadeResult


async def _count(database, sql, params=()):
    async with database.connect() as db:
        cursor = await db.execute(sql, params)
        return (await cursor.fetchone())[0]


async def _build_program(program_repo, workout_repo, assignment_repo, exercise, program, n_workouts, n_assignments):
    """Create a program with n workouts, each holding m assignments."""
    created = await program_repo.create(program)
    workout_ids = []
    for day in range(1, n_workouts + 1):
        workout = await workout_repo.create(
            Workout(program_id=created.id, name=f"Day {day}", day_number=day, week_number=1)
        )
        workout_ids.append(workout.id)
        for i in range(n_assignments):
            await assignment_repo.assign(
                WorkoutExercise(
                    workout_id=workout.id,
                    exercise_id=exercise.id,
                    order_index=i,
                    sets=3,
                    reps="10",
                )
            )
    return created, workout_ids


class TestDeleteProgram:
    """Tests for program cascade."""

    @pytest.mark.asyncio
    async def test_cascade_removes_whole_subtree(
        self, database, hierarchy, program_repo, workout_repo, assignment_repo, squat, sample_program
    ):
        program, workout_ids = await _build_program(
            program_repo, workout_repo, assignment_repo, squat, sample_program, 3, 4
        )
        other, other_workouts = await _build_program(
            program_repo, workout_repo, assignment_repo, squat, sample_program, 1, 2
        )

        result = await hierarchy.delete_program(program.id)

        assert result.to_dict() == {"assignments": 12, "workouts": 3, "programs": 1}
        assert await program_repo.get(program.id) is None
        assert await _count(database, "SELECT COUNT(*) FROM workouts WHERE program_id = ?", (program.id,)) == 0
        for wid in workout_ids:
            assert await _count(
                database, "SELECT COUNT(*) FROM workout_exercises WHERE workout_id = ?", (wid,)
            ) == 0

        # Unrelated program untouched
        assert (await program_repo.get_with_workouts(other.id)).workouts[0].id == other_workouts[0]
        assert await _count(database, "SELECT COUNT(*) FROM workout_exercises") == 2
        # Catalog untouched
        assert await _count(database, "SELECT COUNT(*) FROM exercises") == 1

    @pytest.mark.asyncio
    async def test_repeat_is_not_found(self, hierarchy, stored_program):
        await hierarchy.delete_program(stored_program.id)

        with pytest.raises(NotFoundError):
            await hierarchy.delete_program(stored_program.id)

    @pytest.mark.asyncio
    async def test_program_without_workouts(self, hierarchy, program_repo, stored_program):
        result = await hierarchy.delete_program(stored_program.id)

        assert result.programs == 1
        assert result.workouts == 0
        assert await program_repo.get(stored_program.id) is None

    @pytest.mark.asyncio
    async def test_failure_rolls_back_every_step(
        self, database, failure_trigger, hierarchy, program_repo, workout_repo, assignment_repo, squat, sample_program
    ):
        program, workout_ids = await _build_program(
            program_repo, workout_repo, assignment_repo, squat, sample_program, 2, 2
        )
        # Last step (the program row itself) fails
        failure_trigger("block_program_delete", "DELETE", "programs")

        with pytest.raises(StorageError):
            await hierarchy.delete_program(program.id)

        detail = await program_repo.get_with_workouts(program.id)
        assert [w.id for w in detail.workouts] == workout_ids
        assert await _count(database, "SELECT COUNT(*) FROM workout_exercises") == 4

    @pytest.mark.asyncio
    @pytest.mark.parametrize("delete_first", [True, False])
    async def test_concurrent_workout_inserts_leave_no_orphans(
        self, database, hierarchy, workout_repo, stored_program, delete_first
    ):
        inserts = [
            workout_repo.create(
                Workout(program_id=stored_program.id, name=f"Day {d}", day_number=d, week_number=1)
            )
            for d in range(1, 6)
        ]
        cascade = hierarchy.delete_program(stored_program.id)
        jobs = [cascade, *inserts] if delete_first else [*inserts, cascade]

        results = await asyncio.gather(*jobs, return_exceptions=True)

        assert sum(isinstance(r, CascadeResult) for r in results) == 1
        for r in results:
            assert isinstance(r, (CascadeResult, Workout, InvalidReferenceError)), r
        assert await _count(
            database,
            "SELECT COUNT(*) FROM workouts w "
            "WHERE NOT EXISTS (SELECT 1 FROM programs p WHERE p.id = w.program_id)",
        ) == 0
        assert await _count(database, "SELECT COUNT(*) FROM workouts") == 0


class TestDeleteWorkout:
    """Tests for workout cascade."""

    @pytest.mark.asyncio
    async def test_cascade_removes_assignments(
        self, database, hierarchy, workout_repo, assignment_repo, stored_workout, squat
    ):
        sibling = await workout_repo.create(
            Workout(program_id=stored_workout.program_id, name="Day 2", day_number=2, week_number=1)
        )
        for i in range(3):
            await assignment_repo.assign(
                WorkoutExercise(workout_id=stored_workout.id, exercise_id=squat.id, order_index=i)
            )
        kept = await assignment_repo.assign(
            WorkoutExercise(workout_id=sibling.id, exercise_id=squat.id, order_index=0)
        )

        result = await hierarchy.delete_workout(stored_workout.id)

        assert result.assignments == 3
        assert result.workouts == 1
        assert await workout_repo.get(stored_workout.id) is None
        assert await workout_repo.list_exercises(stored_workout.id) == []
        assert await assignment_repo.get(kept.id) is not None
        assert await workout_repo.get(sibling.id) is not None

    @pytest.mark.asyncio
    async def test_repeat_is_not_found(self, hierarchy, stored_workout):
        await hierarchy.delete_workout(stored_workout.id)

        with pytest.raises(NotFoundError):
            await hierarchy.delete_workout(stored_workout.id)

    @pytest.mark.asyncio
    async def test_failure_keeps_assignments(
        self, failure_trigger, hierarchy, workout_repo, assignment_repo, stored_workout, squat
    ):
        assignment = await assignment_repo.assign(
            WorkoutExercise(workout_id=stored_workout.id, exercise_id=squat.id, order_index=0)
        )
        failure_trigger("block_workout_delete", "DELETE", "workouts")

        with pytest.raises(StorageError):
            await hierarchy.delete_workout(stored_workout.id)

        assert await workout_repo.get(stored_workout.id) is not None
        assert await assignment_repo.get(assignment.id) is not None


class TestReferencedExercise:
    """Catalog rows referenced by assignments are protected by storage."""

    @pytest.mark.asyncio
    async def test_deleting_referenced_exercise_is_rejected(
        self, database, assignment_repo, stored_workout, exercise_repo
    ):
        exercise = await exercise_repo.create(Exercise(name="Lunges", type="Legs"))
        await assignment_repo.assign(
            WorkoutExercise(workout_id=stored_workout.id, exercise_id=exercise.id, order_index=0)
        )

        with pytest.raises(StorageError):
            async with database.connect() as db:
                await db.execute("DELETE FROM exercises WHERE id = ?", (exercise.id,))

        assert await exercise_repo.get(exercise.id) is not None
