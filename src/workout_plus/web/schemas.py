"""Request bodies for the JSON API.

Fields accept snake_case names as well as camelCase aliases
(``dayNumber``, ``restTime`` ...).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import AssignmentUpdate, Exercise, Program, Workout, WorkoutExercise


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


def _number_to_text(v):
    """Let clients send ``reps: 5`` as well as ``reps: "8-12"``."""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


class ProgramCreate(_Body):
    name: str
    level: str
    type: str
    description: str
    category: str | None = None

    def to_model(self) -> Program:
        return Program(
            name=self.name,
            level=self.level,
            type=self.type,
            category=self.category,
            description=self.description,
        )


class WorkoutCreate(_Body):
    name: str
    day_number: int = Field(alias="dayNumber")
    week_number: int = Field(alias="weekNumber")

    def to_model(self, program_id: int) -> Workout:
        return Workout(
            program_id=program_id,
            name=self.name,
            day_number=self.day_number,
            week_number=self.week_number,
        )


class WorkoutRename(_Body):
    name: str


class ExerciseCreate(_Body):
    name: str
    type: str
    video_url: str | None = Field(default=None, alias="videoUrl")

    def to_model(self) -> Exercise:
        return Exercise(name=self.name, type=self.type, video_url=self.video_url)


class AssignmentFields(_Body):
    sets: int | None = None
    reps: str | None = None
    weight: str | None = None
    rest_time: int | None = Field(default=None, alias="restTime")
    notes: str | None = None

    @field_validator("reps", "weight", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return _number_to_text(v)

    def to_update(self) -> AssignmentUpdate:
        return AssignmentUpdate(
            sets=self.sets,
            reps=self.reps,
            weight=self.weight,
            rest_time=self.rest_time,
            notes=self.notes,
        )


class AssignmentCreate(AssignmentFields):
    exercise_id: int = Field(alias="exerciseId")
    order_index: int = Field(alias="orderIndex")

    def to_model(self, workout_id: int) -> WorkoutExercise:
        return WorkoutExercise(
            workout_id=workout_id,
            exercise_id=self.exercise_id,
            sets=self.sets,
            reps=self.reps,
            weight=self.weight,
            rest_time=self.rest_time,
            notes=self.notes,
            order_index=self.order_index,
        )
