"""Exercise catalog and workout assignment models."""

from dataclasses import dataclass

from ..errors import ValidationError
from .program import require_text


def _require_non_negative(value: int | None, field_name: str) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"'{field_name}' must be a non-negative integer")


@dataclass
class Exercise:
    """A catalog entry for a physical movement, reusable across workouts.

    ``type`` is a free-text tag and may hold several comma-separated tags
    (e.g. ``"Back, Biceps"``).
    """

    name: str
    type: str
    video_url: str | None = None
    id: int | None = None

    @property
    def tags(self) -> list[str]:
        """Split the type tag into its individual, trimmed parts."""
        return [t.strip() for t in self.type.split(",") if t.strip()]

    def validate(self) -> None:
        require_text(self.name, "name")
        require_text(self.type, "type")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "video_url": self.video_url,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=id if id is not None else data.get("id"),
            name=data["name"],
            type=data["type"],
            video_url=data.get("video_url"),
        )


@dataclass
class WorkoutExercise:
    """Assignment of one catalog exercise to one workout.

    ``reps`` and ``weight`` are text so they can hold ranges ("8-12") and
    notations such as "bodyweight". ``rest_time`` is in seconds.
    """

    workout_id: int
    exercise_id: int
    order_index: int
    sets: int | None = None
    reps: str | None = None
    weight: str | None = None
    rest_time: int | None = None
    notes: str | None = None
    id: int | None = None

    def validate(self) -> None:
        """Check assignment parameters before the row is stored."""
        if isinstance(self.order_index, bool) or not isinstance(self.order_index, int):
            raise ValidationError("'order_index' is required")
        _require_non_negative(self.sets, "sets")
        _require_non_negative(self.rest_time, "rest_time")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "workout_id": self.workout_id,
            "exercise_id": self.exercise_id,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "rest_time": self.rest_time,
            "notes": self.notes,
            "order_index": self.order_index,
        }


@dataclass
class AssignmentUpdate:
    """The mutable fields of an assignment.

    Exercise, workout and order are deliberately absent.
    """

    sets: int | None = None
    reps: str | None = None
    weight: str | None = None
    rest_time: int | None = None
    notes: str | None = None

    def validate(self) -> None:
        _require_non_negative(self.sets, "sets")
        _require_non_negative(self.rest_time, "rest_time")


@dataclass
class WorkoutExerciseDetail:
    """An assignment joined with its exercise's name and type."""

    assignment: WorkoutExercise
    exercise_name: str
    exercise_type: str

    def to_dict(self) -> dict:
        data = self.assignment.to_dict()
        data["exercise_name"] = self.exercise_name
        data["exercise_type"] = self.exercise_type
        return data


# Built-in catalog seeded on startup, in insertion order.
COMMON_EXERCISES: list[Exercise] = [
    Exercise(name="Spinte Manubri Panca Inclinata", type="Chest"),
    Exercise(name="Croci Cavi", type="Chest"),
    Exercise(name="Tirate Al Petto", type="Deltoidi"),
    Exercise(name="Alzate laterali", type="Deltoidi"),
    Exercise(name="Hummer Esorcista", type="Bicipiti"),
    Exercise(name="Push Down", type="Tricipiti"),
    Exercise(name="Stacco Rumeno", type="Legs"),
    Exercise(name="Lat Machine triangolo", type="Back"),
    Exercise(name="Puley presa larga", type="Back"),
    Exercise(name="Pullover", type="Back"),
    Exercise(name="Overhead cavi", type="Triceps"),
    Exercise(name="Curl Panca", type="Bicipiti"),
    Exercise(name="Curl Bilancere", type="Bicipiti"),
    Exercise(name="Panca Inclinata 30", type="Chest"),
    Exercise(name="Alzate Lat Panca 45", type="Deltoidi"),
    Exercise(name="Trazioni", type="Back"),
    Exercise(name="Handstand Push Up", type="shoulders"),
    Exercise(name="Muscle-up", type="back, triceps"),
    Exercise(name="Pull-up", type="back, biceps"),
    Exercise(name="Burpees", type="Full Body"),
    Exercise(name="Mountain climber", type="Legs, Core"),
    Exercise(name="Plank", type="Core"),
    Exercise(name="Squat", type="Legs"),
    Exercise(name="Lunges", type="Legs"),
    Exercise(name="Leg Raises", type="Core"),
    Exercise(name="Push Ups", type="Chest, Triceps"),
    Exercise(name="Pull Ups", type="Back, Biceps"),
    Exercise(name="Dips", type="Triceps"),
    Exercise(name="Chin Ups", type="Back, Biceps"),
    Exercise(name="Single Leg Deadlifts", type="Legs"),
    Exercise(name="Wall Sit", type="Legs"),
    Exercise(name="Glute Bridge", type="Glutes"),
    Exercise(name="Russian twists", type="Core"),
    Exercise(name="Bicycle crunches", type="Core"),
    Exercise(name="Flutter kick", type="Core"),
    Exercise(name="Jumping Jacks", type="Full Body"),
    Exercise(name="Box Jumps", type="Legs"),
    Exercise(name="Tuck Jumps", type="Legs"),
    Exercise(name="Jump Rope", type="Legs, Cardio"),
    Exercise(name="Kettlebell Swings", type="Full Body"),
    Exercise(name="Kettlebell Goblet Squats", type="Legs"),
    Exercise(name="Kettlebell Deadlifts", type="Full Body"),
    Exercise(name="Kettlebell Clean and Press", type="Full Body"),
    Exercise(name="Kettlebell Snatch", type="Full Body"),
]
