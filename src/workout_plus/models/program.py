"""Training program and workout models."""

from dataclasses import dataclass, field

from ..errors import ValidationError


def require_text(value: str | None, field_name: str) -> None:
    """Raise ValidationError if a required text field is missing or blank."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"'{field_name}' is required")


def require_int(value: int | None, field_name: str) -> None:
    """Raise ValidationError unless value is an integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"'{field_name}' must be an integer")


@dataclass
class Program:
    """A named training plan at a level/type/category."""

    name: str
    level: str
    type: str
    description: str
    category: str | None = None
    id: int | None = None

    def validate(self) -> None:
        """Check required fields before the program is stored."""
        require_text(self.name, "name")
        require_text(self.level, "level")
        require_text(self.type, "type")
        require_text(self.description, "description")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level,
            "type": self.type,
            "category": self.category,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Program":
        """Create from dictionary."""
        return cls(
            id=id if id is not None else data.get("id"),
            name=data["name"],
            level=data["level"],
            type=data["type"],
            category=data.get("category"),
            description=data["description"],
        )


@dataclass
class Workout:
    """One scheduled training day within a program.

    Workouts are positioned by ``(week_number, day_number)``; the pair is
    not unique, ties keep insertion order.
    """

    program_id: int
    name: str
    day_number: int
    week_number: int
    id: int | None = None

    def validate(self) -> None:
        """Check required fields before the workout is stored."""
        require_text(self.name, "name")
        require_int(self.day_number, "day_number")
        require_int(self.week_number, "week_number")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "program_id": self.program_id,
            "name": self.name,
            "day_number": self.day_number,
            "week_number": self.week_number,
        }


@dataclass
class ProgramDetail:
    """A program merged with its workouts in schedule order."""

    program: Program
    workouts: list[Workout] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary (program fields plus ``workouts``)."""
        data = self.program.to_dict()
        data["workouts"] = [w.to_dict() for w in self.workouts]
        return data
