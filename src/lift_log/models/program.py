"""Workout program data models."""

import random
import string
from dataclasses import dataclass, field

PROGRAM_ID_PREFIX = "program-"
_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_program_id() -> str:
    """Generate a program id with a random base-36 suffix.

    Collisions are not checked; the odds are negligible for a single user.
    """
    return PROGRAM_ID_PREFIX + "".join(random.choices(_ID_ALPHABET, k=7))


@dataclass
class ExerciseTemplate:
    """An exercise within a program, with defaults used when it is applied."""

    name: str
    substitutes: list[str] = field(default_factory=list)
    default_reps: int = 10
    default_weight: float = 0

    def copy(self) -> "ExerciseTemplate":
        """Return an independent copy (substitute list included)."""
        return ExerciseTemplate(
            name=self.name,
            substitutes=list(self.substitutes),
            default_reps=self.default_reps,
            default_weight=self.default_weight,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "substitutes": list(self.substitutes),
            "defaultReps": self.default_reps,
            "defaultWeight": self.default_weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseTemplate":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            substitutes=list(data.get("substitutes", [])),
            default_reps=data.get("defaultReps", 10),
            default_weight=data.get("defaultWeight", 0),
        )


@dataclass
class Program:
    """A named bundle of exercise templates."""

    id: str
    title: str
    exercises: list[ExerciseTemplate] = field(default_factory=list)

    def copy(self) -> "Program":
        """Return a deep copy of the program."""
        return Program(
            id=self.id,
            title=self.title,
            exercises=[ex.copy() for ex in self.exercises],
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "title": self.title,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Program":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            title=data["title"],
            exercises=[ExerciseTemplate.from_dict(ex) for ex in data.get("exercises", [])],
        )

    def get_summary(self) -> str:
        """Generate a summary of the program."""
        summary = f"Program: {self.title} ({self.id})\n"
        if not self.exercises:
            return summary + "  No exercises yet.\n"

        for ex in self.exercises:
            summary += (
                f"  - {ex.name}: Reps: {ex.default_reps}, "
                f"Weight: {ex.default_weight:g} kg"
            )
            if ex.substitutes:
                summary += f" (Substitutes: {', '.join(ex.substitutes)})"
            summary += "\n"
        return summary
