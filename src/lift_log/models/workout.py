"""Workout log entry model."""

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime

from ..errors import ValidationError
from ..utils.dates import parse_timestamp
from .catalog import CATEGORIES


def new_entry_id() -> str:
    """Generate a short stable identifier for a workout entry."""
    return uuid.uuid4().hex[:8]


@dataclass
class WorkoutEntry:
    """A single logged exercise.

    Entries created by applying a program carry the program's id and an
    empty category, since programs mix categories.
    """

    category: str
    exercise: str
    reps: int
    weight: float  # kg
    date: datetime
    program_id: str | None = None
    id: str = field(default_factory=new_entry_id)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "category": self.category,
            "exercise": self.exercise,
            "reps": self.reps,
            "weight": self.weight,
            "date": self.date.isoformat(),
            "programId": self.program_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutEntry":
        """Create from dictionary, parsing the stored date back into a datetime.

        Entries written before identifiers existed get a fresh id.

        Raises:
            KeyError: If a required field is missing
            ValueError: If the date or a number cannot be parsed
        """
        return cls(
            id=data.get("id") or new_entry_id(),
            category=data.get("category") or "",
            exercise=data["exercise"],
            reps=int(data["reps"]),
            weight=float(data["weight"]),
            date=parse_timestamp(data["date"]),
            program_id=data.get("programId") or data.get("program_id"),
        )

    def get_summary(self) -> str:
        """One-line description for display."""
        category = f" ({self.category})" if self.category else ""
        return f"{self.exercise}{category} - {self.reps} reps @ {self.weight:g} kg"


def validate_entry_fields(
    category: str,
    exercise: str,
    reps: int | str | None,
    weight: float | str | None,
) -> tuple[str, str, int, float]:
    """Check manually entered workout fields.

    Returns:
        The cleaned (category, exercise, reps, weight) tuple

    Raises:
        ValidationError: With a user-facing message for the first bad field
    """
    if not category:
        raise ValidationError("Please select a category")
    if category not in CATEGORIES:
        raise ValidationError(
            f"Unknown category '{category}'. Choose one of: {', '.join(CATEGORIES)}"
        )

    exercise = (exercise or "").strip()
    if not exercise:
        raise ValidationError("Please enter an exercise")

    try:
        reps_value = float(reps)
    except (TypeError, ValueError):
        raise ValidationError("Please enter a valid reps number") from None
    if not math.isfinite(reps_value) or reps_value <= 0 or not reps_value.is_integer():
        raise ValidationError("Please enter a valid reps number")

    if weight is None or weight == "":
        raise ValidationError("Please enter a valid weight")
    try:
        weight_value = float(weight)
    except (TypeError, ValueError):
        raise ValidationError("Please enter a valid weight") from None
    if not math.isfinite(weight_value) or weight_value < 0:
        raise ValidationError("Please enter a valid weight")

    return category, exercise, int(reps_value), weight_value
