"""Data models for lift-log."""

from .catalog import ALL, CATEGORIES, EXERCISE_CATEGORIES, PRESET_PROGRAMS, Timeframe
from .program import ExerciseTemplate, Program
from .workout import WorkoutEntry

__all__ = [
    "ALL",
    "CATEGORIES",
    "EXERCISE_CATEGORIES",
    "ExerciseTemplate",
    "PRESET_PROGRAMS",
    "Program",
    "Timeframe",
    "WorkoutEntry",
]
