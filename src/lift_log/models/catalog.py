"""Built-in exercise catalog, preset programs and timeframe selectors."""

from enum import Enum

from .program import ExerciseTemplate, Program

ALL = "all"

# Category -> example exercise names (suggestions only; any name may be logged)
EXERCISE_CATEGORIES: dict[str, list[str]] = {
    "legs": ["Squats", "Lunges", "Deadlift", "Leg Press", "Leg Curl", "Calf Raises"],
    "shoulders": ["Overhead Press", "Lateral Raises", "Front Raises", "Shrugs", "Reverse Fly"],
    "biceps": ["Barbell Curl", "Dumbbell Curl", "Hammer Curl", "Concentration Curl"],
    "triceps": ["Triceps Pushdown", "Skull Crushers", "Dips", "Overhead Triceps Extension"],
    "back": ["Pull-Ups", "Bent-over Row", "Lat Pulldown", "Deadlift", "Seated Row"],
    "chest": ["Bench Press", "Push-ups", "Chest Fly", "Incline Bench Press"],
    "core": ["Plank", "Crunches", "Leg Raises", "Russian Twist", "Sit-ups"],
    "cardio": ["Running", "Cycling", "Jump Rope", "Rowing", "Swimming"],
    "other": ["Yoga", "Stretching", "Foam Rolling"],
}

CATEGORIES: list[str] = list(EXERCISE_CATEGORIES)


class Timeframe(str, Enum):
    """History time windows."""

    LAST_WORKOUT = "lastWorkout"
    LAST_WEEK = "lastWeek"
    LAST_MONTH = "lastMonth"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        """Human-readable label."""
        labels = {
            Timeframe.LAST_WORKOUT: "Since Last Workout",
            Timeframe.LAST_WEEK: "Last Week",
            Timeframe.LAST_MONTH: "Last Month",
            Timeframe.CUSTOM: "Custom Range",
        }
        return labels[self]


PRESET_PROGRAMS: list[Program] = [
    Program(
        id="push-pull-legs",
        title="Push Pull Legs",
        exercises=[
            ExerciseTemplate(
                name="Bench Press",
                substitutes=["Push-ups", "Chest Fly"],
                default_reps=10,
                default_weight=40,
            ),
            ExerciseTemplate(
                name="Overhead Press",
                substitutes=["Lateral Raises", "Front Raises"],
                default_reps=8,
                default_weight=20,
            ),
            ExerciseTemplate(
                name="Deadlift",
                substitutes=["Leg Press", "Bent-over Row"],
                default_reps=6,
                default_weight=60,
            ),
        ],
    ),
    Program(
        id="full-body",
        title="Full Body Blast",
        exercises=[
            ExerciseTemplate(
                name="Squats",
                substitutes=["Lunges", "Leg Curl"],
                default_reps=12,
                default_weight=50,
            ),
            ExerciseTemplate(
                name="Pull-Ups",
                substitutes=["Lat Pulldown", "Seated Row"],
                default_reps=8,
                default_weight=0,
            ),
            ExerciseTemplate(
                name="Plank",
                substitutes=["Crunches", "Sit-ups"],
                default_reps=1,  # sets or seconds, up to the user
                default_weight=0,
            ),
        ],
    ),
]


def preset_programs() -> list[Program]:
    """Fresh copies of the preset programs, safe to edit."""
    return [program.copy() for program in PRESET_PROGRAMS]


def exercises_for_category(category: str) -> list[str]:
    """Suggested exercise names for a category (empty if unknown)."""
    return list(EXERCISE_CATEGORIES.get(category, []))
