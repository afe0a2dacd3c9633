"""Database layer for lift-log."""

from .engine import get_data_dir, get_db_path, init_db
from .repositories import (
    LocalStorage,
    ProgramRepository,
    SettingsRepository,
    WorkoutRepository,
)

__all__ = [
    "get_data_dir",
    "get_db_path",
    "init_db",
    "LocalStorage",
    "ProgramRepository",
    "SettingsRepository",
    "WorkoutRepository",
]
