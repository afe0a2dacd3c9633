"""CLI commands for lift-log."""

from .history import history
from .init import init
from .programs import programs
from .serve import serve
from .settings import settings
from .workouts import catalog, delete, edit, log_workout

__all__ = [
    "catalog",
    "delete",
    "edit",
    "history",
    "init",
    "log_workout",
    "programs",
    "serve",
    "settings",
]
