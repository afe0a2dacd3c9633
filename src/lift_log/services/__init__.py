"""Application services: stores, history filters and the tracker."""

from .filters import DateRange, FilterCriteria, select
from .program_store import ProgramEditSession, ProgramStore
from .tracker import Tracker
from .workout_store import WorkoutStore

__all__ = [
    "DateRange",
    "FilterCriteria",
    "ProgramEditSession",
    "ProgramStore",
    "select",
    "Tracker",
    "WorkoutStore",
]
