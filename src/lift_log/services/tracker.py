"""Workout tracker state and operations.

The Tracker owns the workout log, the programs and the current history
filters. Every change is validated first, then applied, then written
through to local storage.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date, datetime

from ..db.repositories import LocalStorage, ProgramRepository, WorkoutRepository
from ..errors import ValidationError
from ..models.catalog import ALL, CATEGORIES, Timeframe
from ..models.program import Program, new_program_id
from ..models.workout import WorkoutEntry, validate_entry_fields
from ..utils.dates import parse_timestamp
from .filters import (
    DateRange,
    FilterCriteria,
    filter_by_category_or_program,
    matches_timeframe,
    resolve_program_title,
    select_with,
)
from .program_store import ProgramEditSession, ProgramStore
from .workout_store import WorkoutStore

LOGGER = logging.getLogger(__name__)

Confirm = Callable[[str], bool]

NEW_PROGRAM_TITLE = "New Program"


class Tracker:
    """Controller-owned application state."""

    def __init__(
        self,
        storage: LocalStorage,
        workouts: WorkoutStore | None = None,
        programs: ProgramStore | None = None,
    ):
        self.storage = storage
        self.workout_repo = WorkoutRepository(storage)
        self.program_repo = ProgramRepository(storage)
        self.workouts = workouts if workouts is not None else WorkoutStore()
        self.programs = programs if programs is not None else ProgramStore()
        self.criteria = FilterCriteria()
        # Serializes mutate-and-save so snapshots are written in order
        self._lock = asyncio.Lock()

    @classmethod
    async def load(cls, storage: LocalStorage) -> "Tracker":
        """Rehydrate workouts and programs from storage."""
        entries = await WorkoutRepository(storage).load()
        programs = await ProgramRepository(storage).load()
        LOGGER.debug("Loaded %d workout(s), %d program(s)", len(entries), len(programs))
        return cls(storage, WorkoutStore(entries), ProgramStore(programs))

    # ----- Workouts -----

    async def log_workout(
        self,
        category: str,
        exercise: str,
        reps,
        weight,
        program_id: str | None = None,
        when: datetime | None = None,
    ) -> WorkoutEntry:
        """Validate and append a manually entered workout.

        Raises:
            ValidationError: If a field is missing or out of range
        """
        category, exercise, reps, weight = validate_entry_fields(
            category, exercise, reps, weight
        )
        entry = WorkoutEntry(
            category=category,
            exercise=exercise,
            reps=reps,
            weight=weight,
            date=_local_time(when),
            program_id=program_id or None,
        )
        async with self._lock:
            self.workouts.append(entry)
            await self._save_workouts()
        return entry

    async def edit_workout(
        self,
        entry_id: str,
        category: str | None = None,
        exercise: str | None = None,
        reps=None,
        weight=None,
        program_id: str | None = None,
        clear_program: bool = False,
        when: datetime | None = None,
    ) -> WorkoutEntry:
        """Replace a stored workout, keeping its id.

        Unspecified fields keep their current values. The entry is located by
        id, so this is safe to call from any filtered view.

        Raises:
            NotFoundError: If the entry does not exist
            ValidationError: If the resulting fields are invalid
        """
        index = self.workouts.index_of(entry_id)
        current = self.workouts.entries[index]

        category, exercise, reps, weight = validate_entry_fields(
            current.category if category is None else category,
            current.exercise if exercise is None else exercise,
            current.reps if reps is None else reps,
            current.weight if weight is None else weight,
        )
        if clear_program:
            tagged_program = None
        elif program_id is not None:
            tagged_program = program_id or None
        else:
            tagged_program = current.program_id

        updated = replace(
            current,
            category=category,
            exercise=exercise,
            reps=reps,
            weight=weight,
            date=current.date if when is None else _local_time(when),
            program_id=tagged_program,
        )
        async with self._lock:
            self.workouts.replace_at(self.workouts.index_of(entry_id), updated)
            await self._save_workouts()
        return updated

    async def delete_workout(self, entry_id: str, confirm: Confirm) -> bool:
        """Delete a workout after the user confirms.

        Returns:
            True if deleted, False if the user declined

        Raises:
            NotFoundError: If the entry does not exist
        """
        self.workouts.index_of(entry_id)  # raises NotFoundError
        if not confirm("Delete this workout?"):
            return False
        async with self._lock:
            self.workouts.remove_at(self.workouts.index_of(entry_id))
            await self._save_workouts()
        return True

    # ----- History -----

    def history(self, now: datetime | None = None, match: str = ALL) -> list[WorkoutEntry]:
        """Entries matching the current filters, in logged order.

        ``match`` further keeps entries whose category or program id equals
        it, so one value can pick either.
        """
        entries = select_with(self.workouts.entries, self.criteria, now=now)
        return filter_by_category_or_program(entries, match)

    def in_default_window(self, entry: WorkoutEntry, now: datetime | None = None) -> bool:
        """Whether an entry shows up under the default last-week history."""
        return matches_timeframe(
            entry.date, Timeframe.LAST_WEEK.value, self.workouts.entries, now=now
        )

    def set_filters(
        self,
        category: str | None = None,
        timeframe: str | None = None,
        start: date | datetime | None = None,
        end: date | datetime | None = None,
        program: str | None = None,
    ) -> FilterCriteria:
        """Update the history filters; None leaves a setting unchanged.

        Raises:
            ValidationError: For an unknown category or timeframe
        """
        if category is not None:
            if category != ALL and category not in CATEGORIES:
                raise ValidationError(f"Unknown category '{category}'")
            self.criteria.category = category
        if timeframe is not None:
            if timeframe not in {t.value for t in Timeframe}:
                raise ValidationError(f"Unknown timeframe '{timeframe}'")
            self.criteria.timeframe = timeframe
        if start is not None or end is not None:
            self.criteria.custom_range = DateRange(
                start=start if start is not None else self.criteria.custom_range.start,
                end=end if end is not None else self.criteria.custom_range.end,
            )
        if program is not None:
            self.criteria.program = program
        return self.criteria

    def show_program_history(self, program_id: str) -> list[WorkoutEntry]:
        """Filter history to one program and return it."""
        self.criteria.program = program_id
        return self.history()

    def clear_program_filter(self) -> None:
        self.criteria.program = ALL

    def program_title(self, program_id: str | None) -> str:
        """Display name for a program reference (raw id if dangling)."""
        return resolve_program_title(self.programs.programs, program_id)

    # ----- Programs -----

    async def apply_program(
        self, program_id: str, when: datetime | None = None
    ) -> list[WorkoutEntry]:
        """Log every exercise of a program with its defaults.

        All new entries share one timestamp and the program id. The history
        filter switches to this program.

        Raises:
            NotFoundError: If the program does not exist
        """
        program = self.programs.require(program_id)
        today = _local_time(when)
        new_entries = [
            WorkoutEntry(
                category="",  # programs mix categories
                exercise=ex.name,
                reps=ex.default_reps,
                weight=ex.default_weight,
                date=today,
                program_id=program.id,
            )
            for ex in program.exercises
        ]
        async with self._lock:
            self.workouts.append_many(new_entries)
            await self._save_workouts()
        self.criteria.program = program.id
        return new_entries

    async def create_program(self) -> ProgramEditSession:
        """Add an empty program and open it for editing."""
        program = Program(id=new_program_id(), title=NEW_PROGRAM_TITLE, exercises=[])
        async with self._lock:
            self.programs.add(program)
            await self._save_programs()
        return self.programs.start_edit(program)

    def start_program_edit(self, program_id: str) -> ProgramEditSession:
        """Open an edit session on a program.

        Raises:
            NotFoundError: If the program does not exist
        """
        return self.programs.start_edit(self.programs.require(program_id))

    async def save_program_edit(self) -> Program:
        """Commit the open edit session.

        Raises:
            ValidationError: If the title is blank; the session stays open
        """
        async with self._lock:
            program = self.programs.commit_edit()
            await self._save_programs()
        return program

    def cancel_program_edit(self) -> None:
        self.programs.cancel_edit()

    async def delete_program(self, program_id: str, confirm: Confirm) -> bool:
        """Delete a program after the user confirms.

        Clears the program history filter if it pointed at this program.
        Logged workouts keep their program id.

        Raises:
            NotFoundError: If the program does not exist
        """
        program = self.programs.require(program_id)
        if not confirm(f'Delete program "{program.title}"?'):
            return False
        async with self._lock:
            self.programs.remove(program_id)
            if self.criteria.program == program_id:
                self.criteria.program = ALL
            await self._save_programs()
        return True

    # ----- Persistence -----

    async def _save_workouts(self) -> None:
        await self.workout_repo.save(self.workouts.entries)

    async def _save_programs(self) -> None:
        await self.program_repo.save(self.programs.programs)


def _local_time(when: datetime | None) -> datetime:
    """Naive local time for a caller-supplied timestamp, defaulting to now."""
    if when is None:
        return datetime.now()
    return parse_timestamp(when)
