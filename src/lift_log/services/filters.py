"""History filtering.

Pure functions over a list of workout entries. Nothing here mutates state;
the caller re-runs the filter whenever entries or criteria change.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from ..models.catalog import ALL, Timeframe
from ..models.program import Program
from ..models.workout import WorkoutEntry
from ..utils.dates import end_of_day, start_of_day, subtract_month


@dataclass
class DateRange:
    """Custom history range. Either bound may be unset."""

    start: date | datetime | None = None
    end: date | datetime | None = None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass
class FilterCriteria:
    """Current history view settings (never persisted)."""

    category: str = ALL
    timeframe: str = Timeframe.LAST_WEEK.value
    custom_range: DateRange = field(default_factory=DateRange)
    program: str = ALL


def _timeframe_predicate(
    timeframe: str,
    entries: Sequence[WorkoutEntry],
    custom_range: DateRange | None,
    now: datetime,
) -> Callable[[datetime], bool]:
    """Resolve a timeframe into a predicate over a single entry date."""
    if timeframe == Timeframe.LAST_WORKOUT:
        if not entries:
            return lambda moment: True
        latest = max(entry.date for entry in entries)
        return lambda moment: moment >= latest

    if timeframe == Timeframe.LAST_WEEK:
        week_ago = now - timedelta(days=7)
        return lambda moment: week_ago <= moment <= now

    if timeframe == Timeframe.LAST_MONTH:
        month_ago = subtract_month(now)
        return lambda moment: month_ago <= moment <= now

    if timeframe == Timeframe.CUSTOM:
        if custom_range is None or not custom_range.is_complete:
            # No range picked yet
            return lambda moment: True
        start = start_of_day(custom_range.start)
        end = end_of_day(custom_range.end)
        return lambda moment: start <= moment <= end

    return lambda moment: True


def matches_timeframe(
    moment: datetime,
    timeframe: str,
    entries: Sequence[WorkoutEntry],
    custom_range: DateRange | None = None,
    now: datetime | None = None,
) -> bool:
    """Check whether a single date falls inside a timeframe.

    Args:
        moment: Date of the candidate entry
        timeframe: One of the Timeframe values; anything else matches
        entries: All entries (needed for "since last workout")
        custom_range: Bounds for the custom timeframe
        now: Reference time, defaults to the current time

    Returns:
        True if the date passes the timeframe
    """
    if now is None:
        now = datetime.now()
    return _timeframe_predicate(timeframe, entries, custom_range, now)(moment)


def select(
    entries: Sequence[WorkoutEntry],
    category_filter: str = ALL,
    timeframe: str = Timeframe.LAST_WEEK.value,
    custom_range: DateRange | None = None,
    program_filter: str = ALL,
    now: datetime | None = None,
) -> list[WorkoutEntry]:
    """Select the entries to display, keeping their stored order.

    Category, program and timeframe filters are combined with AND.
    """
    if now is None:
        now = datetime.now()
    in_timeframe = _timeframe_predicate(timeframe, entries, custom_range, now)

    selected = []
    for entry in entries:
        if category_filter != ALL and entry.category != category_filter:
            continue
        if program_filter != ALL and entry.program_id != program_filter:
            continue
        if not in_timeframe(entry.date):
            continue
        selected.append(entry)
    return selected


def select_with(
    entries: Sequence[WorkoutEntry],
    criteria: FilterCriteria,
    now: datetime | None = None,
) -> list[WorkoutEntry]:
    """Run select() with a FilterCriteria."""
    return select(
        entries,
        category_filter=criteria.category,
        timeframe=criteria.timeframe,
        custom_range=criteria.custom_range,
        program_filter=criteria.program,
        now=now,
    )


def filter_by_category_or_program(
    entries: Sequence[WorkoutEntry], value: str
) -> list[WorkoutEntry]:
    """Keep entries whose category or program id equals the value."""
    if value == ALL:
        return list(entries)
    return [e for e in entries if e.category == value or e.program_id == value]


def resolve_program_title(programs: Sequence[Program], program_id: str | None) -> str:
    """Title of the referenced program, or the raw id if it no longer exists."""
    if not program_id:
        return ""
    for program in programs:
        if program.id == program_id:
            return program.title
    return program_id
