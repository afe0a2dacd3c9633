"""In-memory workout log."""

from collections.abc import Iterable, Iterator

from ..errors import NotFoundError
from ..models.workout import WorkoutEntry


class WorkoutStore:
    """Ordered collection of workout entries.

    Positions refer to the full, insertion-ordered collection. Callers
    holding an entry from a filtered view resolve its position with
    ``index_of`` rather than using its index in that view.
    """

    def __init__(self, entries: Iterable[WorkoutEntry] | None = None):
        self._entries: list[WorkoutEntry] = list(entries or [])

    @property
    def entries(self) -> list[WorkoutEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WorkoutEntry]:
        return iter(list(self._entries))

    def append(self, entry: WorkoutEntry) -> None:
        self._entries.append(entry)

    def append_many(self, entries: Iterable[WorkoutEntry]) -> None:
        self._entries.extend(entries)

    def replace_at(self, index: int, entry: WorkoutEntry) -> WorkoutEntry:
        """Replace the entry at a position, returning the old one."""
        self._check_index(index)
        previous = self._entries[index]
        self._entries[index] = entry
        return previous

    def remove_at(self, index: int) -> WorkoutEntry:
        """Remove and return the entry at a position."""
        self._check_index(index)
        return self._entries.pop(index)

    def index_of(self, entry_id: str) -> int:
        """Position of the entry with the given id.

        Raises:
            NotFoundError: If no entry has that id
        """
        for i, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return i
        raise NotFoundError(f"Workout {entry_id} not found")

    def get(self, entry_id: str) -> WorkoutEntry | None:
        """Get an entry by id."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def _check_index(self, index: int) -> None:
        # Negative indexes would silently address from the end
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Workout position {index} out of range")
