"""Data access layer for lift-log.

All state lives in one key-value table. Collections are stored whole as
JSON under a fixed key and rewritten on every change.
"""

import json
import logging
from pathlib import Path

import aiosqlite

from ..models.catalog import preset_programs
from ..models.program import Program
from ..models.workout import WorkoutEntry
from .engine import get_db_path

LOGGER = logging.getLogger(__name__)

WORKOUTS_KEY = "workouts"
PROGRAMS_KEY = "programs"
DARK_MODE_KEY = "darkMode"


class LocalStorage:
    """String key-value storage backed by SQLite."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get_item(self, key: str) -> str | None:
        """Get the stored value for a key, or None if absent."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT value FROM local_storage WHERE key = ?", (key,)
            )
            row = await cursor.fetchone()
            return row[0] if row else None

    async def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO local_storage (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, value),
            )
            await db.commit()

    async def remove_item(self, key: str) -> None:
        """Delete a key if present."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM local_storage WHERE key = ?", (key,))
            await db.commit()

    async def keys(self) -> list[str]:
        """List stored keys."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT key FROM local_storage ORDER BY key")
            rows = await cursor.fetchall()
            return [row[0] for row in rows]


def _load_json_list(raw: str, key: str) -> list:
    """Decode a stored JSON array, treating anything else as empty."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        LOGGER.warning("Ignoring malformed %r data in storage: %s", key, e)
        return []

    if not isinstance(data, list):
        LOGGER.warning("Ignoring %r data in storage: expected a JSON list", key)
        return []
    return data


class WorkoutRepository:
    """Persists the workout log under the ``workouts`` key."""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    async def load(self) -> list[WorkoutEntry]:
        """Load and rehydrate all entries.

        Dates are parsed back into datetimes. Entries that are missing fields
        or cannot be parsed are skipped with a warning.
        """
        raw = await self.storage.get_item(WORKOUTS_KEY)
        if raw is None:
            return []

        entries = []
        for i, data in enumerate(_load_json_list(raw, WORKOUTS_KEY)):
            if not isinstance(data, dict):
                LOGGER.warning("Skipping workout #%d: not an object", i)
                continue
            try:
                entries.append(WorkoutEntry.from_dict(data))
            except (KeyError, TypeError, ValueError) as e:
                LOGGER.warning("Skipping invalid workout #%d: %s", i, e)
        return entries

    async def save(self, entries: list[WorkoutEntry]) -> None:
        """Serialize the full collection."""
        payload = json.dumps([entry.to_dict() for entry in entries])
        await self.storage.set_item(WORKOUTS_KEY, payload)
        LOGGER.debug("Saved %d workout(s)", len(entries))


class ProgramRepository:
    """Persists programs under the ``programs`` key."""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    async def load(self) -> list[Program]:
        """Load all programs, falling back to the presets if none are stored."""
        raw = await self.storage.get_item(PROGRAMS_KEY)
        if raw is None:
            return preset_programs()

        programs = []
        seen_ids = set()
        for i, data in enumerate(_load_json_list(raw, PROGRAMS_KEY)):
            try:
                program = Program.from_dict(data)
            except (KeyError, TypeError, ValueError) as e:
                LOGGER.warning("Skipping invalid program #%d: %s", i, e)
                continue
            if program.id in seen_ids:
                LOGGER.warning("Skipping duplicate program id %r", program.id)
                continue
            seen_ids.add(program.id)
            programs.append(program)
        return programs

    async def save(self, programs: list[Program]) -> None:
        """Serialize the full collection."""
        payload = json.dumps([program.to_dict() for program in programs])
        await self.storage.set_item(PROGRAMS_KEY, payload)
        LOGGER.debug("Saved %d program(s)", len(programs))

    async def seed(self) -> int:
        """Store the preset programs if no programs are stored yet.

        Returns:
            Number of programs seeded (0 if programs already existed)
        """
        if await self.storage.get_item(PROGRAMS_KEY) is not None:
            return 0
        programs = preset_programs()
        await self.save(programs)
        return len(programs)


class SettingsRepository:
    """Display preferences."""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    async def get_dark_mode(self) -> bool:
        """Whether dark mode is on (off when never set)."""
        return await self.storage.get_item(DARK_MODE_KEY) == "true"

    async def set_dark_mode(self, enabled: bool) -> None:
        """Turn dark mode on or off."""
        await self.storage.set_item(DARK_MODE_KEY, "true" if enabled else "false")
