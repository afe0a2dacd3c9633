"""Pytest configuration and fixtures."""

import pytest
import tempfile
from datetime import datetime
from pathlib import Path

from lift_log.db import LocalStorage, init_db
from lift_log.models.workout import WorkoutEntry
from lift_log.services.tracker import Tracker


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
async def storage(temp_db_path):
    """Initialized local storage on a temporary database."""
    await init_db(temp_db_path)
    return LocalStorage(temp_db_path)


@pytest.fixture
async def tracker(storage):
    """Tracker loaded from empty storage (preset programs only)."""
    return await Tracker.load(storage)


@pytest.fixture
def now():
    """Fixed reference time for filter tests."""
    return datetime(2024, 3, 15, 12, 0)


@pytest.fixture
def sample_entries():
    """A few manually logged workouts, oldest first."""
    return [
        WorkoutEntry(
            id="a1",
            category="chest",
            exercise="Bench Press",
            reps=10,
            weight=40,
            date=datetime(2024, 3, 1, 18, 30),
        ),
        WorkoutEntry(
            id="b2",
            category="legs",
            exercise="Squats",
            reps=8,
            weight=80,
            date=datetime(2024, 3, 10, 18, 30),
        ),
        WorkoutEntry(
            id="c3",
            category="chest",
            exercise="Chest Fly",
            reps=12,
            weight=15,
            date=datetime(2024, 3, 14, 9, 0),
            program_id="push-pull-legs",
        ),
    ]
