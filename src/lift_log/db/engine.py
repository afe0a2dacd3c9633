"""Database engine setup and initialization."""

import os
from pathlib import Path

import aiosqlite

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
DATA_DIR_ENV = "LIFT_LOG_DATA_DIR"
DB_FILENAME = "lift_log.db"


def get_data_dir() -> Path:
    """Get the data directory, honoring the LIFT_LOG_DATA_DIR override."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # String-keyed, string-valued local storage
        await db.execute("""
            CREATE TABLE IF NOT EXISTS local_storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.commit()
