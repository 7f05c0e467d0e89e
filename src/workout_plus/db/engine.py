"""Database handle setup and schema initialization."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from ..config import get_settings
from ..errors import StorageError

logger = logging.getLogger(__name__)


def get_db_path() -> Path:
    """Get the configured database file path."""
    return get_settings().database_path


class Database:
    """Storage handle shared by every repository.

    Owns a single SQLite connection, opened at startup with ``open()`` and
    released with ``close()``. Each ``connect()`` block is one unit of work:
    blocks are serialised, commit on success and roll back on any error.
    Driver errors, and ids too large for an SQLite INTEGER, surface as
    ``StorageError``.
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self._conn: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    async def open(self) -> None:
        """Open the connection (no-op if already open)."""
        if self._conn is not None:
            return
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            conn = await aiosqlite.connect(self.db_path)
            conn.row_factory = aiosqlite.Row
            await conn.execute("PRAGMA foreign_keys = ON")
        except aiosqlite.Error as e:
            raise StorageError(f"Could not open database {self.db_path}: {e}") from e
        self._conn = conn
        logger.debug("Opened database %s", self.db_path)

    async def close(self) -> None:
        """Close the connection (no-op if already closed)."""
        if self._conn is None:
            return
        async with self._lock:
            await self._conn.close()
            self._conn = None
        logger.debug("Closed database %s", self.db_path)

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[aiosqlite.Connection]:
        """Run a block of statements as one transaction."""
        if self._conn is None:
            raise StorageError("Database is not open")
        async with self._lock:
            conn = self._conn
            try:
                yield conn
                await conn.commit()
            except (aiosqlite.Error, OverflowError) as e:
                await self._rollback(conn)
                raise StorageError(f"Storage operation failed: {e}") from e
            except BaseException:
                await self._rollback(conn)
                raise

    async def _rollback(self, conn: aiosqlite.Connection) -> None:
        try:
            await conn.rollback()
        except aiosqlite.Error:
            logger.exception("Rollback failed on %s", self.db_path)

    async def __aenter__(self) -> "Database":
        await self.open()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


async def init_db(database: Database) -> None:
    """Initialize the database schema."""
    async with database.connect() as db:
        # Programs table (root of the hierarchy)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS programs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                level TEXT NOT NULL,
                type TEXT NOT NULL,
                category TEXT,
                description TEXT NOT NULL
            )
        """)

        # Training days
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                program_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                day_number INTEGER NOT NULL,
                week_number INTEGER NOT NULL,
                FOREIGN KEY (program_id) REFERENCES programs(id)
            )
        """)

        # Exercise catalog
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                type TEXT NOT NULL,
                video_url TEXT
            )
        """)

        # Exercise assignments within a workout
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_id INTEGER NOT NULL,
                exercise_id INTEGER NOT NULL,
                sets INTEGER,
                reps TEXT,
                weight TEXT,
                rest_time INTEGER,
                notes TEXT,
                order_index INTEGER NOT NULL,
                FOREIGN KEY (workout_id) REFERENCES workouts(id),
                FOREIGN KEY (exercise_id) REFERENCES exercises(id)
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_program
            ON workouts(program_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_exercises_workout
            ON workout_exercises(workout_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_exercises_exercise
            ON workout_exercises(exercise_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_name
            ON exercises(name)
        """)

    logger.info("Database schema ready at %s", database.db_path)
