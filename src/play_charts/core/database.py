"""
SQLite store operations for Play Charts
"""

import sqlite3
from contextlib import closing, contextmanager
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Tuple

from loguru import logger

from .config import get_data_dir


# Tables that count_rows is allowed to touch
COUNTABLE_TABLES = ("tracks", "plays")

# SQLite keeps these next to the store file while it is open
_SIDE_FILE_SUFFIXES = ("-journal", "-wal", "-shm")


class StoreError(Exception):
    """Raised when the play history store cannot be opened or created."""


class WriteOutcome(Enum):
    """Result of a single insert against the store."""

    INSERTED = "inserted"
    DUPLICATE = "duplicate"  # Unique constraint rejected the row
    FAILED = "failed"


def get_store_path(store_name: str) -> Path:
    """Get the path to the SQLite file for a store name."""
    return get_data_dir() / f"{store_name}.db"


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the tracks and plays tables if they are missing."""
    conn.execute("""
        CREATE TABLE IF NOT EXISTS tracks (
            id INTEGER PRIMARY KEY,
            bpm INTEGER,
            key STRING,
            name STRING,
            genre STRING,
            artist STRING,
            length INTEGER,
            audio_id STRING UNIQUE
        )
    """)

    conn.execute("""
        CREATE TABLE IF NOT EXISTS plays (
            id INTEGER PRIMARY KEY,
            track_id INTEGER REFERENCES tracks (id),
            year INTEGER,
            month INTEGER,
            day INTEGER,
            hour INTEGER,
            minute INTEGER
        )
    """)

    # Chart windows filter on year/month and join on track_id
    conn.execute(
        "CREATE INDEX IF NOT EXISTS idx_plays_year_month ON plays (year, month)"
    )
    conn.execute("CREATE INDEX IF NOT EXISTS idx_plays_track_id ON plays (track_id)")


def reset_store(store_name: str) -> None:
    """Delete the store file for store_name, if present. All history is lost."""
    store_path = get_store_path(store_name)
    for path in [store_path] + [
        store_path.with_name(store_path.name + suffix)
        for suffix in _SIDE_FILE_SUFFIXES
    ]:
        if path.exists():
            path.unlink()
            logger.debug(f"Removed {path}")


def open_store(store_name: str) -> Tuple[Optional[sqlite3.Connection], bool]:
    """Open (or create) the store without discarding existing history.

    Returns:
        (connection, True) on success, (None, False) if the store is unavailable
    """
    store_path = get_store_path(store_name)
    try:
        store_path.parent.mkdir(parents=True, exist_ok=True)
        # Autocommit; multi-statement units of work go through transaction()
        conn = sqlite3.connect(store_path, isolation_level=None)
    except (sqlite3.Error, OSError) as e:
        logger.error(f"Error opening store {store_path}: {e}")
        return None, False

    conn.row_factory = sqlite3.Row
    try:
        create_schema(conn)
    except sqlite3.Error as e:
        logger.error(f"Error creating schema in {store_path}: {e}")
        conn.close()
        return None, False

    logger.info(f"Opened store {store_path}")
    return conn, True


def initialize_store(store_name: str) -> Tuple[Optional[sqlite3.Connection], bool]:
    """Reset the store for store_name and open a fresh, empty one.

    Destructive: any history previously stored under this name is deleted.
    """
    try:
        reset_store(store_name)
    except OSError as e:
        logger.error(f"Error resetting store {store_name}: {e}")
        return None, False
    return open_store(store_name)


def require_store(store_name: str, reset: bool = True) -> sqlite3.Connection:
    """Like initialize_store/open_store, but raise StoreError on failure."""
    conn, ok = initialize_store(store_name) if reset else open_store(store_name)
    if not ok or conn is None:
        raise StoreError(f"Store {store_name!r} is unavailable at {get_store_path(store_name)}")
    return conn


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Run a block inside BEGIN/COMMIT, rolling back if it raises."""
    conn.execute("BEGIN")
    try:
        yield conn
    except BaseException:
        conn.execute("ROLLBACK")
        raise
    else:
        conn.execute("COMMIT")


def classify_write_error(error: sqlite3.Error) -> WriteOutcome:
    """Map a failed write to DUPLICATE (unique violation) or FAILED."""
    if (
        isinstance(error, sqlite3.IntegrityError)
        and getattr(error, "sqlite_errorcode", None) == sqlite3.SQLITE_CONSTRAINT_UNIQUE
    ):
        return WriteOutcome.DUPLICATE
    return WriteOutcome.FAILED


def count_rows(conn: sqlite3.Connection, table: str) -> int:
    """Count rows in tracks or plays; -1 if the count cannot be determined."""
    if table not in COUNTABLE_TABLES:
        raise ValueError(f"Unknown table: {table}")

    try:
        with closing(conn.execute(f"SELECT COUNT(*) AS count FROM {table}")) as cursor:
            row = cursor.fetchone()
    except sqlite3.Error as e:
        logger.error(f"Unable to count {table}: {e}")
        return -1

    return row["count"] if row else -1
