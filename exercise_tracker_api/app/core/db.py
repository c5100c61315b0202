"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations when the store is
initialised (``init_db``).  It uses SQLite as a lightweight embedded
database; the rest of the application only talks to it through
``store.sqlite.SQLiteStore``.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from .config import settings

logger = logging.getLogger(__name__)


# Exercises reference users by id only.  There is deliberately no
# FOREIGN KEY clause: the relation is a soft reference checked by the
# services before inserting.
MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL DEFAULT ''
        );

        CREATE TABLE IF NOT EXISTS exercises (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            description TEXT,
            duration NUMERIC,
            date TEXT NOT NULL
        );
        """,
    ),
    (
        2,
        """
        -- Log queries always filter by user and usually by date range.
        CREATE INDEX IF NOT EXISTS idx_exercises_user_date ON exercises (user_id, date);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    A ``sqlite:///`` prefix is stripped.  If the URL is ``:memory:`` or
    an absolute path it is used directly.  Otherwise it is resolved
    relative to the project root.  Raises ``ValueError`` for URLs of any
    other scheme (e.g. ``mongodb://``), which this store cannot open.
    """
    db_url = database_url or settings.database_url
    if db_url.startswith("sqlite:///"):
        db_url = db_url[len("sqlite:///"):] or ":memory:"
    elif "://" in db_url:
        scheme = db_url.split("://", 1)[0]
        raise ValueError(f"Unsupported database URL scheme {scheme!r}; expected a SQLite file path")
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    ``check_same_thread`` is disabled because FastAPI may serve a
    request on a different thread than the one that opened the
    connection.
    """
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> int:
    """Apply pending migrations and return the resulting schema version.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  To change the schema append a migration with an
    incremented version number.
    """
    cursor = conn.cursor()
    cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
    row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    current = row["version"] or 0
    for version, sql in MIGRATIONS:
        if version <= current:
            continue
        logger.info("Applying migration %s", version)
        cursor.executescript(sql)
        cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
        conn.commit()
        current = version
    return current
