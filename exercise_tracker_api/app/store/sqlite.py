"""
SQLite implementation of the record store.

A single connection is opened lazily and kept for the lifetime of the
store; the schema is created by the migrations in ``core.db``.  Dates
are stored as fixed‑width ISO‑8601 text so that string comparison in
SQL matches chronological order.  Every ``sqlite3.Error`` is logged and
re‑raised as ``StoreError``.
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, List, Optional

from ..core.db import get_connection, get_database_path, init_db
from ..core.errors import StoreError
from .base import ExerciseFilter, ExerciseRecord, Number, RecordStore, UserRecord, new_record_id

logger = logging.getLogger(__name__)


def _to_db_date(value: datetime) -> str:
    return value.isoformat(timespec="microseconds")


def _row_to_exercise(row: sqlite3.Row) -> ExerciseRecord:
    return ExerciseRecord(
        id=row["id"],
        user_id=row["user_id"],
        description=row["description"],
        duration=row["duration"],
        date=datetime.fromisoformat(row["date"]),
    )


class SQLiteStore(RecordStore):
    """Record store backed by an SQLite database file."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.db_path = get_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None

    def init(self) -> None:
        self._connection()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            try:
                conn = get_connection(self.db_path)
                version = init_db(conn)
            except sqlite3.Error as exc:
                logger.exception("Could not open database %s", self.db_path)
                raise StoreError(f"Could not open database: {exc}") from exc
            logger.info("Opened database %s (schema version %s)", self.db_path, version)
            self._conn = conn
        return self._conn

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and roll back on failure."""
        conn = self._connection()
        try:
            yield conn.cursor()
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            logger.exception("Database operation failed")
            raise StoreError(str(exc)) from exc

    def insert_user(self, username: str) -> UserRecord:
        user = UserRecord(id=new_record_id(), username=username)
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO users (id, username) VALUES (?, ?)",
                (user.id, user.username),
            )
        return user

    def find_users(self) -> List[UserRecord]:
        with self._cursor() as cursor:
            rows = cursor.execute("SELECT id, username FROM users ORDER BY rowid").fetchall()
        return [UserRecord(id=row["id"], username=row["username"]) for row in rows]

    def find_user_by_id(self, user_id: str) -> Optional[UserRecord]:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT id, username FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        if not row:
            return None
        return UserRecord(id=row["id"], username=row["username"])

    def insert_exercise(
        self,
        user_id: str,
        description: Optional[str],
        duration: Optional[Number],
        date: datetime,
    ) -> ExerciseRecord:
        exercise = ExerciseRecord(
            id=new_record_id(),
            user_id=user_id,
            description=description,
            duration=duration,
            date=date,
        )
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO exercises (id, user_id, description, duration, date) VALUES (?, ?, ?, ?, ?)",
                (exercise.id, user_id, description, duration, _to_db_date(date)),
            )
        return exercise

    def find_exercises(self, criteria: ExerciseFilter) -> List[ExerciseRecord]:
        clauses = ["user_id = ?"]
        params: list = [criteria.user_id]
        if criteria.date_from is not None:
            clauses.append("date >= ?")
            params.append(_to_db_date(criteria.date_from))
        if criteria.date_to is not None:
            clauses.append("date <= ?")
            params.append(_to_db_date(criteria.date_to))
        sql = (
            "SELECT id, user_id, description, duration, date FROM exercises "
            f"WHERE {' AND '.join(clauses)} ORDER BY rowid"
        )
        if criteria.limit is not None:
            sql += " LIMIT ?"
            params.append(criteria.limit)
        with self._cursor() as cursor:
            rows = cursor.execute(sql, tuple(params)).fetchall()
        return [_row_to_exercise(row) for row in rows]
