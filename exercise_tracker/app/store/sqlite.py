"""
SQLite-backed store.

Each operation opens its own connection through ``core.db`` and closes
it before returning, so a single ``SQLiteStore`` instance can be shared
by concurrent requests.  ``sqlite3`` errors are wrapped in
``StoreError`` with the driver's message.
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import date
from typing import Iterator, List, Optional, Union

from ..core.db import get_cursor, init_db
from ..core.errors import NotFound, StoreError
from .base import ExerciseStore, coerce_user_id, require_username
from .records import Exercise, ExerciseFilter, RecordId, User


logger = logging.getLogger(__name__)


class SQLiteStore(ExerciseStore):
    """Store persisting users and exercises in a SQLite file."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        try:
            with get_cursor(self.db_path) as cursor:
                yield cursor
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc

    def init(self) -> None:
        logger.info("Initialising SQLite store at %s", self.db_path)
        try:
            init_db(self.db_path)
        except (sqlite3.Error, OSError) as exc:
            raise StoreError(str(exc)) from exc

    def create_user(self, username: str) -> User:
        user = User(id=RecordId.generate(), username=require_username(username))
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO users (id, username) VALUES (?, ?)",
                (str(user.id), user.username),
            )
        return user

    def list_users(self) -> List[User]:
        with self._cursor() as cursor:
            rows = cursor.execute("SELECT id, username FROM users ORDER BY rowid").fetchall()
        return [User(id=RecordId(row["id"]), username=row["username"]) for row in rows]

    def find_user_by_id(self, user_id: Union[RecordId, str]) -> User:
        record_id = coerce_user_id(user_id)
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT id, username FROM users WHERE id = ?",
                (str(record_id),),
            ).fetchone()
        if not row:
            raise NotFound("User not found")
        return User(id=RecordId(row["id"]), username=row["username"])

    def create_exercise(
        self,
        user_id: RecordId,
        description: str,
        duration: int,
        date: date,
    ) -> Exercise:
        exercise = Exercise(
            id=RecordId.generate(),
            user_id=user_id,
            description=description,
            duration=duration,
            date=date,
        )
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO exercises (id, user_id, description, duration, date) VALUES (?, ?, ?, ?, ?)",
                (
                    str(exercise.id),
                    str(exercise.user_id),
                    exercise.description,
                    exercise.duration,
                    exercise.date.isoformat(),
                ),
            )
        return exercise

    def find_exercises(self, filter: ExerciseFilter, limit: Optional[int] = None) -> List[Exercise]:
        query = "SELECT id, user_id, description, duration, date FROM exercises"
        where_clauses: List[str] = ["user_id = ?"]
        params: list = [str(filter.user_id)]
        if filter.date_from is not None:
            where_clauses.append("date >= ?")
            params.append(filter.date_from.isoformat())
        if filter.date_to is not None:
            where_clauses.append("date <= ?")
            params.append(filter.date_to.isoformat())
        query += " WHERE " + " AND ".join(where_clauses)
        query += " ORDER BY rowid"
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)
        with self._cursor() as cursor:
            rows = cursor.execute(query, tuple(params)).fetchall()
        return [
            Exercise(
                id=RecordId(row["id"]),
                user_id=RecordId(row["user_id"]),
                description=row["description"],
                duration=row["duration"],
                date=date.fromisoformat(row["date"]),
            )
            for row in rows
        ]
