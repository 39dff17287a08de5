"""SQLite storage for users."""

from __future__ import annotations

import sqlite3
import threading

from .entities import User

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS users ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "name TEXT NOT NULL, "
    "age INTEGER NOT NULL)"
)


class UserNotFoundError(LookupError):
    """No user has the requested id."""


def create_schema(db: sqlite3.Connection) -> None:
    """Create the users table if it does not exist yet."""
    with db:
        db.execute(_SCHEMA)


class Repository:
    """Reads and writes users in a database connection."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self._db = db
        self._lock = threading.Lock()

    def add_user(self, user: User) -> User:
        """Insert the user and set its id to the one assigned."""
        with self._lock, self._db:
            cursor = self._db.execute(
                "INSERT INTO users (name, age) VALUES (?, ?)", (user.name, user.age)
            )
        user.id = cursor.lastrowid
        return user

    def get_all_users(self) -> list[User]:
        """Return every stored user."""
        with self._lock:
            rows = self._db.execute("SELECT id, name, age FROM users").fetchall()
        return [User(*row) for row in rows]

    def get_user_by_id(self, id: int) -> User:
        """Return the user with this id or raise UserNotFoundError."""
        with self._lock:
            row = self._db.execute(
                "SELECT id, name, age FROM users WHERE id = ?", (id,)
            ).fetchone()
        if row is None:
            raise UserNotFoundError(id)
        return User(*row)

    def del_user_by_id(self, id: int) -> int:
        """Delete the user with this id and return the number of rows removed."""
        with self._lock, self._db:
            cursor = self._db.execute("DELETE FROM users WHERE id = ?", (id,))
        return cursor.rowcount

    def upd_user_by_id(self, user: User, id: int) -> User:
        """Overwrite name and age of the user with this id.

        On success the user's id is set to ``id``; raises UserNotFoundError
        when no row matched.
        """
        with self._lock, self._db:
            cursor = self._db.execute(
                "UPDATE users SET name = ?, age = ? WHERE id = ?",
                (user.name, user.age, id),
            )
        if cursor.rowcount <= 0:
            raise UserNotFoundError(id)
        user.id = id
        return user