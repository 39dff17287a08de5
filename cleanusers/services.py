"""Business layer between the HTTP handlers and the repository."""

from __future__ import annotations

from typing import Protocol

from .entities import User


class _UserStore(Protocol):
    def add_user(self, user: User) -> User: ...

    def get_all_users(self) -> list[User]: ...

    def get_user_by_id(self, id: int) -> User: ...

    def del_user_by_id(self, id: int) -> int: ...

    def upd_user_by_id(self, user: User, id: int) -> User: ...


class Service:
    """User operations exposed to the handlers."""

    def __init__(self, repo: _UserStore) -> None:
        self._repo = repo

    def add_user(self, user: User) -> User:
        """Store a new user."""
        return self._repo.add_user(user)

    def get_all_users(self) -> list[User]:
        """Return every user."""
        return self._repo.get_all_users()

    def get_user_by_id(self, id: int) -> User:
        """Return one user."""
        return self._repo.get_user_by_id(id)

    def del_user_by_id(self, id: int) -> int:
        """Delete one user and return the number of rows removed."""
        return self._repo.del_user_by_id(id)

    def upd_user_by_id(self, user: User, id: int) -> User:
        """Update one user."""
        return self._repo.upd_user_by_id(user, id)