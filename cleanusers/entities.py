"""The user record exchanged over the HTTP API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_FIELDS: dict[str, type] = {"id": int, "name": str, "age": int}


@dataclass
class User:
    """A stored user."""

    id: int = 0
    name: str = ""
    age: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of the user."""
        return {"id": self.id, "name": self.name, "age": self.age}


def user_from_json(data: Any) -> User:
    """Build a User from a decoded JSON value.

    Keys match field names case-insensitively; unknown keys and nulls are
    ignored. Raises ValueError for a non-object or a wrongly typed field.
    """
    if data is None:
        return User()
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    values: dict[str, Any] = {}
    for key, value in data.items():
        field = key.lower()
        if field not in _FIELDS or value is None:
            continue
        if _FIELDS[field] is str:
            if not isinstance(value, str):
                raise ValueError(f"field {key!r} must be a string")
        elif isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"field {key!r} must be an integer")
        elif not -(2**63) <= value < 2**63:
            raise ValueError(f"field {key!r} is out of range")
        values[field] = value
    return User(**values)