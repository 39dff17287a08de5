"""HTTP handlers for the user endpoints."""

from __future__ import annotations

import json
import re
from typing import Any

from flask import Response, g, request

from .entities import User, user_from_json
from .middlewares import LOG_MESSAGE_ATTR
from .repository import UserNotFoundError

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_BAD_ID = "Неверный ID (не число)"
_BAD_JSON = "Неверный JSON"
_NOT_FOUND = "Пользователь не найден"

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _parse_id(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"out of range: {text!r}")
    return value


def _read_user() -> User:
    return user_from_json(json.loads(request.get_data()))


def _json_response(status: int, payload: Any, indent: int | None = None) -> Response:
    separators = (",", ": ") if indent else (",", ":")
    body = json.dumps(payload, ensure_ascii=False, indent=indent, separators=separators)
    for char, escaped in _JSON_ESCAPES.items():
        body = body.replace(char, escaped)
    return Response(body, status=status, content_type="application/json; charset=utf-8")


def _note(message: str) -> None:
    setattr(g, LOG_MESSAGE_ATTR, message)


def _fail(status: int, message: str, log_message: str | None = None) -> Response:
    _note(log_message if log_message is not None else message)
    return _json_response(status, {"error": message})


class Handler:
    """Flask view functions backed by a user service."""

    def __init__(self, service: Any) -> None:
        self._service = service

    def add_user(self) -> Response:
        """Create a user from the JSON body."""
        try:
            user = _read_user()
        except ValueError:
            return _fail(
                400, _BAD_JSON, "Ошибка при добавлении пользователя: неверный запрос"
            )
        try:
            self._service.add_user(user)
        except Exception:  # any storage failure is a server error
            return _fail(500, "Bad request", "Ошибка при добавлении пользователя")
        _note(
            f"Добавлен новый пользователь. Имя: {user.name}. "
            f"Возраст: {user.age}. ID: {user.id}"
        )
        return _json_response(
            200, {"message": f"Имя: {user.name}. Возраст: {user.age}. ID: {user.id}"}
        )

    def get_all_users(self) -> Response:
        """List every user; an empty store yields JSON null."""
        try:
            users = self._service.get_all_users()
        except Exception:
            return _fail(
                500,
                "Internal server error",
                "Ошибка сервера при получении всех пользователей",
            )
        _note("Запрошены все пользователи")
        payload = [user.to_dict() for user in users] or None
        return _json_response(200, payload, indent=4)

    def get_user_by_id(self, id: str) -> Response:
        """Return one user."""
        try:
            user_id = _parse_id(id)
        except ValueError:
            return _fail(400, _BAD_ID)
        try:
            user = self._service.get_user_by_id(user_id)
        except UserNotFoundError:
            return _fail(404, _NOT_FOUND)
        except Exception:
            return _fail(500, "Ошибка сервера при получении пользователя")
        _note(f"Запрошен пользователь с ID: {user_id}")
        return _json_response(200, user.to_dict())

    def del_user_by_id(self, id: str) -> Response:
        """Delete one user."""
        try:
            user_id = _parse_id(id)
        except ValueError:
            return _fail(400, _BAD_ID)
        try:
            rows_affected = self._service.del_user_by_id(user_id)
        except Exception:
            return _fail(500, "Ошибка сервера при удалении пользователя")
        if rows_affected > 0:
            _note(f"Удален пользователь с ID: {user_id}")
            return _json_response(200, {"message": "Пользователь удален"})
        return _fail(404, _NOT_FOUND)

    def upd_user_by_id(self, id: str) -> Response:
        """Replace name and age of one user from the JSON body."""
        try:
            user_id = _parse_id(id)
        except ValueError:
            return _fail(400, _BAD_ID)
        try:
            user = _read_user()
        except ValueError:
            return _fail(
                400, _BAD_JSON, "Ошибка при изменении пользователя: неверный запрос"
            )
        try:
            self._service.upd_user_by_id(user, user_id)
        except UserNotFoundError:
            return _fail(404, _NOT_FOUND)
        except Exception:
            return _fail(500, "Ошибка сервера при изменении пользователя")
        _note(f"Изменен пользователь с ID: {user_id}")
        return _json_response(200, user.to_dict())