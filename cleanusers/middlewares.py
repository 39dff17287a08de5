"""Request id and access logging hooks for a Flask application."""

from __future__ import annotations

import json
import logging
import uuid

from flask import Flask, Response, g, request

REQUEST_ID_HEADER = "X-Reques-ID"
LOG_MESSAGE_ATTR = "log_message"

_MISSING = object()


def current_request_id() -> str | None:
    """Return the id given to the request being served, if any."""
    return g.get("request_id")


def request_id_middleware(app: Flask) -> None:
    """Give every request a fresh UUID and echo it in a response header."""

    @app.before_request
    def _assign_request_id() -> None:
        g.request_id = str(uuid.uuid4())

    @app.after_request
    def _expose_request_id(response: Response) -> Response:
        request_id = current_request_id()
        if request_id is not None:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _describe(value: object) -> str:
    if value is _MISSING:
        return ""
    return str(value)


def logger_middleware(app: Flask, logger: logging.Logger) -> None:
    """Log one line per finished request, at a level chosen by its status."""

    @app.after_request
    def _log_request(response: Response) -> Response:
        status = response.status_code
        fields = {
            "status": status,
            "requestID": current_request_id(),
            "method": request.method,
            "path": request.path,
            "message": _describe(g.get(LOG_MESSAGE_ATTR, _MISSING)),
        }
        if status >= 500:
            level, title = logging.ERROR, "server error"
        elif status >= 400:
            level, title = logging.WARNING, "client error"
        else:
            level, title = logging.INFO, "successfullR"
        logger.log(
            level,
            "%s\t%s",
            title,
            json.dumps(fields, ensure_ascii=False),
            extra={"fields": fields},
        )
        return response