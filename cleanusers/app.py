"""Application wiring and the command-line entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sqlite3
from typing import Any

from flask import Flask

from .handlers import Handler
from .logger import init_logger
from .middlewares import logger_middleware, request_id_middleware
from .repository import Repository, create_schema
from .services import Service


def create_app(service: Any, logger: logging.Logger) -> Flask:
    """Build the Flask application serving the user endpoints."""
    app = Flask(__name__)
    request_id_middleware(app)
    logger_middleware(app, logger)
    handler = Handler(service)
    routes = [
        ("/adduser", "add_user", "POST"),
        ("/allusers", "get_all_users", "GET"),
        ("/user/<id>", "get_user_by_id", "GET"),
        ("/user/<id>", "del_user_by_id", "DELETE"),
        ("/user/<id>", "upd_user_by_id", "PUT"),
    ]
    for rule, name, method in routes:
        app.add_url_rule(rule, name, getattr(handler, name), methods=[method])
    return app


def main(argv: list[str] | None = None) -> int:
    """Open the database, set up logging and run the HTTP server."""
    parser = argparse.ArgumentParser(prog="cleanusers")
    parser.add_argument("--db", default=os.environ.get("DB_PATH", "users.db"))
    parser.add_argument("--log-file", default="app.log")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8080")))
    args = parser.parse_args(argv)

    db = sqlite3.connect(args.db, check_same_thread=False)
    try:
        create_schema(db)
        logger = init_logger(args.log_file)
        create_app(Service(Repository(db)), logger).run(host=args.host, port=args.port)
    finally:
        db.close()
    return 0