"""A layered Flask HTTP service for managing users stored in SQLite."""

__version__ = "0.1.0"