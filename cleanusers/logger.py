"""Application logger writing to a file."""

from __future__ import annotations

import logging
import os


def init_logger(path: str | os.PathLike[str] = "app.log") -> logging.Logger:
    """Return the application logger, appending DEBUG and above to ``path``."""
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s\t%(levelname)s\t%(filename)s:%(lineno)d\t%(message)s"
        )
    )
    logger = logging.getLogger("cleanusers")
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger