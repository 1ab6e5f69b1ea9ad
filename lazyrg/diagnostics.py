"""Append-only diagnostic log for the session.

The file is opened once at startup and closed at shutdown. Module loggers
under ``lazyrg`` write to it; nothing is printed to the terminal.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import LogOpenError

LOGGER_NAME = "lazyrg"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def open_log(path: Path) -> logging.FileHandler:
    """Attach an append-mode file handler to the ``lazyrg`` logger.

    Raises ``LogOpenError`` when the file cannot be opened.
    """
    try:
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError as exc:
        raise LogOpenError(str(exc)) from exc
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return handler


def close_log(handler: logging.FileHandler) -> None:
    logging.getLogger(LOGGER_NAME).removeHandler(handler)
    handler.close()
