"""Diagnostic logging for the worker; stdout is left to the JSON response."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _file_handler(file_path: str, formatter: logging.Formatter) -> logging.Handler:
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(formatter)
    return handler


def get_logger(name: str, file_path: str | None = None, level: str | int = logging.INFO) -> logging.Logger:
    """Return the ``name`` logger writing to stderr at ``level``.

    Handlers are attached once per logger; later calls only update the
    level. ``file_path`` adds a copy of every record to that file.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)
        if file_path:
            logger.addHandler(_file_handler(file_path, formatter))
    logger.setLevel(level)
    return logger
