"""Logging setup for the hook process."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%d-%m-%Y %H:%M:%S"


def setup_logging(log_file: str, debug: bool = False) -> logging.Logger:
    """Configure the ``accel_hook`` logger to append to log_file.

    Falls back to stderr when the file cannot be opened. Handlers from a
    previous call are closed and replaced.
    """
    logger = logging.getLogger("accel_hook")
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    open_error: OSError | None = None
    handler: logging.Handler
    try:
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        open_error = exc
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if open_error is not None:
        logger.error("Log to file failed: %s", open_error)
    return logger
