# COMPONENT: CENTRALIZED LOGGING CONFIGURATION
# REQUIREMENTS SATISFIED: Deterministic logging behavior, environment-controlled verbosity
"""
task_api/utils/logging.py

Provides a centralized logging configuration utility for the task API.
This module configures the shared "task_api" logger whose behavior is
controlled via environment variables. Module loggers such as
"task_api.store" and "task_api.requests" are children of it and inherit
its level and handler.

Environment Variables:
    LOG_LEVEL:
        0 → Silent (no logs emitted)
        1 → INFO level logging (default)
        2 → DEBUG level logging

    LOG_FILE:
        Optional path to a log file. If provided and valid, logs are written
        to this file. Otherwise, logs fall back to standard error (stderr).

Design Decisions:
    - Logging is isolated from the root logger to prevent duplicate output
      alongside uvicorn's own handlers.
    - Existing handlers are cleared on setup so calling it again (tests,
      reloads) does not stack handlers.
"""
import os
import sys
import logging

LOGGER_NAME = "task_api"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# LOG_LEVEL value -> logging level; anything above 2 means DEBUG
_LEVELS = {0: logging.CRITICAL + 1, 1: logging.INFO, 2: logging.DEBUG}


def _level_from_env() -> int:
    try:
        value = int(os.environ.get("LOG_LEVEL", "1"))
    except ValueError:
        value = 1
    return max(0, min(value, 2))


def _build_handler(log_file):
    if not log_file:
        return logging.StreamHandler(sys.stderr)
    try:
        return logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError:
        return logging.StreamHandler(sys.stderr)


def setup_logger():
    """
    (Re)configure the "task_api" logger from LOG_LEVEL and LOG_FILE.

    Child loggers handed out by get_logger() inherit the level and the
    single handler installed here.
    """
    verbosity = _level_from_env()

    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    logger.setLevel(_LEVELS[verbosity])

    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)

    if verbosity > 0:
        handler = _build_handler(os.environ.get("LOG_FILE"))
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def get_logger(name: str = ""):
    """Return the shared logger, or one of its children."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)
