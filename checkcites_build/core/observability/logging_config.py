"""
Logging configuration for the checkcites-build CLI.

``main.py`` calls ``setup_logging`` once per invocation; modules just
do ``logger = logging.getLogger(__name__)``.

Level precedence:
    --debug / --verbose / --quiet  >  CHECKCITES_BUILD_LOG_LEVEL  >  WARNING

CHECKCITES_BUILD_LOG_FILE adds a file log, at
CHECKCITES_BUILD_LOG_FILE_LEVEL or the console level.
"""

from __future__ import annotations

import logging
import sys

LOG_LEVEL_ENV = "CHECKCITES_BUILD_LOG_LEVEL"
LOG_FILE_ENV = "CHECKCITES_BUILD_LOG_FILE"
LOG_FILE_LEVEL_ENV = "CHECKCITES_BUILD_LOG_FILE_LEVEL"

_DETAILED = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

# (lowest level the format applies to, format, datefmt), most verbose first
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.NOTSET, _DETAILED, "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.WARNING, "%(message)s", None),
)

# Marks handlers this module installed, so a re-run can close them
_OWNED = "_checkcites_build_handler"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for the whole process.

    Safe to call repeatedly: handlers from an earlier call are closed
    and replaced.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a log file to append to.
        log_file_level: Level for the log file; defaults to ``level``.
    """
    console_level = _parse_level(level)
    handlers = [_console_handler(console_level)]

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handlers.append(_file_handler(log_file, file_level))

    root = logging.getLogger()
    _release_handlers(root)
    for handler in handlers:
        setattr(handler, _OWNED, True)
        root.addHandler(handler)

    root.setLevel(min(h.level for h in handlers))


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = _CONSOLE_FORMATS[-1][1:]
    for threshold, candidate, candidate_datefmt in reversed(_CONSOLE_FORMATS):
        if level >= threshold:
            fmt, datefmt = candidate, candidate_datefmt
            break

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_DETAILED, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _release_handlers(root: logging.Logger) -> None:
    """Detach every root handler, closing the ones installed here."""
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if getattr(handler, _OWNED, False):
            handler.close()


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
