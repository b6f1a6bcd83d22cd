"""
Logging configuration: central setup for generation scripts.

Called once by ``mimic.new()``. Every module that does
``logger = logging.getLogger(__name__)`` inherits this config; the
file pool takes its logger explicitly and defaults to its own
module logger.

A generation run is short and mostly silent. At WARNING only the
message is shown. INFO adds a clock so the write summary can be lined
up with other tooling. DEBUG adds the emitting module and line, which
is where per-file staging and write records come from. An optional
log file always gets dates and locations.
"""

from __future__ import annotations

import logging
import sys

_FMT_MINIMAL = "%(message)s"

_FMT_INFO = "%(asctime)s %(message)s"
_DATEFMT_INFO = "%H:%M:%S"

_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d: %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d: %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def _console_format(numeric_level: int) -> tuple[str, str | None]:
    if numeric_level <= logging.DEBUG:
        return _FMT_DEBUG, _DATEFMT_DEBUG
    if numeric_level <= logging.INFO:
        return _FMT_INFO, _DATEFMT_INFO
    return _FMT_MINIMAL, None


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Configure the root logger and return the ``mimic`` logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Level for the log file, defaults to ``level``.
    """
    numeric_level = parse_level(level)
    fmt, datefmt = _console_format(numeric_level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    effective_level = numeric_level

    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)
    return logging.getLogger("mimic")


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant (WARNING if unknown)."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
