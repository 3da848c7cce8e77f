"""
Logging configuration for the launcher.

Two callers set it up, once per process: the CLI (``main.py``) and
every action stub (``run_stub()``).  Both go through
``setup_logging_from_env()`` so a stub and ``action-launcher run``
log identically.

Level precedence:
    CLI flag  >  LAUNCHER_LOG_LEVEL  >  WARNING

Two rules the rest of the launcher depends on:

- Console output only ever goes to stderr.  Stdout carries the
  dispatched binary's output and the ``::error`` annotation, and the
  runner parses it.
- Logging setup never fails the bootstrap.  A log file that cannot be
  opened costs the file, not the job step.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "LAUNCHER_LOG_LEVEL"
ENV_FILE = "LAUNCHER_LOG_FILE"
ENV_FILE_LEVEL = "LAUNCHER_LOG_FILE_LEVEL"

# Console format per level; quieter levels get less decoration
_CONSOLE_FORMATS = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_FMT_MINIMAL = "%(message)s"

# Several stubs may share one log file; the pid tells racers apart
_FMT_FILE = "%(asctime)s %(process)d %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


class StderrHandler(logging.StreamHandler):
    """Console handler pinned to whatever ``sys.stderr`` is at emit time.

    A plain StreamHandler keeps the stream it was created with; if
    stderr is later swapped (test runners, CliRunner) records would
    go to a stale or closed stream.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger: stderr console plus optional file.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.  If it cannot be opened
            a warning goes to stderr and logging continues without it.
        log_file_level: Separate level for the file; defaults to ``level``.
    """
    numeric_level = _parse_level(level)
    fmt, datefmt = _CONSOLE_FORMATS.get(
        logging.DEBUG if numeric_level <= logging.DEBUG else numeric_level,
        (_FMT_MINIMAL, None),
    )

    console = StderrHandler(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(numeric_level)

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        try:
            fh = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            logging.getLogger(__name__).warning(
                "Not logging to %s: %s", log_file, exc.strerror or exc
            )
        else:
            fh.setLevel(file_level)
            fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
            root.addHandler(fh)
            root.setLevel(min(numeric_level, file_level))

    # Don't propagate exceptions from logging itself
    logging.raiseExceptions = False


def setup_logging_from_env(level: str | None = None) -> None:
    """``setup_logging`` with the LAUNCHER_LOG_* variables filled in.

    Args:
        level: Level forced by a CLI flag; overrides LAUNCHER_LOG_LEVEL.
    """
    setup_logging(
        level=level or os.environ.get(ENV_LEVEL, "WARNING"),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
