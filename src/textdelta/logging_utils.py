#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/logging_utils.py
"""Logging setup for the textdelta command line.

Every module logs through ``logging.getLogger(__name__)``, so all records
come from loggers under ``textdelta``. The library never installs handlers
itself; :func:`configure_logging` is called once by :func:`textdelta.cli.main`
and attaches handlers to the ``textdelta`` package logger only, leaving the
root logger of an embedding application alone.

The effective level is decided in one place, :func:`resolve_log_level`:

1. ``--trace`` forces ``DEBUG``
2. ``--log-level``
3. the ``TEXTDELTA_LOG_LEVEL`` environment variable
4. ``WARNING``
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional

from textdelta.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_LOG_LEVEL,
    LOG_FORMAT,
    PACKAGE_LOGGER,
    TRACE_DATE_FORMAT,
    TRACE_LOG_FORMAT,
)


def _level_from_name(name: str) -> Optional[int]:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def resolve_log_level(
    log_level: int | str | None = None,
    trace_mode: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Return the numeric level the CLI should log at.

    Parameters
    ----------
    log_level : int | str, optional
        Level from ``--log-level``; a numeric level or a name such as "DEBUG"
    trace_mode : bool, default False
        ``--trace`` was given; always resolves to ``DEBUG``
    environ : Mapping[str, str], optional
        Environment to read ``TEXTDELTA_LOG_LEVEL`` from; ``os.environ`` when omitted

    Returns
    -------
    int
        Resolved level. Unknown names fall back to ``WARNING``.

    """
    if trace_mode:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level
    if log_level:
        return _level_from_name(log_level) or logging.WARNING
    env = os.environ if environ is None else environ
    name = env.get(ENV_LOG_LEVEL, "").strip() or DEFAULT_LOG_LEVEL
    return _level_from_name(name) or logging.WARNING


def configure_logging(
    log_level: int | str | None = None,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the ``textdelta`` logger.

    Calling it again replaces the handlers from the previous call.

    Parameters
    ----------
    log_level : int | str, optional
        Level from ``--log-level``; see :func:`resolve_log_level`
    log_file : str, optional
        Also append records to this file. An unusable path is reported
        as a warning and only the console handler is kept.
    trace_mode : bool, default False
        Debug level with timestamps and logger names

    Returns
    -------
    logging.Logger
        The configured ``textdelta`` package logger

    """
    level = resolve_log_level(log_level, trace_mode)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    # records would otherwise be printed again by root handlers
    package_logger.propagate = False

    if trace_mode:
        formatter = logging.Formatter(TRACE_LOG_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

    package_logger.debug("Logging at %s%s", logging.getLevelName(level), f" to {log_file}" if log_file else "")
    return package_logger
