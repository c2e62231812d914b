# topmark:header:start
#
#   project      : Showcase
#   file         : logging.py
#   file_relpath : src/showcase/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Showcase logging with a TRACE level and colored output.

This module extends the standard logging module with a custom TRACE level,
a specialized logger class, and a click-styled formatter. The registry logs
record-level detail at TRACE so that content authors can follow a load step
by step without touching the code.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

import click

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

#: Environment variable used to force the log level (name or number).
LOG_LEVEL_ENV: Final[str] = "SHOWCASE_LOG_LEVEL"


class ShowcaseLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra information for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(ShowcaseLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class StyledFormatter(logging.Formatter):
    """Formatter that colors log records by severity using ``click.style``."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return click.style(message, fg="bright_red")
        if level >= logging.ERROR:
            return click.style(message, fg="red")
        if level >= logging.WARNING:
            return click.style(message, fg="yellow")
        if level >= logging.INFO:
            return click.style(message, fg="green")
        if level >= logging.DEBUG:
            return click.style(message, fg="bright_black")
        if level >= TRACE_LEVEL:
            return click.style(message, fg="blue")
        # Fallback for unknown or lower-than-TRACE levels
        return click.style(message, fg="red", dim=True)


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors SHOWCASE_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    Unknown names resolve to None.
    """
    val = os.environ.get(LOG_LEVEL_ENV)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a log level and colored output.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][showcase.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Iterate over a copy since we're modifying the list
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    formatter = StyledFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> ShowcaseLogger:
    """Retrieve a ShowcaseLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        ShowcaseLogger: A ShowcaseLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("ShowcaseLogger", logger)
