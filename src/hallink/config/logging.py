# topmark:header:start
#
#   project      : HalLink
#   file         : logging.py
#   file_relpath : src/hallink/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 HalLink contributors
#
# topmark:header:end

"""HalLink logging with a TRACE level.

This module extends the standard logging module with a custom TRACE level, a
logger class exposing ``trace()``, and a colored formatter. The library itself
only obtains loggers via [`get_logger`][hallink.config.logging.get_logger];
configuring handlers is left to the application (or to
[`setup_logging`][hallink.config.logging.setup_logging]).
"""

from __future__ import annotations

import functools
import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from hallink.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class HallinkLogger(logging.Logger):
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
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


# Level names are a registry, not configuration: handlers and logger classes stay untouched.
if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")


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


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records with chalk based on severity level."""

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
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def parse_log_level(value: str | None) -> int | None:
    """Return the numeric logging level for a level name or number.

    Args:
        value (str | None): A level name (case-insensitive, e.g. ``"trace"``) or a
            non-negative integer rendered as text (e.g. ``"10"``).

    Returns:
        int | None: The numeric level, or None if ``value`` is empty or unknown.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors ``HALLINK_LOG_LEVEL`` (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][hallink.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.

    Args:
        level (int | None): The log level to apply to the root logger.
    """
    if level is None:
        level = resolve_env_log_level()
        if level is None:
            level = logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Iterate over a copy since we're modifying the list
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> HallinkLogger:
    """Retrieve a HallinkLogger instance with the specified name.

    The global logger class is left alone. A logger the application already
    created under ``name`` (e.g. through ``logging.config.dictConfig``) keeps its
    level, handlers and filters; only its class is extended with ``trace()``.

    Args:
        name (str): The name of the logger.

    Returns:
        HallinkLogger: A HallinkLogger instance.
    """
    logger = logging.getLogger(name)
    if not isinstance(logger, HallinkLogger):
        logger.__class__ = _with_trace(type(logger))
    return cast("HallinkLogger", logger)


@functools.cache
def _with_trace(base: type[logging.Logger]) -> type[HallinkLogger]:
    if base is logging.Logger:
        return HallinkLogger
    return cast("type[HallinkLogger]", type(f"Hallink{base.__name__}", (HallinkLogger, base), {}))
