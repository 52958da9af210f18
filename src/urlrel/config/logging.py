# topmark:header:start
#
#   project      : UrlRel
#   file         : logging.py
#   file_relpath : src/urlrel/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics logging for UrlRel.

UrlRel logs through the standard `logging` module, extended with:

- a ``TRACE`` level below ``DEBUG`` and a `UrlrelLogger` class offering ``.trace()``;
- a `ChalkFormatter` that colors records by severity with `yachalk`;
- `setup_logging`, which installs one handler on the root logger.

Diagnostics are written to **stderr** by default. Results of the CLI go to
stdout through the console, so ``URLREL_LOG_LEVEL=DEBUG`` never mixes log
records into JSON or NDJSON output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "URLREL_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
)


class UrlrelLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(UrlrelLogger)

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

# Most severe first; the first threshold reached wins
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by level (dim red below TRACE)."""
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def parse_log_level(value: str) -> int | None:
    """Return the logging level named by ``value`` (e.g. "TRACE", "debug", "10").

    Returns:
        int | None: The numeric level, or None if ``value`` names no level.
    """
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level set with ``URLREL_LOG_LEVEL``, or None if unset or invalid."""
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if val:
        return parse_log_level(val)
    return None


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Route all UrlRel diagnostics to a single colored handler.

    Args:
        level (int | None): Root log level. If None, ``URLREL_LOG_LEVEL`` is
            consulted, then CRITICAL is used.
        stream (TextIO | None): Where records are written; `sys.stderr` if None.
            Never pass the stream that carries program output.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    handler = logging.StreamHandler(stream or sys.stderr)
    # Source locations only help below INFO
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for old in root_logger.handlers[:]:
        root_logger.removeHandler(old)
    root_logger.addHandler(handler)


def get_logger(name: str) -> UrlrelLogger:
    """Return the `UrlrelLogger` named ``name``."""
    return cast("UrlrelLogger", logging.getLogger(name))
