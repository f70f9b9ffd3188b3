# topmark:header:start
#
#   project      : Buckify
#   file         : logging.py
#   file_relpath : src/buckify/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for Buckify.

Buckify logs through the standard `logging` module, extended with:

- a ``TRACE`` level below ``DEBUG`` for per-rule and per-token detail,
- `BuckifyLogger`, whose ``trace()`` method emits at that level, and
- `ChalkFormatter`, which colors records by severity with `yachalk`.

Logging is silent (``CRITICAL``) unless ``BUCKIFY_LOG_LEVEL`` names a level.
Records always go to stderr so that generated build files and command
output on stdout stay clean.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

ENV_LOG_LEVEL: Final[str] = "BUCKIFY_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class BuckifyLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message format.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(BuckifyLogger)


# Highest threshold first; the first one at or below the record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level.

    Args:
        fmt (str): The `logging.Formatter` format string.
        color (bool): When False, records are left uncolored.
    """

    def __init__(self, fmt: str, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color: bool = color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by level."""
        message: str = super().format(record)
        if not self.color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``BUCKIFY_LOG_LEVEL``, or None.

    Accepts level names in any case (``trace``, ``DEBUG``, ``warn``) and
    plain numbers. Unknown names and an empty value yield None.
    """
    raw: str = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return logging.getLevelNamesMapping().get(raw)


def setup_logging(level: int | None = None, *, color: bool = True) -> None:
    """Send Buckify log records to stderr.

    Replaces any handlers on the root logger with a single stderr handler.
    Levels below INFO use a format that also shows the logger name and line.

    Args:
        level (int | None): Threshold; None consults ``BUCKIFY_LOG_LEVEL`` and
            falls back to CRITICAL.
        color (bool): Whether records are colored.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT, color=color)
    )
    root.addHandler(stream_handler)


def get_logger(name: str) -> BuckifyLogger:
    """Return the `BuckifyLogger` called ``name`` (usually ``__name__``)."""
    return cast("BuckifyLogger", logging.getLogger(name))
