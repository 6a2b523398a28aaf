# topmark:header:start
#
#   project      : IncludeTidy
#   file         : logging.py
#   file_relpath : src/includetidy/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for IncludeTidy.

Adds a TRACE level below DEBUG (the scanner reports per-call summaries on it),
a logger class exposing ``trace()``, and a colored formatter. Logging is for
diagnosing IncludeTidy itself; user-facing output goes through the CLI console.
The level comes from ``INCLUDETIDY_LOG_LEVEL`` and defaults to CRITICAL.
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

LOG_LEVEL_ENV_VAR: Final[str] = "INCLUDETIDY_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"


class IncludeTidyLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level."""

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
logging.setLoggerClass(IncludeTidyLogger)


# Checked top-down: the first threshold at or below the record level wins.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity (TRACE is blue)."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color of its level."""
        message: str = super().format(record)
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return color(message)
        return chalk.blue(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``INCLUDETIDY_LOG_LEVEL``, or None.

    Accepts a level name (``TRACE``, ``DEBUG``, ``INFO``, ``WARNING``, ``ERROR``,
    ``CRITICAL``, any case) or a number. Unknown names are ignored.
    """
    value: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    level: object = logging.getLevelName(value)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stdout handler on the root logger.

    Args:
        level (int | None): Level to apply. When None, `resolve_env_log_level` is
            consulted, falling back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> IncludeTidyLogger:
    """Return the `IncludeTidyLogger` registered under ``name``."""
    return cast("IncludeTidyLogger", logging.getLogger(name))
