# topmark:header:start
#
#   project      : IncludeTidy
#   file         : diagnostics.py
#   file_relpath : src/includetidy/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support.

The parser never prints. Operations that need to report a non-fatal condition
(such as an include that cannot be resolved) hand a [`Diagnostic`][] to a
caller-supplied [`DiagnosticSink`][]. When no sink is supplied,
[`log_diagnostic`][] forwards the message to the package logger.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from includetidy.config.logging import get_logger

logger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered by importance: ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def log_level(self) -> int:
        """Return the matching standard `logging` level."""
        return {
            DiagnosticLevel.INFO: logging.INFO,
            DiagnosticLevel.WARNING: logging.WARNING,
            DiagnosticLevel.ERROR: logging.ERROR,
        }[self]


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str


DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: emit the diagnostic on the package logger."""
    logger.log(diagnostic.level.log_level, "%s", diagnostic.message)


@dataclass
class DiagnosticLog:
    """Collecting sink that keeps diagnostics in emission order.

    Instances are callable and can be passed wherever a `DiagnosticSink` is expected.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def __len__(self) -> int:
        return len(self.items)

    def messages(self) -> list[str]:
        """Return the collected messages."""
        return [d.message for d in self.items]


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    n_info: int = sum(1 for d in diags if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in diags if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
