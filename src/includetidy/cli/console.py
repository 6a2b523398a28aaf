# topmark:header:start
#
#   project      : IncludeTidy
#   file         : console.py
#   file_relpath : src/includetidy/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Use a console for messages intended for end users, and reserve `logging` for
internal diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output. Defaults to the stream
            Click resolves at write time.
        err (TextIO | None): Stream for error output. Defaults to the stream
            Click resolves at write time.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="yellow"
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style (plain text if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
