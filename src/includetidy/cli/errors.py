# topmark:header:start
#
#   project      : IncludeTidy
#   file         : errors.py
#   file_relpath : src/includetidy/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the IncludeTidy CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from includetidy.core.exit_codes import ExitCode


class IncludeTidyError(click.ClickException):
    """Base class for all IncludeTidy CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class IncludeTidyUsageError(IncludeTidyError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class IncludeTidyConfigError(IncludeTidyError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class IncludeTidyFileNotFoundError(IncludeTidyError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class IncludeTidyPermissionDeniedError(IncludeTidyError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class IncludeTidyIOError(IncludeTidyError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class IncludeTidyEncodingError(IncludeTidyError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
