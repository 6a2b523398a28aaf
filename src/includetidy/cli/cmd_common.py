# topmark:header:start
#
#   project      : IncludeTidy
#   file         : cmd_common.py
#   file_relpath : src/includetidy/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the IncludeTidy subcommands.

They build the effective configuration, map file I/O failures to CLI errors,
and route parser diagnostics to the console.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from includetidy.cli.errors import (
    IncludeTidyConfigError,
    IncludeTidyEncodingError,
    IncludeTidyFileNotFoundError,
    IncludeTidyIOError,
    IncludeTidyPermissionDeniedError,
)
from includetidy.config.io import ConfigError
from includetidy.config.logging import get_logger
from includetidy.config.model import MutableConfig
from includetidy.core.diagnostics import Diagnostic, DiagnosticLevel, DiagnosticLog
from includetidy.utils.file import read_source_file, write_source_file

if TYPE_CHECKING:
    from collections.abc import Sequence

    from includetidy.cli.console import ConsoleLike
    from includetidy.config.logging import IncludeTidyLogger
    from includetidy.config.model import Config

logger: IncludeTidyLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def build_config(
    *,
    config_files: Sequence[Path],
    no_config: bool,
    include_dirs: Sequence[Path] = (),
    ignore_conditionals: bool | None = None,
) -> Config:
    """Merge config files and CLI overrides into a frozen `Config`.

    Raises:
        IncludeTidyConfigError: If a config file is missing or invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=config_files,
            use_local_config=not no_config,
        )
    except ConfigError as exc:
        raise IncludeTidyConfigError(str(exc)) from exc

    overrides = MutableConfig(
        include_directories=[d.resolve() for d in include_dirs],
        ignore_preprocessor_conditionals=ignore_conditionals,
    )
    config: Config = draft.merge_with(overrides).freeze()
    logger.debug("Effective config: %s", config)
    return config


def read_text_or_fail(path: Path) -> str:
    """Read a source file, mapping failures to CLI errors."""
    try:
        return read_source_file(path)
    except FileNotFoundError as exc:
        raise IncludeTidyFileNotFoundError(f"File not found: {path}") from exc
    except PermissionError as exc:
        raise IncludeTidyPermissionDeniedError(f"Permission denied: {path}") from exc
    except UnicodeDecodeError as exc:
        raise IncludeTidyEncodingError(f"Cannot decode {path} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise IncludeTidyIOError(f"Cannot read {path}: {exc}") from exc


def write_text_or_fail(path: Path, text: str) -> None:
    """Write a source file, mapping failures to CLI errors."""
    try:
        write_source_file(path, text)
    except PermissionError as exc:
        raise IncludeTidyPermissionDeniedError(f"Permission denied: {path}") from exc
    except OSError as exc:
        raise IncludeTidyIOError(f"Cannot write {path}: {exc}") from exc


class ConsoleDiagnosticSink(DiagnosticLog):
    """Diagnostic sink that collects diagnostics and echoes them to the console."""

    def __init__(self, console: ConsoleLike, *, show_info: bool = False) -> None:
        super().__init__()
        self.console = console
        self.show_info = show_info

    def __call__(self, diagnostic: Diagnostic) -> None:
        super().__call__(diagnostic)
        if diagnostic.level is DiagnosticLevel.INFO and not self.show_info:
            return
        self.console.warn(f"[{diagnostic.level.value}] {diagnostic.message}")
