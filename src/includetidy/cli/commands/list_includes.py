# topmark:header:start
#
#   project      : IncludeTidy
#   file         : list_includes.py
#   file_relpath : src/includetidy/cli/commands/list_includes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeTidy ``list`` command.

Prints the active ``#include`` directives of each file. Includes that are
commented out (and, with ``--ignore-conditionals``, those inside ``#if`` blocks)
are skipped.

Examples:
  List includes:

    $ includetidy list src/main.cpp

  Resolve them against include directories:

    $ includetidy list --resolve -I include -I third_party src/*.cpp
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from includetidy.cli.cmd_common import (
    ConsoleDiagnosticSink,
    build_config,
    get_console,
    read_text_or_fail,
)
from includetidy.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_files_argument,
    common_scan_options,
)
from includetidy.config.logging import get_logger
from includetidy.core.diagnostics import compute_diagnostic_stats
from includetidy.parser.options import ParseOptions
from includetidy.parser.scanner import parse_includes

if TYPE_CHECKING:
    from pathlib import Path

    from includetidy.config.logging import IncludeTidyLogger
    from includetidy.config.model import Config
    from includetidy.core.diagnostics import DiagnosticStats
    from includetidy.parser.line import IncludeLine

logger: IncludeTidyLogger = get_logger(__name__)


@click.command(
    name="list",
    help="List the active #include directives of C/C++ files.",
    context_settings=CONTEXT_SETTINGS,
)
@common_files_argument
@common_config_options
@common_scan_options
@click.option(
    "--resolve",
    "resolve",
    is_flag=True,
    help="Also print the file each include resolves to.",
)
@click.pass_context
def list_command(
    ctx: click.Context,
    *,
    files: tuple[Path, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
    include_dirs: tuple[Path, ...],
    ignore_conditionals: bool | None,
    resolve: bool,
) -> None:
    """List the active includes of FILES."""
    console = get_console(ctx)
    config: Config = build_config(
        config_files=config_files,
        no_config=no_config,
        include_dirs=include_dirs,
        ignore_conditionals=ignore_conditionals,
    )
    options: ParseOptions = config.parse_options | ParseOptions.KEEP_ONLY_VALID_INCLUDES
    sink = ConsoleDiagnosticSink(console)

    n_includes: int = 0
    for path in files:
        lines: list[IncludeLine] = parse_includes(read_text_or_fail(path), options)
        logger.info("%s: %d active include(s)", path, len(lines))
        for line in lines:
            n_includes += 1
            entry: str = f"{path}: {line.include_content_with_delimiters()}"
            if resolve:
                target: str = line.try_resolve_include(config.include_directories, sink=sink)
                entry += f" -> {target}"
            console.print(entry)

    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        summary: str = f"{n_includes} include(s) in {len(files)} file(s)"
        if resolve:
            stats: DiagnosticStats = compute_diagnostic_stats(sink.items)
            summary += f", {stats.n_warning} unresolved"
        console.print(console.styled(summary, dim=True))
