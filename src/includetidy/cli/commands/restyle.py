# topmark:header:start
#
#   project      : IncludeTidy
#   file         : restyle.py
#   file_relpath : src/includetidy/cli/commands/restyle.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeTidy ``restyle`` command.

Switches the delimiters of all active ``#include`` directives to quotes or angle
brackets. Performs a dry run by default (exit code ``WOULD_CHANGE`` when a file
would be rewritten) and writes in place with ``--apply``.

Examples:
  Preview changes:

    $ includetidy restyle --style angle-brackets src/main.cpp

  Apply changes and show what changed:

    $ includetidy restyle --style quotes --apply --diff src/*.cpp
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from includetidy.cli.cmd_common import (
    build_config,
    get_console,
    read_text_or_fail,
    write_text_or_fail,
)
from includetidy.cli.errors import IncludeTidyUsageError
from includetidy.cli.options import (
    CONTEXT_SETTINGS,
    EnumChoiceParam,
    common_config_options,
    common_files_argument,
    common_scan_options,
)
from includetidy.config.logging import get_logger
from includetidy.core.exit_codes import ExitCode
from includetidy.formatter import IncludeStyle, restyle_includes
from includetidy.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from pathlib import Path

    from includetidy.config.logging import IncludeTidyLogger
    from includetidy.config.model import Config

logger: IncludeTidyLogger = get_logger(__name__)


@click.command(
    name="restyle",
    help="Rewrite #include delimiters to quotes or angle brackets.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Rewrites include delimiters in files (in-place with --apply).

Examples:

  # Preview which files would change (dry-run)
  includetidy restyle --style angle-brackets src/main.cpp

  # Apply: rewrite in place
  includetidy restyle --style quotes --apply src/main.cpp
""",
)
@common_files_argument
@common_config_options
@common_scan_options
@click.option(
    "--style",
    "style",
    type=EnumChoiceParam(
        IncludeStyle, choices=(IncludeStyle.QUOTES, IncludeStyle.ANGLE_BRACKETS)
    ),
    default=None,
    help="Target delimiter style (defaults to 'include_style' from the config).",
)
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write changes to files (off by default)."
)
@click.option("--diff", "show_diff", is_flag=True, help="Show unified diffs.")
@click.pass_context
def restyle_command(
    ctx: click.Context,
    *,
    files: tuple[Path, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
    include_dirs: tuple[Path, ...],
    ignore_conditionals: bool | None,
    style: IncludeStyle | None,
    apply_changes: bool,
    show_diff: bool,
) -> None:
    """Rewrite the include delimiters of FILES."""
    console = get_console(ctx)
    config: Config = build_config(
        config_files=config_files,
        no_config=no_config,
        include_dirs=include_dirs,
        ignore_conditionals=ignore_conditionals,
    )
    target: IncludeStyle = style or config.include_style
    if target is IncludeStyle.KEEP:
        raise IncludeTidyUsageError(
            "No include style given; pass --style or set 'include_style' in the config."
        )

    n_changed: int = 0
    for path in files:
        original: str = read_text_or_fail(path)
        updated: str = restyle_includes(original, target, options=config.parse_options)
        if updated == original:
            logger.info("%s: unchanged", path)
            continue

        n_changed += 1
        if show_diff:
            console.print(render_patch(unified_diff(original, updated, str(path))), nl=False)
        if apply_changes:
            write_text_or_fail(path, updated)
            console.print(f"restyled {path}")
        else:
            console.print(f"would restyle {path}")

    if n_changed and not apply_changes:
        ctx.exit(ExitCode.WOULD_CHANGE)
