# topmark:header:start
#
#   project      : IncludeTidy
#   file         : main.py
#   file_relpath : src/includetidy/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the IncludeTidy CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import click

from includetidy.cli.commands.list_includes import list_command
from includetidy.cli.commands.restyle import restyle_command
from includetidy.cli.commands.version import version_command
from includetidy.cli.console import ClickConsole
from includetidy.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from includetidy.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only.
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color = not no_color
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="IncludeTidy CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the IncludeTidy CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'includetidy list FILES...' to show active includes.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(list_command)

cli.add_command(restyle_command)

if __name__ == "__main__":
    cli()
