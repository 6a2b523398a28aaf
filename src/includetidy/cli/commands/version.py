# topmark:header:start
#
#   project      : IncludeTidy
#   file         : version.py
#   file_relpath : src/includetidy/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeTidy `version` command.

Prints the IncludeTidy version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from includetidy.cli.cmd_common import get_console
from includetidy.constants import INCLUDETIDY_VERSION


@click.command(
    name="version",
    help="Show the current version of IncludeTidy.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of IncludeTidy."""
    get_console(ctx).print(INCLUDETIDY_VERSION)
