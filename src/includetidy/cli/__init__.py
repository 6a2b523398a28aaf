# topmark:header:start
#
#   project      : IncludeTidy
#   file         : __init__.py
#   file_relpath : src/includetidy/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeTidy CLI package.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        includetidy = "includetidy.cli.main:cli"

All subcommands live in [`includetidy.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
