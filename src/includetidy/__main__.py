# topmark:header:start
#
#   project      : IncludeTidy
#   file         : __main__.py
#   file_relpath : src/includetidy/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running IncludeTidy via ``python -m includetidy``.

Examples:
    List the active includes of a file::

        python -m includetidy list src/main.cpp
"""

from __future__ import annotations

from includetidy.cli.main import cli

if __name__ == "__main__":
    cli()
