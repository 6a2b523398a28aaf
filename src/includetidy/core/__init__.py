# topmark:header:start
#
#   project      : IncludeTidy
#   file         : __init__.py
#   file_relpath : src/includetidy/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across IncludeTidy.

- ``diagnostics``: diagnostic levels, messages, sinks and aggregation.
- ``exit_codes``: CLI exit codes aligned with BSD ``sysexits`` where practical.
"""

from __future__ import annotations
