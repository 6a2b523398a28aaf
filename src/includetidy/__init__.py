# topmark:header:start
#
#   project      : IncludeTidy
#   file         : __init__.py
#   file_relpath : src/includetidy/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeTidy package.

IncludeTidy finds the ``#include`` directives of C/C++ sources, skipping the ones
that are commented out or disabled by preprocessor conditionals. It can switch
includes between quoted and angle-bracket form and resolve them against a list
of include directories. It exposes both a CLI and a small typed API
(see [`includetidy.parser`][]).
"""

from __future__ import annotations
