# topmark:header:start
#
#   project      : IncludeTidy
#   file         : __init__.py
#   file_relpath : src/includetidy/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for IncludeTidy.

- ``logging``: TRACE-aware logger class and colored log formatting.
- ``io``: TOML loading (via ``tomlkit``) and typed value getters.
- ``model``: layered `MutableConfig` builder and frozen `Config` snapshot.

Submodules are imported explicitly; this package does not re-export them so that
``includetidy.config.logging`` stays importable from anywhere without cycles.
"""

from __future__ import annotations
