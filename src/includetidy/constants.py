# topmark:header:start
#
#   project      : IncludeTidy
#   file         : constants.py
#   file_relpath : src/includetidy/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IncludeTidy Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    INCLUDETIDY_VERSION: str = get_version("includetidy")
except PackageNotFoundError:  # running from a source tree without installation
    INCLUDETIDY_VERSION = "0.0.0"
