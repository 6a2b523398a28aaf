# topmark:header:start
#
#   project      : IncludeTidy
#   file         : __init__.py
#   file_relpath : src/includetidy/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the IncludeTidy CLI."""
