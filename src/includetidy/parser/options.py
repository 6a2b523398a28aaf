# topmark:header:start
#
#   project      : IncludeTidy
#   file         : options.py
#   file_relpath : src/includetidy/parser/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse options and line types for the include scanner."""

from __future__ import annotations

from enum import Enum, IntFlag


class ParseOptions(IntFlag):
    """Flags controlling which lines `parse_includes` keeps and which includes count as active.

    Attributes:
        NONE: Keep every line; only comments disable an include.
        REMOVE_EMPTY_LINES: Drop empty or whitespace-only lines.
        IGNORE_INCLUDES_IN_PREPROCESSOR_CONDITIONALS: Treat includes within
            ``#if ... #endif`` blocks as inactive.
        KEEP_ONLY_VALID_INCLUDES: Keep only lines holding an active include.
            Implies ``REMOVE_EMPTY_LINES``.
    """

    NONE = 0
    REMOVE_EMPTY_LINES = 1
    IGNORE_INCLUDES_IN_PREPROCESSOR_CONDITIONALS = 2
    KEEP_ONLY_VALID_INCLUDES = 4 | REMOVE_EMPTY_LINES


class LineType(Enum):
    """Kind of include directive held by a line."""

    QUOTES = "quotes"
    ANGLE_BRACKETS = "angle-brackets"
    NO_INCLUDE = "no-include"

    @property
    def delimiters(self) -> tuple[str, str] | None:
        """Return the (open, close) delimiter pair, or None for `NO_INCLUDE`."""
        return _DELIMITERS.get(self)


_DELIMITERS: dict[LineType, tuple[str, str]] = {
    LineType.QUOTES: ('"', '"'),
    LineType.ANGLE_BRACKETS: ("<", ">"),
}
