# topmark:header:start
#
#   project      : IncludeTidy
#   file         : formatter.py
#   file_relpath : src/includetidy/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rewrite include delimiters and reassemble scanned lines into text."""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Final

from includetidy.config.logging import get_logger
from includetidy.parser.options import LineType, ParseOptions
from includetidy.parser.scanner import parse_includes

if TYPE_CHECKING:
    from collections.abc import Iterable

    from includetidy.config.logging import IncludeTidyLogger
    from includetidy.parser.line import IncludeLine

logger: IncludeTidyLogger = get_logger(__name__)

_LINE_TERMINATOR_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


class IncludeStyle(str, Enum):
    """Delimiter style requested for include directives.

    ``KEEP`` leaves every include as written.
    """

    QUOTES = "quotes"
    ANGLE_BRACKETS = "angle-brackets"
    KEEP = "keep"

    @property
    def line_type(self) -> LineType | None:
        """Return the matching `LineType`, or None for `KEEP`."""
        if self is IncludeStyle.QUOTES:
            return LineType.QUOTES
        if self is IncludeStyle.ANGLE_BRACKETS:
            return LineType.ANGLE_BRACKETS
        return None

    @classmethod
    def from_name(cls, name: str | None) -> IncludeStyle | None:
        """Look up a style by value (case-insensitive); None if unknown."""
        if name is None:
            return None
        key: str = name.strip().lower().replace("_", "-")
        for member in cls:
            if member.value == key:
                return member
        return None


def join_lines(
    lines: Iterable[IncludeLine],
    newline: str = "\n",
    *,
    final_newline: bool = False,
) -> str:
    """Concatenate the text of ``lines`` with ``newline`` between them.

    Args:
        lines (Iterable[IncludeLine]): Records to join, in order.
        newline (str): Line separator.
        final_newline (bool): Whether to terminate the last line as well.

    Returns:
        str: The reassembled text.
    """
    raw: list[str] = [line.raw_line for line in lines]
    text: str = newline.join(raw)
    if final_newline and raw:
        text += newline
    return text


def set_include_style(lines: Iterable[IncludeLine], style: IncludeStyle | LineType) -> int:
    """Apply ``style`` to every active include in ``lines``.

    Returns:
        int: The number of lines whose text changed.
    """
    target: LineType | None = style.line_type if isinstance(style, IncludeStyle) else style
    if target is None or target is LineType.NO_INCLUDE:
        return 0
    changed: int = 0
    for line in lines:
        before: str = line.raw_line
        line.set_line_type(target)
        if line.raw_line != before:
            changed += 1
    return changed


def restyle_includes(
    text: str,
    style: IncludeStyle | LineType,
    *,
    options: ParseOptions = ParseOptions.NONE,
) -> str:
    """Return ``text`` with all active includes switched to ``style``.

    Every line keeps its own terminator, so only the delimiter characters of
    active includes change. Of ``options`` only
    ``IGNORE_INCLUDES_IN_PREPROCESSOR_CONDITIONALS`` applies; flags that drop
    lines are ignored.
    """
    lines: list[IncludeLine] = parse_includes(
        text, options & ParseOptions.IGNORE_INCLUDES_IN_PREPROCESSOR_CONDITIONALS
    )
    changed: int = set_include_style(lines, style)
    logger.debug("Restyled %d include(s) to %s", changed, style.value)

    terminators: list[str] = _LINE_TERMINATOR_RE.findall(text)
    # The last line has no terminator unless the text ends with a line break.
    terminators.extend([""] * (len(lines) - len(terminators)))
    return "".join(line.raw_line + end for line, end in zip(lines, terminators))
