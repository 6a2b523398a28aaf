# topmark:header:start
#
#   project      : IncludeTidy
#   file         : line.py
#   file_relpath : src/includetidy/parser/line.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A single source line plus the location of its include directive, if any.

[`IncludeLine`][] owns its text. The delimiter offsets are only meaningful while
the line holds an *active* include (one that was neither commented out nor,
depending on the parse options, disabled by a preprocessor conditional).

The line type is always derived from the character at the opening delimiter, so
that it cannot drift from the text after a mutation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from includetidy.parser.options import LineType
from includetidy.parser.resolver import resolve_include

if TYPE_CHECKING:
    import os
    from collections.abc import Iterable

    from includetidy.core.diagnostics import DiagnosticSink


class IncludeLine:
    """A line of text plus information about the include directive in it.

    Args:
        raw_line (str): The line text, without line terminator.
        delimiter_start (int | None): Offset of the opening ``"`` or ``<``.
        delimiter_end (int | None): Offset of the closing ``"`` or ``>``.

    Raises:
        ValueError: If only one delimiter is given, or the offsets are not ordered.
    """

    __slots__ = ("_text", "_delimiter_start", "_delimiter_end")

    def __init__(
        self,
        raw_line: str = "",
        delimiter_start: int | None = None,
        delimiter_end: int | None = None,
    ) -> None:
        if (delimiter_start is None) != (delimiter_end is None):
            raise ValueError("Include delimiters must be both set or both absent")
        if delimiter_start is not None and delimiter_end is not None:
            if not 0 <= delimiter_start < delimiter_end < len(raw_line):
                raise ValueError(
                    f"Invalid include delimiters ({delimiter_start}, {delimiter_end}) "
                    f"for line {raw_line!r}"
                )
        self._text: str = raw_line
        self._delimiter_start: int | None = delimiter_start
        self._delimiter_end: int | None = delimiter_end

    def __repr__(self) -> str:
        return (
            f"IncludeLine({self._text!r}, "
            f"delimiter_start={self._delimiter_start}, delimiter_end={self._delimiter_end})"
        )

    @property
    def raw_line(self) -> str:
        """Current text of the line."""
        return self._text

    @property
    def delimiter_start(self) -> int | None:
        """Offset of the opening delimiter, or None without an active include."""
        return self._delimiter_start

    @property
    def delimiter_end(self) -> int | None:
        """Offset of the closing delimiter, or None without an active include."""
        return self._delimiter_end

    @property
    def contains_active_include(self) -> bool:
        """Whether the line holds an enabled include.

        A line with a well-formed ``#include`` is still inactive when it is commented
        out or (depending on the parse options) disabled by ``#if``.
        """
        return self._delimiter_start is not None

    @property
    def line_type(self) -> LineType:
        """Include style of this line, derived from the opening delimiter."""
        if self._delimiter_start is None:
            return LineType.NO_INCLUDE
        opening = self._text[self._delimiter_start]
        if opening == "<":
            return LineType.ANGLE_BRACKETS
        if opening == '"':
            return LineType.QUOTES
        return LineType.NO_INCLUDE

    def set_line_type(self, new_line_type: LineType) -> None:
        """Switch the include between quotes and angle brackets.

        Only the two delimiter characters are overwritten; offsets and the include
        content stay the same. `LineType.NO_INCLUDE` has no effect, and neither has
        any type on a line without an active include.

        Args:
            new_line_type (LineType): Target include style.
        """
        pair = new_line_type.delimiters
        if pair is None or new_line_type is self.line_type:
            return
        if self._delimiter_start is None or self._delimiter_end is None:
            return
        start, end = self._delimiter_start, self._delimiter_end
        text = self._text
        self._text = text[:start] + pair[0] + text[start + 1 : end] + pair[1] + text[end + 1 :]

    def include_content_with_delimiters(self) -> str:
        """Return the include content including its delimiters (e.g. ``<vector>``).

        Raises:
            ValueError: If the line holds no active include.
        """
        if self._delimiter_start is None or self._delimiter_end is None:
            raise ValueError("Line does not contain an active include")
        return self._text[self._delimiter_start : self._delimiter_end + 1]

    @property
    def include_content(self) -> str:
        """Text between the include delimiters; empty without an active include."""
        if self._delimiter_start is None or self._delimiter_end is None:
            return ""
        return self._text[self._delimiter_start + 1 : self._delimiter_end]

    @include_content.setter
    def include_content(self, value: str) -> None:
        if self._delimiter_start is None or self._delimiter_end is None:
            return
        start = self._delimiter_start
        self._text = self._text[: start + 1] + value + self._text[self._delimiter_end :]
        self._delimiter_end = start + len(value) + 1

    def try_resolve_include(
        self,
        include_directories: Iterable[str | os.PathLike[str]],
        sink: DiagnosticSink | None = None,
    ) -> str:
        """Try to resolve the include against a list of directories.

        Args:
            include_directories (Iterable[str | os.PathLike[str]]): Directories to
                search, in order; the first hit wins.
            sink (DiagnosticSink | None): Receives the warning for an unresolved
                include. Defaults to the package logger.

        Returns:
            str: Empty string if this is not an active include, the absolute path
            (exact on-disk casing) if a directory holds the file, or the raw include
            content otherwise.
        """
        if not self.contains_active_include:
            return ""
        return resolve_include(self.include_content, include_directories, sink=sink)
