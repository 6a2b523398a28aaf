# topmark:header:start
#
#   project      : IncludeTidy
#   file         : scanner.py
#   file_relpath : src/includetidy/parser/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line scanner that locates active ``#include`` directives.

The scan is a single pass over the lines of a text. Two counters are carried
from line to line: the number of open ``/* ... */`` comments and the depth of
open ``#if`` blocks. Both belong to one call of [`parse_includes`][]; nothing is
shared between calls.

Parsing is deliberately simplistic:

* Only the first ``//``, ``/*`` and ``*/`` of a line are considered.
* String literals are not lexed, so comment markers inside them count.
* Any ``#if...`` token (including ``#ifdef``/``#ifndef``) opens a conditional and
  ``#endif`` closes one; ``#else``/``#elif`` are not modeled.
* An unmatched ``#endif`` drives the depth below zero; any depth ``<= 0`` counts as
  "not inside a conditional".

Malformed directives (missing closing delimiter) never raise; the line is
simply treated as holding no active include.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from includetidy.config.logging import get_logger
from includetidy.parser.line import IncludeLine
from includetidy.parser.options import ParseOptions

if TYPE_CHECKING:
    from includetidy.config.logging import IncludeTidyLogger

logger: IncludeTidyLogger = get_logger(__name__)

INCLUDE_TOKEN: Final[str] = "#include"
IF_TOKEN: Final[str] = "#if"
ENDIF_TOKEN: Final[str] = "#endif"
LINE_COMMENT: Final[str] = "//"
BLOCK_COMMENT_OPEN: Final[str] = "/*"
BLOCK_COMMENT_CLOSE: Final[str] = "*/"

_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")

# Stands in for "not on this line" so that span comparisons need no special cases.
_NOT_FOUND: Final[int] = 2**63 - 1


@dataclass(frozen=True)
class CommentSpan:
    """Commented region of one line, plus the block-comment state carried into it.

    Attributes:
        start (int): Offset of the first comment opener on the line, or a sentinel.
        end (int): Offset of the block-comment closer on the line, or a sentinel.
        inside_block (bool): Whether a block comment is still open, counting
            the openers and closers seen on this line.
    """

    start: int
    end: int
    inside_block: bool

    def is_commented(self, pos: int) -> bool:
        """Return True if the character at ``pos`` lies within a comment."""
        if self.start == _NOT_FOUND and self.inside_block:
            # No comment starts here but a block comment carries over.
            return True
        return self.start < pos < self.end


def split_source_lines(text: str) -> list[str]:
    """Split ``text`` on LF, CRLF and CR; a final line break adds no empty line."""
    lines: list[str] = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def _find(text: str, token: str, start: int = 0) -> int:
    pos: int = text.find(token, start)
    return _NOT_FOUND if pos == -1 else pos


def _find_delimiters(line: str, include_pos: int) -> tuple[int, int] | None:
    """Return the delimiter offsets of the include token at ``include_pos``.

    A ``"`` anywhere after the token takes precedence over ``<``.
    """
    after_token: int = include_pos + len(INCLUDE_TOKEN)
    opening: int = line.find('"', after_token)
    if opening != -1:
        closing: int = line.find('"', opening + 1)
    else:
        opening = line.find("<", after_token)
        if opening == -1:
            return None
        closing = line.find(">", opening + 1)
    if closing == -1:
        return None
    return opening, closing


def parse_includes(
    text: str,
    options: ParseOptions = ParseOptions.NONE,
) -> list[IncludeLine]:
    """Parse ``text`` into `IncludeLine` records.

    Args:
        text (str): Source text; LF, CRLF and CR line endings are accepted.
        options (ParseOptions): Flags selecting which lines are kept and whether
            conditionals disable includes.

    Returns:
        list[IncludeLine]: One record per kept line, in source order.
    """
    remove_empty: bool = bool(options & ParseOptions.REMOVE_EMPTY_LINES)
    track_conditionals: bool = bool(
        options & ParseOptions.IGNORE_INCLUDES_IN_PREPROCESSOR_CONDITIONALS
    )
    keep_only_valid: bool = (
        options & ParseOptions.KEEP_ONLY_VALID_INCLUDES
    ) == ParseOptions.KEEP_ONLY_VALID_INCLUDES

    out: list[IncludeLine] = []
    open_comments: int = 0
    open_conditionals: int = 0
    n_lines: int = 0

    for line in split_source_lines(text):
        n_lines += 1
        if remove_empty and not line.strip():
            continue

        span_start: int = _find(line, LINE_COMMENT)
        span_end: int = _NOT_FOUND

        block_open: int = _find(line, BLOCK_COMMENT_OPEN)
        if block_open < span_start:
            # A "/*" after "//" is part of the line comment and opens nothing.
            open_comments += 1
            span_start = block_open

        block_close: int = _find(line, BLOCK_COMMENT_CLOSE)
        if block_close != _NOT_FOUND:
            open_comments -= 1
            span_end = block_close

        span = CommentSpan(start=span_start, end=span_end, inside_block=open_comments > 0)

        if track_conditionals:
            # One directive per line: only the first of each token matters.
            if_pos: int = _find(line, IF_TOKEN)
            endif_pos: int = _find(line, ENDIF_TOKEN)
            if if_pos != _NOT_FOUND and not span.is_commented(if_pos):
                open_conditionals += 1
            elif endif_pos != _NOT_FOUND and not span.is_commented(endif_pos):
                open_conditionals -= 1

        include_pos: int = _find(line, INCLUDE_TOKEN)
        delimiters: tuple[int, int] | None = None
        if (
            include_pos != _NOT_FOUND
            and not span.is_commented(include_pos)
            and open_conditionals <= 0
        ):
            delimiters = _find_delimiters(line, include_pos)

        if delimiters is not None:
            out.append(IncludeLine(line, delimiters[0], delimiters[1]))
        elif not keep_only_valid:
            out.append(IncludeLine(line))

    logger.trace(
        "Scanned %d line(s) into %d record(s) (options=%r, open comments=%d, open conditionals=%d)",
        n_lines,
        len(out),
        options,
        open_comments,
        open_conditionals,
    )
    return out
