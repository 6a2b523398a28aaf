# topmark:header:start
#
#   project      : IncludeTidy
#   file         : test_line.py
#   file_relpath : tests/parser/test_line.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `IncludeLine` model: style rewrites and content replacement."""

from __future__ import annotations

import pytest

from includetidy.parser.line import IncludeLine
from includetidy.parser.options import LineType
from includetidy.parser.scanner import parse_includes
from tests.conftest import mark_parser, parametrize


def _single(text: str) -> IncludeLine:
    lines = parse_includes(text)
    assert len(lines) == 1
    return lines[0]


@mark_parser
def test_set_line_type_swaps_delimiters_in_place() -> None:
    line = _single('  #include "foo.h" // keep')
    start, end = line.delimiter_start, line.delimiter_end

    line.set_line_type(LineType.ANGLE_BRACKETS)
    assert line.raw_line == "  #include <foo.h> // keep"
    assert line.line_type is LineType.ANGLE_BRACKETS
    assert (line.delimiter_start, line.delimiter_end) == (start, end)

    line.set_line_type(LineType.QUOTES)
    assert line.raw_line == '  #include "foo.h" // keep'


@mark_parser
def test_set_line_type_no_include_is_noop() -> None:
    line = _single("#include <foo.h>")
    line.set_line_type(LineType.NO_INCLUDE)
    assert line.raw_line == "#include <foo.h>"
    assert line.line_type is LineType.ANGLE_BRACKETS


@mark_parser
def test_set_line_type_on_inactive_line_is_noop() -> None:
    line = _single('// #include "foo.h"')
    line.set_line_type(LineType.ANGLE_BRACKETS)
    assert line.raw_line == '// #include "foo.h"'
    assert line.line_type is LineType.NO_INCLUDE


@mark_parser
def test_include_content_with_delimiters() -> None:
    line = _single("#include <sys/types.h>  ")
    assert line.include_content_with_delimiters() == "<sys/types.h>"


@mark_parser
def test_include_content_with_delimiters_requires_active_include() -> None:
    with pytest.raises(ValueError):
        IncludeLine("int x;").include_content_with_delimiters()


@mark_parser
def test_include_content_setter_recomputes_end() -> None:
    line = _single("#include <foo.h> // c")
    line.include_content = "bar/baz.hpp"
    assert line.raw_line == "#include <bar/baz.hpp> // c"
    assert line.delimiter_start == 9
    assert line.delimiter_end == 9 + len("bar/baz.hpp") + 1
    assert line.include_content == "bar/baz.hpp"

    line.include_content = ""
    assert line.raw_line == "#include <> // c"
    assert line.include_content == ""
    assert line.include_content_with_delimiters() == "<>"

    line.include_content = "x.h"
    assert line.raw_line == "#include <x.h> // c"
    assert line.line_type is LineType.ANGLE_BRACKETS


@mark_parser
def test_include_content_on_inactive_line() -> None:
    line = IncludeLine("int main() {}")
    assert line.include_content == ""
    line.include_content = "foo.h"
    assert line.raw_line == "int main() {}"
    assert not line.contains_active_include


@mark_parser
@parametrize(
    ("text", "start", "end"),
    [
        ("abc", 0, None),
        ("abc", None, 2),
        ("abc", 2, 1),
        ("abc", 1, 3),
        ("abc", -1, 2),
    ],
)
def test_constructor_rejects_invalid_delimiters(
    text: str, start: int | None, end: int | None
) -> None:
    with pytest.raises(ValueError):
        IncludeLine(text, start, end)


@mark_parser
def test_line_type_is_derived_from_text() -> None:
    assert IncludeLine('"a"', 0, 2).line_type is LineType.QUOTES
    assert IncludeLine("<a>", 0, 2).line_type is LineType.ANGLE_BRACKETS
    assert IncludeLine("").line_type is LineType.NO_INCLUDE


@mark_parser
def test_line_type_delimiters() -> None:
    assert LineType.QUOTES.delimiters == ('"', '"')
    assert LineType.ANGLE_BRACKETS.delimiters == ("<", ">")
    assert LineType.NO_INCLUDE.delimiters is None
