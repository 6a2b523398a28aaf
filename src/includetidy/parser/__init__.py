# topmark:header:start
#
#   project      : IncludeTidy
#   file         : __init__.py
#   file_relpath : src/includetidy/parser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Include directive parsing.

Public API:

- [`parse_includes`][includetidy.parser.scanner.parse_includes]: scan text into
  [`IncludeLine`][includetidy.parser.line.IncludeLine] records.
- [`ParseOptions`][includetidy.parser.options.ParseOptions] and
  [`LineType`][includetidy.parser.options.LineType].
- [`resolve_include`][includetidy.parser.resolver.resolve_include] and
  [`get_exact_path_name`][includetidy.parser.resolver.get_exact_path_name].

Example:
    ```python
    from includetidy.parser import LineType, ParseOptions, parse_includes

    lines = parse_includes('#include "foo.h"\n', ParseOptions.KEEP_ONLY_VALID_INCLUDES)
    lines[0].set_line_type(LineType.ANGLE_BRACKETS)
    assert lines[0].raw_line == "#include <foo.h>"
    ```
"""

from __future__ import annotations

from includetidy.parser.line import IncludeLine
from includetidy.parser.options import LineType, ParseOptions
from includetidy.parser.resolver import get_exact_path_name, resolve_include
from includetidy.parser.scanner import parse_includes

__all__: list[str] = [
    "IncludeLine",
    "LineType",
    "ParseOptions",
    "get_exact_path_name",
    "parse_includes",
    "resolve_include",
]
