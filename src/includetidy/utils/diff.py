# topmark:header:start
#
#   project      : IncludeTidy
#   file         : diff.py
#   file_relpath : src/includetidy/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering for rewritten sources."""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk


def unified_diff(original: str, updated: str, path: str) -> list[str]:
    """Return the unified diff between two versions of a file, one line per item.

    Line terminators are kept so that newline-only changes stay visible.
    """
    return list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{path} (original)",
            tofile=f"{path} (restyled)",
        )
    )


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        # Show control characters explicitly.
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
