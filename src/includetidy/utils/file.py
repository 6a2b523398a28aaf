# topmark:header:start
#
#   project      : IncludeTidy
#   file         : file.py
#   file_relpath : src/includetidy/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source file I/O helpers that keep line terminators as written."""

from __future__ import annotations

from typing import TYPE_CHECKING

from includetidy.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def read_source_file(path: Path) -> str:
    """Read a UTF-8 source file without translating newlines.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with path.open("r", encoding="utf-8", newline="") as f:
        text: str = f.read()
    logger.trace("Read %d character(s) from %s", len(text), path)
    return text


def write_source_file(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8 without translating newlines.

    Raises:
        OSError: If the file cannot be written.
    """
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
    logger.debug("Wrote %s", path)
