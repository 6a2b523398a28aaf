# topmark:header:start
#
#   project      : IncludeTidy
#   file         : resolver.py
#   file_relpath : src/includetidy/parser/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve include content against include directories.

Resolution is read-only: it checks for existing files and lists directories to
recover the on-disk casing of each path component, but never creates anything.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from includetidy.config.logging import get_logger
from includetidy.core.diagnostics import Diagnostic, DiagnosticLevel, log_diagnostic

if TYPE_CHECKING:
    from collections.abc import Iterable

    from includetidy.config.logging import IncludeTidyLogger
    from includetidy.core.diagnostics import DiagnosticSink

logger: IncludeTidyLogger = get_logger(__name__)


def get_exact_path_name(path: str | os.PathLike[str]) -> Path:
    """Return the canonical absolute form of ``path`` with on-disk casing.

    Each component is matched against the entries of its parent directory; an
    exact match wins over a case-insensitive one. Components that cannot be
    listed or matched are kept as given.

    Args:
        path (str | os.PathLike[str]): The path to normalize.

    Returns:
        Path: The absolute path, with symlinks and ``..`` resolved.
    """
    resolved: Path = Path(path).resolve()
    exact = Path(resolved.anchor)
    for part in resolved.parts[1:]:
        exact = exact / _match_entry_name(exact, part)
    return exact


def _match_entry_name(directory: Path, name: str) -> str:
    try:
        entries: list[str] = os.listdir(directory)
    except OSError:
        return name
    if name in entries:
        return name
    folded: str = name.casefold()
    for entry in entries:
        if entry.casefold() == folded:
            return entry
    return name


def _is_file(candidate: Path) -> bool:
    try:
        return candidate.is_file()
    except (OSError, ValueError) as exc:
        logger.debug("Cannot stat include candidate %s: %s", candidate, exc)
        return False


def resolve_include(
    include_content: str,
    include_directories: Iterable[str | os.PathLike[str]],
    *,
    sink: DiagnosticSink | None = None,
) -> str:
    """Find ``include_content`` in the first directory that holds it.

    Args:
        include_content (str): The include path as written between the delimiters.
        include_directories (Iterable[str | os.PathLike[str]]): Directories to search, in order.
        sink (DiagnosticSink | None): Receives a warning when nothing matches.
            Defaults to [`log_diagnostic`][includetidy.core.diagnostics.log_diagnostic].

    Returns:
        str: The exact-case absolute path of the first match, or ``include_content``
        unchanged when no directory holds it.
    """
    for directory in include_directories:
        candidate: Path = Path(directory) / include_content
        if _is_file(candidate):
            exact: Path = get_exact_path_name(candidate)
            logger.trace("Resolved include %r to %s", include_content, exact)
            return str(exact)

    (sink or log_diagnostic)(
        Diagnostic(
            level=DiagnosticLevel.WARNING,
            message=f"Unable to resolve include: '{include_content}'",
        )
    )
    return include_content
