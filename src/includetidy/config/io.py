# topmark:header:start
#
#   project      : IncludeTidy
#   file         : io.py
#   file_relpath : src/includetidy/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
getters never raise: a value of the wrong shape is logged and replaced by the
default (or ``None``), so that one typo does not break a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from includetidy.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from includetidy.config.logging import IncludeTidyLogger

logger: IncludeTidyLogger = get_logger(__name__)

TomlTable = dict[str, Any]

#: Name of the dedicated config file.
INCLUDETIDY_TOML_NAME: Final[str] = "includetidy.toml"
#: Name of the project file holding a ``[tool.includetidy]`` table.
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"


class ConfigError(Exception):
    """Raised when a configuration source cannot be read or is invalid."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``includetidy.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the IncludeTidy settings held by a parsed config file.

    For ``pyproject.toml`` this is the ``[tool.includetidy]`` table (None when
    absent); any other file is taken as a whole.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get("includetidy") if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        return None
    return cast("TomlTable", section)


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Integers are coerced via ``bool(value)``. Missing keys and values of other
    types yield ``None``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.warning("Ignoring config key %r: expected a boolean, got %r", key, value)
    return None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Ignoring config key %r: expected a string, got %r", key, value)
    return None


def get_string_list_value(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings from a TOML table; non-string items are skipped."""
    value: Any | None = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Ignoring config key %r: expected a list of strings, got %r", key, value)
        return []
    result: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            result.append(item)
        else:
            logger.warning("Ignoring non-string item %r in config key %r", item, key)
    return result
