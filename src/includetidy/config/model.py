# topmark:header:start
#
#   project      : IncludeTidy
#   file         : model.py
#   file_relpath : src/includetidy/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for IncludeTidy.

Configuration is layered. `MutableConfig` collects values from the built-in
defaults, discovered project files, explicit config files and CLI overrides
(later layers win); `MutableConfig.freeze` then produces an immutable `Config`
snapshot used at runtime.

Recognized keys (top level of ``includetidy.toml``, or ``[tool.includetidy]`` in
``pyproject.toml``)::

    root = true                          # stop upward discovery here
    include_directories = ["include", "third_party/include"]
    ignore_preprocessor_conditionals = false
    include_style = "keep"               # "quotes", "angle-brackets" or "keep"

Relative include directories are resolved against the directory of the file
that declares them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from includetidy.config.io import (
    INCLUDETIDY_TOML_NAME,
    PYPROJECT_TOML_NAME,
    ConfigError,
    extract_tool_table,
    get_bool_value_or_none,
    get_string_list_value,
    get_string_value_or_none,
    load_toml_dict,
)
from includetidy.config.logging import get_logger
from includetidy.formatter import IncludeStyle
from includetidy.parser.options import ParseOptions

if TYPE_CHECKING:
    from collections.abc import Iterable

    from includetidy.config.io import TomlTable
    from includetidy.config.logging import IncludeTidyLogger

logger: IncludeTidyLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        include_directories (tuple[Path, ...]): Directories searched when resolving
            includes, in order.
        ignore_preprocessor_conditionals (bool): Treat includes inside ``#if`` blocks
            as inactive.
        include_style (IncludeStyle): Delimiter style applied by ``restyle``.
        config_files (tuple[Path, ...]): Files that contributed to this config.
    """

    include_directories: tuple[Path, ...] = ()
    ignore_preprocessor_conditionals: bool = False
    include_style: IncludeStyle = IncludeStyle.KEEP
    config_files: tuple[Path, ...] = ()

    @property
    def parse_options(self) -> ParseOptions:
        """Return the scanner flags described by this config."""
        if self.ignore_preprocessor_conditionals:
            return ParseOptions.IGNORE_INCLUDES_IN_PREPROCESSOR_CONDITIONALS
        return ParseOptions.NONE

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            include_directories=list(self.include_directories),
            ignore_preprocessor_conditionals=self.ignore_preprocessor_conditionals,
            include_style=self.include_style,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    `ignore_preprocessor_conditionals` and `include_style` are tri-state:
    ``None`` means "not set by this layer" so that merging keeps the value of
    lower layers.
    """

    include_directories: list[Path] = field(default_factory=lambda: [])
    ignore_preprocessor_conditionals: bool | None = None
    include_style: IncludeStyle | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    root: bool = False

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the built-in defaults."""
        defaults = Config()
        return defaults.thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML table.

        Args:
            data (TomlTable): The IncludeTidy settings table.
            config_file (Path | None): Source file; its directory anchors relative paths.

        Returns:
            MutableConfig: The resulting draft.

        Raises:
            ConfigError: If ``include_style`` names an unknown style.
        """
        draft = cls()
        base_dir: Path = config_file.parent.resolve() if config_file else Path.cwd()
        if config_file is not None:
            draft.config_files = [config_file]

        draft.include_directories = [
            _anchor(Path(d), base_dir) for d in get_string_list_value(data, "include_directories")
        ]
        draft.ignore_preprocessor_conditionals = get_bool_value_or_none(
            data, "ignore_preprocessor_conditionals"
        )

        style_name: str | None = get_string_value_or_none(data, "include_style")
        if style_name is not None:
            style: IncludeStyle | None = IncludeStyle.from_name(style_name)
            if style is None:
                choices: str = ", ".join(s.value for s in IncludeStyle)
                where: str = f" in {config_file}" if config_file else ""
                raise ConfigError(
                    f"Invalid include_style {style_name!r}{where}; expected one of: {choices}"
                )
            draft.include_style = style

        draft.root = bool(get_bool_value_or_none(data, "root"))
        logger.trace("Config draft from %s: %s", config_file or "<dict>", draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``includetidy.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or None for a ``pyproject.toml``
            without a ``[tool.includetidy]`` table.

        Raises:
            ConfigError: If the file cannot be read or holds invalid values.
        """
        data: TomlTable = load_toml_dict(path)
        section: TomlTable | None = extract_tool_table(data, path)
        if section is None:
            logger.debug("No [tool.includetidy] table in %s", path)
            return None
        return cls.from_toml_dict(section, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found by walking upward from ``start``.

        Files are returned root-most first, nearest last, so that a
        last-wins merge gives precedence to the nearest file. Within one
        directory ``pyproject.toml`` comes before ``includetidy.toml``. A file
        setting ``root = true`` stops the walk after its directory.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            dir_entries: list[Path] = []
            stop_here: bool = False
            for name in (PYPROJECT_TOML_NAME, INCLUDETIDY_TOML_NAME):
                candidate: Path = cur / name
                if not candidate.is_file():
                    continue
                draft: MutableConfig | None = cls.from_toml_file(candidate)
                if draft is None:
                    continue
                logger.debug("Discovered config file: %s", candidate)
                dir_entries.append(candidate)
                stop_here = stop_here or draft.root
            if dir_entries:
                per_dir.append(dir_entries)
            parent: Path = cur.parent
            if stop_here or parent == cur:
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        use_local_config: bool = True,
    ) -> MutableConfig:
        """Merge defaults, discovered files and extra files (in that order).

        Args:
            start (Path | None): Where discovery starts (defaults to the CWD).
            extra_config_files (Iterable[Path]): Explicit config files, applied last.
            use_local_config (bool): Whether to discover local config files at all.

        Returns:
            MutableConfig: The merged draft.

        Raises:
            ConfigError: If any config file is unreadable or invalid.
        """
        merged: MutableConfig = cls.from_defaults()
        sources: list[Path] = []
        if use_local_config:
            sources.extend(cls.discover_local_config_files(start or Path.cwd()))
        sources.extend(extra_config_files)
        for path in sources:
            if not path.is_file():
                raise ConfigError(f"Config file not found: {path}")
            draft: MutableConfig | None = cls.from_toml_file(path)
            if draft is not None:
                merged = merged.merge_with(draft)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Include directories accumulate: ``other``'s directories are searched
        after the ones already present (duplicates are dropped).
        """
        directories: list[Path] = list(self.include_directories)
        for d in other.include_directories:
            if d not in directories:
                directories.append(d)
        return MutableConfig(
            include_directories=directories,
            ignore_preprocessor_conditionals=_pick(
                other.ignore_preprocessor_conditionals, self.ignore_preprocessor_conditionals
            ),
            include_style=other.include_style or self.include_style,
            config_files=[*self.config_files, *other.config_files],
            root=self.root or other.root,
        )

    def freeze(self) -> Config:
        """Freeze this draft into an immutable `Config`."""
        return Config(
            include_directories=tuple(self.include_directories),
            ignore_preprocessor_conditionals=bool(self.ignore_preprocessor_conditionals),
            include_style=self.include_style or IncludeStyle.KEEP,
            config_files=tuple(self.config_files),
        )


def _pick(value: bool | None, fallback: bool | None) -> bool | None:
    return fallback if value is None else value


def _anchor(path: Path, base_dir: Path) -> Path:
    return path if path.is_absolute() else base_dir / path
