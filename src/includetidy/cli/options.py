# topmark:header:start
#
#   project      : IncludeTidy
#   file         : options.py
#   file_relpath : src/includetidy/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, config, scanning) and
their resolution logic, so commands and the group stay thin.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Generic, NoReturn, ParamSpec, TypeVar, cast

import click

from includetidy.cli.errors import IncludeTidyUsageError
from includetidy.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Iterable

P = ParamSpec("P")
R = TypeVar("R")
E = TypeVar("E", bound=Enum)

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from the ``-v`` and ``-q`` counts.

    Raises:
        IncludeTidyUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more -v flags set TRACE, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise IncludeTidyUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]
    return LOG_LEVELS["WARNING"]


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    def __init__(self, enum_cls: type[E], choices: Iterable[E] | None = None) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        members: list[E] = list(choices) if choices is not None else list(enum_cls)
        self.lookup: dict[str, E] = {cast("str", m.value).lower(): m for m in members}
        self.choices: list[str] = list(self.lookup)

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Convert a string (case-insensitive enum value) to a member of the Enum."""
        if isinstance(value, self.enum_cls):
            return value
        key: str = str(value).lower()
        if key in self.lookup:
            return self.lookup[key]
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-color`` to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable colored output.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore includetidy.toml / pyproject.toml files found near the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=Path),
        help="Additional config file (repeatable, applied after discovered files).",
    )(f)
    return f


def common_scan_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add include-directory and conditional handling options to a command."""
    f = click.option(
        "--ignore-conditionals/--no-ignore-conditionals",
        "ignore_conditionals",
        default=None,
        help="Treat includes inside #if ... #endif blocks as inactive.",
    )(f)
    f = click.option(
        "-I",
        "--include-dir",
        "include_dirs",
        multiple=True,
        type=click.Path(file_okay=False, path_type=Path),
        help="Directory searched when resolving includes (repeatable, after configured ones).",
    )(f)
    return f


def common_files_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``FILES...`` argument to a command."""
    f = click.argument(
        "files",
        nargs=-1,
        required=True,
        type=click.Path(dir_okay=False, path_type=Path),
    )(f)
    return f
