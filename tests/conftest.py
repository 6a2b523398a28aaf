# topmark:header:start
#
#   project      : IncludeTidy
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the IncludeTidy test suite.

This file sets up global fixtures and typed mark helpers, and configures
TRACE logging for test runs so that failures come with full scanner output.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from includetidy.config import logging
from includetidy.config.logging import LOG_LEVEL_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])

# Type of a decorator that returns the callable it wraps.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_parser: DecoratorType[Any] = as_typed_mark(pytest.mark.parser)
mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_includetidy_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    INCLUDETIDY_LOG_LEVEL in their shell.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)
