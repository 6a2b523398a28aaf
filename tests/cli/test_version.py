# topmark:header:start
#
#   project      : IncludeTidy
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ``version`` command and the bare group invocation."""

from __future__ import annotations

from click.testing import Result

from includetidy.constants import INCLUDETIDY_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_prints_version() -> None:
    result: Result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output.strip() == INCLUDETIDY_VERSION


@mark_cli
def test_group_without_command_prints_help() -> None:
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "includetidy list" in result.output
    assert "restyle" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output
