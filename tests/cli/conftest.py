# topmark:header:start
#
#   project      : IncludeTidy
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running IncludeTidy in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so that relative file arguments resolve against
the temporary test directory and config discovery starts there.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from includetidy.cli.main import cli
from includetidy.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["list", "main.cpp"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on files created in
    ``tmp_path`` (e.g. ``--help`` or ``version``).
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    # WOULD_CHANGE is a normal outcome; do not assert on exception.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
