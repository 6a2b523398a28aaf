# topmark:header:start
#
#   project      : IncludeTidy
#   file         : test_restyle.py
#   file_relpath : tests/cli/test_restyle.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ``restyle`` command: dry run, apply, diff and error exits."""

from __future__ import annotations

from pathlib import Path

from click.testing import Result

from includetidy.core.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, assert_WOULD_CHANGE, run_cli_in
from tests.conftest import mark_cli

SOURCE: str = (
    '#include "vector"\n'
    "#include <local.h>\n"
    '// #include "commented.h"\n'
    "int main() {}\n"
)

ANGLED: str = (
    "#include <vector>\n"
    "#include <local.h>\n"
    '// #include "commented.h"\n'
    "int main() {}\n"
)


def _write_source(tmp_path: Path, text: str = SOURCE) -> Path:
    path: Path = tmp_path / "main.cpp"
    path.write_bytes(text.encode("utf-8"))
    return path


@mark_cli
def test_restyle_dry_run_reports_and_keeps_file(tmp_path: Path) -> None:
    path: Path = _write_source(tmp_path)
    result: Result = run_cli_in(
        tmp_path, ["--no-color", "restyle", "--no-config", "--style", "angle-brackets", "main.cpp"]
    )
    assert_WOULD_CHANGE(result)
    assert "would restyle main.cpp" in result.output
    assert path.read_text(encoding="utf-8") == SOURCE


@mark_cli
def test_restyle_apply_writes_file(tmp_path: Path) -> None:
    path: Path = _write_source(tmp_path)
    result: Result = run_cli_in(
        tmp_path,
        ["--no-color", "restyle", "--no-config", "--style", "angle-brackets", "--apply", "main.cpp"],
    )
    assert_SUCCESS(result)
    assert "restyled main.cpp" in result.output
    assert path.read_text(encoding="utf-8") == ANGLED


@mark_cli
def test_restyle_apply_keeps_crlf(tmp_path: Path) -> None:
    path: Path = _write_source(tmp_path, SOURCE.replace("\n", "\r\n"))
    result: Result = run_cli_in(
        tmp_path,
        ["--no-color", "restyle", "--no-config", "--style", "ANGLE-BRACKETS", "--apply", "main.cpp"],
    )
    assert_SUCCESS(result)
    assert path.read_bytes() == ANGLED.replace("\n", "\r\n").encode("utf-8")


@mark_cli
def test_restyle_unchanged_file_succeeds(tmp_path: Path) -> None:
    _write_source(tmp_path, ANGLED)
    result: Result = run_cli_in(
        tmp_path, ["--no-color", "restyle", "--no-config", "--style", "angle-brackets", "main.cpp"]
    )
    assert_SUCCESS(result)
    assert "would restyle" not in result.output


@mark_cli
def test_restyle_diff(tmp_path: Path) -> None:
    _write_source(tmp_path)
    result: Result = run_cli_in(
        tmp_path,
        [
            "--no-color",
            "restyle",
            "--no-config",
            "--style",
            "angle-brackets",
            "--diff",
            "main.cpp",
        ],
    )
    assert_WOULD_CHANGE(result)
    assert "#include <vector>" in result.output
    assert '#include "vector"' in result.output


@mark_cli
def test_restyle_style_from_config(tmp_path: Path) -> None:
    path: Path = _write_source(tmp_path, ANGLED)
    (tmp_path / "includetidy.toml").write_text(
        'root = true\ninclude_style = "quotes"\n', encoding="utf-8"
    )
    result: Result = run_cli_in(tmp_path, ["--no-color", "restyle", "--apply", "main.cpp"])
    assert_SUCCESS(result)
    assert path.read_text(encoding="utf-8").splitlines()[:2] == [
        '#include "vector"',
        '#include "local.h"',
    ]


@mark_cli
def test_restyle_without_style_is_usage_error(tmp_path: Path) -> None:
    _write_source(tmp_path)
    result: Result = run_cli_in(tmp_path, ["--no-color", "restyle", "--no-config", "main.cpp"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_restyle_rejects_keep_style(tmp_path: Path) -> None:
    _write_source(tmp_path)
    result: Result = run_cli_in(
        tmp_path, ["--no-color", "restyle", "--no-config", "--style", "keep", "main.cpp"]
    )
    assert result.exit_code != ExitCode.SUCCESS
    assert "Invalid value" in result.output


@mark_cli
def test_restyle_missing_file(tmp_path: Path) -> None:
    result: Result = run_cli_in(
        tmp_path, ["restyle", "--no-config", "--style", "quotes", "missing.cpp"]
    )
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@mark_cli
def test_restyle_invalid_config(tmp_path: Path) -> None:
    _write_source(tmp_path)
    (tmp_path / "includetidy.toml").write_text('root = true\ninclude_style = "curly"\n', encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["--no-color", "restyle", "main.cpp"])
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


@mark_cli
def test_restyle_missing_explicit_config(tmp_path: Path) -> None:
    _write_source(tmp_path)
    result: Result = run_cli_in(
        tmp_path, ["restyle", "--no-config", "--config", "nope.toml", "--style", "quotes", "main.cpp"]
    )
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


@mark_cli
def test_restyle_leaves_mixed_line_endings_alone(tmp_path: Path) -> None:
    text: str = "int a;\r\nint b;\nint c;\n"
    path: Path = _write_source(tmp_path, text)
    result: Result = run_cli_in(
        tmp_path, ["--no-color", "restyle", "--no-config", "--style", "quotes", "main.cpp"]
    )
    assert_SUCCESS(result)
    assert "would restyle" not in result.output
    assert path.read_bytes() == text.encode("utf-8")


@mark_cli
def test_restyle_apply_only_touches_delimiters(tmp_path: Path) -> None:
    text: str = '#include "a.h"\r\nint b;\n#include "c.h"\n'
    path: Path = _write_source(tmp_path, text)
    result: Result = run_cli_in(
        tmp_path,
        ["--no-color", "restyle", "--no-config", "--style", "angle-brackets", "--apply", "main.cpp"],
    )
    assert_SUCCESS(result)
    assert path.read_bytes() == b"#include <a.h>\r\nint b;\n#include <c.h>\n"


@mark_cli
def test_restyle_honors_conditionals_from_config(tmp_path: Path) -> None:
    text: str = '#include "a.h"\n#if DEBUG\n#include "debug.h"\n#endif\n'
    path: Path = _write_source(tmp_path, text)
    (tmp_path / "includetidy.toml").write_text(
        "root = true\nignore_preprocessor_conditionals = true\n", encoding="utf-8"
    )
    result: Result = run_cli_in(
        tmp_path, ["--no-color", "restyle", "--style", "angle-brackets", "--apply", "main.cpp"]
    )
    assert_SUCCESS(result)
    assert path.read_text(encoding="utf-8") == (
        '#include <a.h>\n#if DEBUG\n#include "debug.h"\n#endif\n'
    )
