# topmark:header:start
#
#   project      : Buckify
#   file         : test_cli_platforms.py
#   file_relpath : tests/cli/test_cli_platforms.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `platforms` lists configured platforms."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    run_cli,
    run_cli_in,
    write_config,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_platforms_lists_attributes(tmp_path: Path) -> None:
    write_config(tmp_path)
    result = run_cli_in(tmp_path, ["--no-color", "platforms"])

    assert_SUCCESS(result)
    assert result.output == (
        "linux-x86_64\n"
        '    target_family = ["unix"]\n'
        '    target_os = ["linux"]\n'
        "    unix = []\n"
        "    x86_64-unknown-linux-gnu = []\n"
        "windows-msvc\n"
        '    target_env = ["msvc"]\n'
        '    target_os = ["windows"]\n'
        "    windows = []\n"
        "    x86_64-pc-windows-msvc = []\n"
    )


@mark_cli
def test_platforms_quiet_prints_names(tmp_path: Path) -> None:
    write_config(tmp_path)
    result = run_cli_in(tmp_path, ["--no-color", "-q", "platforms"])

    assert_SUCCESS(result)
    assert result.output.splitlines() == ["linux-x86_64", "windows-msvc"]


@mark_cli
def test_platforms_defaults_without_config(tmp_path: Path) -> None:
    result = run_cli(["--no-color", "-q", "platforms", "--config-dir", str(tmp_path)])

    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "linux-arm64",
        "linux-x86_64",
        "macos-arm64",
        "macos-x86_64",
        "windows-gnu",
        "windows-msvc",
    ]


@mark_cli
def test_platforms_missing_config_dir(tmp_path: Path) -> None:
    result = run_cli(["platforms", "--config-dir", str(tmp_path / "nope")])

    # click.Path does not check existence here; the command reports it.
    assert_FILE_NOT_FOUND(result)
    assert "Config directory not found" in result.output


@mark_cli
def test_platforms_invalid_config(tmp_path: Path) -> None:
    write_config(tmp_path, "[platform\n")
    result = run_cli_in(tmp_path, ["--no-color", "platforms"])

    assert_CONFIG_ERROR(result)
    assert "buckify.toml" in result.output


@mark_cli
def test_platforms_warns_about_unknown_keys(tmp_path: Path) -> None:
    write_config(tmp_path, '[buck]\nrust_libary = "x"\n\n[platform.p]\nunix = []\n')
    result = run_cli_in(tmp_path, ["--no-color", "platforms"])

    assert_SUCCESS(result)
    assert "[warning] Ignoring unknown key in [buck]: rust_libary" in result.output
    assert "    unix = []" in result.output
