# topmark:header:start
#
#   project      : Buckify
#   file         : test_cli_errors.py
#   file_relpath : tests/cli/test_cli_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for translating library errors into CLI errors."""

from __future__ import annotations

from pathlib import Path, PurePath

from buckify.cli.errors import (
    BuckifyCliError,
    BuckifyConfigError,
    BuckifyDataError,
    BuckifyFileNotFoundError,
    BuckifyIOError,
    from_library_error,
)
from buckify.cli.exit_codes import ExitCode
from buckify.core.errors import (
    BuckifyError,
    ConfigError,
    EncodingError,
    PredicateParseError,
    SerializationError,
)
from tests.conftest import parametrize


@parametrize(
    "exc, cls, code",
    [
        (ConfigError(Path("buckify.toml"), "bad"), BuckifyConfigError, ExitCode.CONFIG_ERROR),
        (PredicateParseError("cfg(", "cfg(", 0, "x"), BuckifyDataError, ExitCode.DATA_ERROR),
        (EncodingError(PurePath("a")), BuckifyDataError, ExitCode.DATA_ERROR),
        (FileNotFoundError("gone"), BuckifyFileNotFoundError, ExitCode.FILE_NOT_FOUND),
        (PermissionError("denied"), BuckifyIOError, ExitCode.IO_ERROR),
        (SerializationError("nope"), BuckifyCliError, ExitCode.FAILURE),
    ],
)
def test_from_library_error(
    exc: BuckifyError | OSError, cls: type[BuckifyCliError], code: ExitCode
) -> None:
    err: BuckifyCliError = from_library_error(exc)

    assert type(err) is cls
    assert err.exit_code == code
    assert err.format_message() == str(exc)
