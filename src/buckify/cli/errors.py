# topmark:header:start
#
#   project      : Buckify
#   file         : errors.py
#   file_relpath : src/buckify/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Buckify CLI.

Commands raise these to exit with a sysexits-aligned status (see
`buckify.cli.exit_codes.ExitCode`). Library errors from
`buckify.core.errors` are translated with `from_library_error` at the command
boundary, so a broken ``buckify.toml`` exits with 78 and a malformed
predicate or path with 65.

When the group has stored a `buckify.cli.console.ClickConsole` on the
context, errors are printed through it; otherwise Click's default ``Error:``
rendering is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from buckify.cli.exit_codes import ExitCode
from buckify.core.errors import BuckifyError, ConfigError, EncodingError, PredicateParseError


class BuckifyCliError(click.ClickException):
    """Base class for all Buckify CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the message through the project console when one is available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = ctx.obj.get("console") if ctx and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(self.format_message())


class BuckifyUsageError(BuckifyCliError):
    """Invalid combination of flags or arguments, e.g. an unknown ``--platform``."""

    exit_code = ExitCode.USAGE_ERROR


class BuckifyDataError(BuckifyCliError):
    """Malformed input data: a predicate that does not parse, a non-UTF-8 path."""

    exit_code = ExitCode.DATA_ERROR


class BuckifyFileNotFoundError(BuckifyCliError):
    """A directory or file named on the command line does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class BuckifyIOError(BuckifyCliError):
    """Reading or writing a file failed."""

    exit_code = ExitCode.IO_ERROR


class BuckifyConfigError(BuckifyCliError):
    """``buckify.toml`` exists but cannot be read or parsed."""

    exit_code = ExitCode.CONFIG_ERROR


def from_library_error(exc: BuckifyError | OSError) -> BuckifyCliError:
    """Return the CLI error that reports ``exc`` with the matching exit code.

    Args:
        exc (BuckifyError | OSError): A library or sink error.

    Returns:
        BuckifyCliError: The exception to raise from the command.
    """
    message: str = str(exc)
    if isinstance(exc, ConfigError):
        return BuckifyConfigError(message)
    if isinstance(exc, (PredicateParseError, EncodingError)):
        return BuckifyDataError(message)
    if isinstance(exc, FileNotFoundError):
        return BuckifyFileNotFoundError(message)
    if isinstance(exc, OSError):
        return BuckifyIOError(message)
    return BuckifyCliError(message)
