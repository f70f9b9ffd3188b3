# topmark:header:start
#
#   project      : Buckify
#   file         : errors.py
#   file_relpath : src/buckify/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Buckify library.

The library layer raises plain exceptions rooted at `BuckifyError`; the CLI
translates them into Click exceptions with standardized exit codes (see
`buckify.cli.errors`). I/O errors raised by output sinks are never wrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path, PurePath


class BuckifyError(Exception):
    """Base class for all Buckify library errors."""


class EncodingError(BuckifyError, ValueError):
    """A path could not be rendered as UTF-8 text.

    Attributes:
        path (PurePath): The offending path.
    """

    def __init__(self, path: PurePath) -> None:
        self.path: PurePath = path
        super().__init__(f"path contains invalid UTF-8 characters: {path!r}")


class PredicateParseError(BuckifyError, ValueError):
    """A platform predicate expression failed to parse.

    Attributes:
        expr (str): The complete expression being parsed.
        offending (str): The substring at which parsing failed (may be empty at end of input).
        position (int): Character offset of ``offending`` within ``expr``.
        reason (str): Short description of what was expected.
    """

    def __init__(self, expr: str, offending: str, position: int, reason: str) -> None:
        self.expr: str = expr
        self.offending: str = offending
        self.position: int = position
        self.reason: str = reason
        where: str = repr(offending) if offending else "end of input"
        super().__init__(f"invalid platform predicate {expr!r}: {reason} at {where}")


class SerializationError(BuckifyError, TypeError):
    """The Starlark serializer was given a value it cannot render."""


class ConfigError(BuckifyError):
    """A configuration file exists but could not be read or parsed.

    Attributes:
        path (Path): The configuration file.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path: Path = path
        super().__init__(f"Failed to read config {path}: {message}")
