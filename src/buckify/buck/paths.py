# topmark:header:start
#
#   project      : Buckify
#   file         : paths.py
#   file_relpath : src/buckify/buck/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filesystem paths carried through the rule model.

`BuckPath` compares and sorts by the native path representation. Conversion
to text happens only at the serialization boundary, where backslashes become
forward slashes so that generated build files are identical on every host.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PurePath
from typing import Union

from buckify.core.errors import EncodingError

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True, order=True, slots=True)
class BuckPath:
    """A path as it appears in a rule attribute.

    Attributes:
        path (PurePath): The native path.
    """

    path: PurePath

    @classmethod
    def of(cls, value: PathLike | BuckPath) -> BuckPath:
        """Coerce a string, path-like or `BuckPath` into a `BuckPath`.

        Raises:
            ValueError: If ``value`` is an empty string, which would otherwise
                silently become ``"."``.
        """
        if isinstance(value, BuckPath):
            return value
        if not os.fspath(value):
            raise ValueError("empty path")
        return cls(PurePath(value))

    def to_text(self) -> str:
        """Return the path with forward slashes.

        Raises:
            EncodingError: If the path holds characters that cannot be encoded
                as UTF-8 (e.g. surrogate-escaped bytes from the filesystem).
        """
        text: str = os.fspath(self.path).replace("\\", "/")
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise EncodingError(self.path) from exc
        return text

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __str__(self) -> str:
        return str(self.path)
