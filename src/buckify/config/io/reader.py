# topmark:header:start
#
#   project      : Buckify
#   file         : reader.py
#   file_relpath : src/buckify/config/io/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shape-checked access to ``buckify.toml`` tables.

A `TableReader` wraps one unwrapped TOML table together with its location
(``[buck]``, ``[platform.linux-x86_64]``) and the `DiagnosticLog` of the
config being built. A value of the wrong shape is reported once, as a log
warning and a diagnostic, and then treated as absent. A typo in
``buckify.toml`` therefore never aborts a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeGuard

from buckify.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Container, Iterator

    from buckify.config.logging import BuckifyLogger
    from buckify.core.diagnostics import DiagnosticLog

    from .types import TomlTable

logger: BuckifyLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Return True if ``obj`` is an (unwrapped) TOML table."""
    return isinstance(obj, dict)


@dataclass(frozen=True, slots=True)
class TableReader:
    """One TOML table plus where it sits and where problems get recorded.

    Attributes:
        table (TomlTable): The table's key/value pairs.
        where (str): Location shown in messages, e.g. ``"[buck]"``; empty for
            the document root.
        diagnostics (DiagnosticLog): Receives a warning per rejected value.
    """

    table: TomlTable
    where: str
    diagnostics: DiagnosticLog

    def __iter__(self) -> Iterator[str]:
        return iter(self.table)

    def reject(self, message: str) -> None:
        """Report a value that will be ignored."""
        logger.warning("%s", message)
        self.diagnostics.add_warning(message)

    def warn_unknown(self, known: Container[str]) -> None:
        """Report every key of this table not in ``known``."""
        for key in self.table:
            if key not in known:
                self.reject(f"Ignoring unknown key in {self.where}: {key}")

    def child(self, key: str) -> TableReader | None:
        """Return a reader for the nested table ``key``.

        Returns None when the key is missing. A value that is not a table is
        reported and also yields None.
        """
        if key not in self.table:
            return None
        value: Any = self.table[key]
        where: str = f"{self.where[:-1]}.{key}]" if self.where else f"[{key}]"
        if not is_toml_table(value):
            self.reject(f"Expected table in {where}, got {type(value).__name__}")
            return None
        return TableReader(value, where, self.diagnostics)

    def string(self, key: str) -> str | None:
        """Return the string at ``key``; anything else (ints and bools included) is None."""
        value: Any = self.table.get(key)
        if value is None or isinstance(value, str):
            return value
        self.reject(
            f"Expected string in {self.where}.{key}, got {type(value).__name__}: {value}"
        )
        return None

    def string_list(self, key: str) -> list[str] | None:
        """Return the strings of the list at ``key``.

        Returns None when the key is missing or is not a list. Non-string
        entries are dropped, one warning each.
        """
        value: Any = self.table.get(key)
        if value is None:
            return None
        loc: str = f"{self.where}.{key}"
        if not isinstance(value, list):
            self.reject(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
            return None
        out: list[str] = []
        for item in value:
            if isinstance(item, str):
                out.append(item)
            else:
                self.reject(f"Ignoring non-string entry in {loc}: {item!r}")
        return out
