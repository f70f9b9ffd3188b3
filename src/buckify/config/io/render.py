# topmark:header:start
#
#   project      : Buckify
#   file         : render.py
#   file_relpath : src/buckify/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration dicts as ``buckify.toml`` text.

The output is built as a `tomlkit` document so that nested platform tables
come out as ``[platform.<name>]`` headers rather than inline tables, which
keeps a ``config dump`` pasteable into ``buckify.toml``.

TOML has no null value: ``None`` entries (e.g. an unset
``buildscript_binary``) are left out.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from buckify.config.logging import get_logger

if TYPE_CHECKING:
    from tomlkit.items import Item, Table
    from tomlkit.toml_document import TOMLDocument

    from buckify.config.logging import BuckifyLogger

    from .types import TomlTable

logger: BuckifyLogger = get_logger(__name__)


def _is_table_of_tables(value: Mapping[str, Any]) -> bool:
    return bool(value) and all(isinstance(v, Mapping) for v in value.values())


def _table(value: Mapping[str, Any]) -> Table:
    tbl: Table = tomlkit.table(is_super_table=_is_table_of_tables(value))
    for key, child in value.items():
        item: Item | None = _item(child)
        if item is None:
            logger.debug("Leaving out unset key %s", key)
            continue
        tbl.add(str(key), item)
    return tbl


def _item(value: Any) -> Item | None:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return _table(cast("Mapping[str, Any]", value))
    if isinstance(value, (list, tuple, set, frozenset)):
        values: list[Any] = sorted(value) if isinstance(value, (set, frozenset)) else list(value)
        return tomlkit.item([v for v in values if v is not None])
    return tomlkit.item(value)


def to_toml(toml_dict: TomlTable, *, comment: str | None = None) -> str:
    """Serialize a configuration dict to TOML text.

    Args:
        toml_dict (TomlTable): Top-level tables, e.g. from `Config.to_toml_dict`.
        comment (str | None): Optional leading comment; one ``#`` line per text line.

    Returns:
        str: The rendered TOML document.
    """
    doc: TOMLDocument = tomlkit.document()
    if comment:
        for line in comment.splitlines():
            doc.add(tomlkit.comment(line))
        doc.add(tomlkit.nl())
    for key, value in toml_dict.items():
        item: Item | None = _item(value)
        if item is not None:
            doc.add(key, item)
    return doc.as_string()
