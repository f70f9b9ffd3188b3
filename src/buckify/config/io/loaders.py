# topmark:header:start
#
#   project      : Buckify
#   file         : loaders.py
#   file_relpath : src/buckify/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads Buckify configuration from:
- the packaged default platform definitions, and
- an on-disk ``buckify.toml``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

import functools
from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from buckify.config.logging import get_logger
from buckify.constants import DEFAULT_PLATFORMS_NAME, DEFAULT_PLATFORMS_PACKAGE
from buckify.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from buckify.config.logging import BuckifyLogger

    from .types import TomlTable

logger: BuckifyLogger = get_logger(__name__)


def _parse_toml_text(text: str) -> TomlTable:
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


@functools.cache
def _default_platforms_text() -> str:
    return files(DEFAULT_PLATFORMS_PACKAGE).joinpath(DEFAULT_PLATFORMS_NAME).read_text(
        encoding="utf-8"
    )


def load_default_platforms_dict() -> TomlTable:
    """Return the bundled ``default_platforms.toml`` as a dict.

    Returns:
        TomlTable: A fresh dict with a single ``platform`` table, safe to mutate.
    """
    return _parse_toml_text(_default_platforms_text())


def load_toml_dict(path: Path) -> TomlTable | None:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g. ``buckify.toml``).

    Returns:
        TomlTable | None: The parsed TOML content, or None when the file does not exist.

    Raises:
        ConfigError: If the file exists but cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No config file at %s", path)
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(path, str(e)) from e

    try:
        data: TomlTable = _parse_toml_text(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(path, str(e)) from e

    logger.debug("Read config %s: %r", path, data)
    return data
