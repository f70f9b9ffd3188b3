# topmark:header:start
#
#   project      : Buckify
#   file         : __init__.py
#   file_relpath : src/buckify/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for Buckify configuration.

Keeping these helpers separate from `buckify.config.model` avoids import
cycles and keeps the model focused on merge policy.

Typical flow:
    1. Load the bundled platforms (``load_default_platforms_dict``).
    2. Load ``buckify.toml`` (``load_toml_dict``).
    3. Read values through a `TableReader`, which records diagnostics.
    4. Serialize back to TOML for dumps (``to_toml``).

Buckify uses `tomlkit` for both parsing and rendering.
"""

from __future__ import annotations

from .loaders import load_default_platforms_dict, load_toml_dict
from .reader import TableReader, is_toml_table
from .render import to_toml
from .types import TomlTable

__all__: list[str] = [
    "TableReader",
    "TomlTable",
    "is_toml_table",
    "load_default_platforms_dict",
    "load_toml_dict",
    "to_toml",
]
