# topmark:header:start
#
#   project      : Buckify
#   file         : config.py
#   file_relpath : src/buckify/platform/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Platform attribute bags.

A platform is described by a set of attributes, each holding a set of string
values, mirroring the ``cfg`` keys a compiler would expose for a target::

    [platform.linux-x86_64]
    x86_64-unknown-linux-gnu = []
    target_os = ["linux"]
    target_family = ["unix"]
    unix = []

An attribute with no values is a boolean flag: present means true.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

PlatformName = str
"""Opaque platform key, e.g. ``"linux-x86_64"``."""

PlatformExpr = str
"""Unparsed platform predicate, e.g. ``'cfg(target_os = "linux")'``."""


@dataclass(frozen=True)
class PlatformConfig(Mapping[str, frozenset[str]]):
    """Immutable mapping of attribute name to the set of values it holds."""

    attrs: Mapping[str, frozenset[str]] = field(default_factory=lambda: {})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Iterable[str]]) -> PlatformConfig:
        """Build a config from a mapping of attribute name to values."""
        return cls({str(k): frozenset(str(v) for v in vs) for k, vs in data.items()})

    def has(self, key: str) -> bool:
        """Return True if the attribute ``key`` is present."""
        return key in self.attrs

    def has_value(self, key: str, value: str) -> bool:
        """Return True if attribute ``key`` holds ``value``."""
        return value in self.attrs.get(key, frozenset())

    def to_toml_dict(self) -> dict[str, Any]:
        """Return a TOML-serializable dict with sorted keys and values."""
        return {k: sorted(self.attrs[k]) for k in sorted(self.attrs)}

    def __getitem__(self, key: str) -> frozenset[str]:
        return self.attrs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.attrs)

    def __len__(self) -> int:
        return len(self.attrs)

    def __hash__(self) -> int:
        return hash(frozenset(self.attrs.items()))
