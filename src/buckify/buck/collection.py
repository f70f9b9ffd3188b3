# topmark:header:start
#
#   project      : Buckify
#   file         : collection.py
#   file_relpath : src/buckify/buck/collection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute values that may be either a set or a mapping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class SetOrMap(Generic[T]):
    """Either a set of values or a mapping from logical name to value.

    The set shape renders as a list literal, the mapping shape as a map
    literal. Use `of_set` / `of_map` to build one; an empty instance of
    either shape is considered empty. The mapping shape is stored as a
    read-only copy and makes the instance unhashable.

    Attributes:
        items (frozenset[T] | Mapping[str, T]): The wrapped collection.
    """

    items: Union[frozenset[T], Mapping[str, T]]

    def __post_init__(self) -> None:
        if isinstance(self.items, Mapping):
            object.__setattr__(self, "items", MappingProxyType(dict(self.items)))

    @classmethod
    def of_set(cls, values: Iterable[T] = ()) -> SetOrMap[T]:
        """Wrap ``values`` as the set shape."""
        return cls(frozenset(values))

    @classmethod
    def of_map(cls, mapping: Mapping[str, T]) -> SetOrMap[T]:
        """Wrap a copy of ``mapping`` as the mapping shape."""
        return cls(mapping)

    @property
    def is_map(self) -> bool:
        """Return True for the mapping shape."""
        return isinstance(self.items, Mapping)

    def is_empty(self) -> bool:
        """Return True if the wrapped collection has no entries."""
        return len(self.items) == 0
