# topmark:header:start
#
#   project      : Buckify
#   file         : names.py
#   file_relpath : src/buckify/buck/names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule names and references between rules.

A `Name` is only the name of a target: no package path, no leading colon.
A `RuleRef` is the textual form of a label (``:name``, ``//pkg:name``, ...)
optionally guarded by a platform predicate; it is never parsed here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from functools import total_ordering
from typing import TYPE_CHECKING

from buckify.config.logging import BuckifyLogger, get_logger
from buckify.platform.predicate import PlatformPredicate

if TYPE_CHECKING:
    from buckify.platform.config import PlatformConfig, PlatformExpr

logger: BuckifyLogger = get_logger(__name__)


@dataclass(frozen=True, order=True, slots=True)
class Name:
    """Name of a rule within its package."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("rule name must not be empty")
        if self.value.startswith((":", "/")):
            raise ValueError(f"rule name must not carry a package path or colon: {self.value!r}")

    def __str__(self) -> str:
        return self.value


@total_ordering
@dataclass(frozen=True, eq=True, slots=True)
class RuleRef:
    """Reference to another rule, optionally conditional on a platform predicate.

    Ordering is lexicographic over ``(target, platform)`` with an absent
    predicate sorting before any present one.

    Attributes:
        target (str): Label of the referenced rule; emitted verbatim.
        platform (PlatformExpr | None): Predicate deciding whether the reference applies.
    """

    target: str
    platform: PlatformExpr | None = None

    @classmethod
    def new(cls, target: str) -> RuleRef:
        """Return a reference without a platform predicate."""
        return cls(target)

    def with_platform(self, platform: PlatformExpr | None) -> RuleRef:
        """Return a copy whose predicate is replaced by ``platform``."""
        return replace(self, platform=platform)

    def has_platform(self) -> bool:
        """Return True if this reference carries a platform predicate."""
        return self.platform is not None

    def filter(self, platform_config: PlatformConfig) -> bool:
        """Return True if this reference applies to ``platform_config``.

        Always True when no predicate is set.

        Raises:
            PredicateParseError: If the predicate does not parse.
        """
        if self.platform is None:
            return True
        predicate: PlatformPredicate = PlatformPredicate.parse(self.platform)
        result: bool = predicate.eval(platform_config)
        logger.trace("RuleRef %s [%s] -> %s", self.target, self.platform, result)
        return result

    def _key(self) -> tuple[str, bool, str]:
        return (self.target, self.platform is not None, self.platform or "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RuleRef):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return self.target


TargetRef = RuleRef


def filter_rule_refs(
    refs: Iterable[RuleRef], platform_config: PlatformConfig
) -> frozenset[RuleRef]:
    """Return the references of ``refs`` that apply to ``platform_config``.

    Raises:
        PredicateParseError: If any predicate does not parse.
    """
    return frozenset(ref for ref in refs if ref.filter(platform_config))
