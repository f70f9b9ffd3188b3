# topmark:header:start
#
#   project      : Buckify
#   file         : rules.py
#   file_relpath : src/buckify/buck/rules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule data model.

Each rule variant is a frozen dataclass whose `starlark_args` method returns
the ordered keyword arguments of its invocation, with default-valued fields
already omitted. `Rule` is the union of all variants; dispatch over it uses
``match`` so adding a variant without handling it fails loudly.

Shared groupings:

- `Common`: name, visibility, licenses, ``compatible_with``.
- `PlatformRustCommon`: attributes that can be set globally or per platform.
- `RustCommon`: `Common` plus crate metadata, base attributes, and
  per-platform overrides.
- `BuildscriptGenrule`: the payload shared by both build-script rules.

Per-platform overrides render as ``platforms = dict("<name>" = dict(...))``.

Map-valued fields are copied into read-only `MappingProxyType` views on
construction, so a rule never shares a dict with its caller. Rules compare
field-wise and are not hashable once they hold a mapping; compare rules by
`rule_name` when identity within a build file is what matters.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from buckify.buck.collection import SetOrMap
from buckify.buck.names import Name, RuleRef
from buckify.buck.paths import BuckPath
from buckify.buck.starlark import Call
from buckify.config.logging import BuckifyLogger, get_logger
from buckify.platform.config import PlatformName

logger: BuckifyLogger = get_logger(__name__)

Args = list[tuple[str, Any]]
"""Ordered keyword arguments of a rule invocation."""


def _visibility(public: bool) -> list[str]:
    return ["PUBLIC"] if public else []


def _freeze_maps(obj: object, *names: str) -> None:
    for name in names:
        object.__setattr__(obj, name, MappingProxyType(dict(getattr(obj, name))))


def _put(args: Args, key: str, value: Any) -> None:
    """Append ``key = value`` unless ``value`` is empty, False or None."""
    if value is None or value is False:
        return
    if isinstance(value, SetOrMap):
        if value.is_empty():
            return
    elif isinstance(value, (Collection, Mapping)) and not isinstance(value, str):
        if len(value) == 0:
            return
    args.append((key, value))


@dataclass(frozen=True)
class Common:
    """Metadata shared by every rule variant except `Alias` and build-script rules."""

    name: Name
    public: bool = False
    licenses: frozenset[BuckPath] = frozenset()
    compatible_with: tuple[RuleRef, ...] = ()

    def starlark_args(self) -> Args:
        args: Args = [("name", self.name), ("visibility", _visibility(self.public))]
        _put(args, "licenses", self.licenses)
        _put(args, "compatible_with", self.compatible_with)
        return args


@dataclass(frozen=True)
class PlatformRustCommon:
    """Code-build attributes that may be set globally or overridden per platform.

    ``link_style`` only applies to binaries but still needs to be
    platform-specific.
    """

    srcs: frozenset[BuckPath] = frozenset()
    mapped_srcs: Mapping[str, BuckPath] = field(default_factory=lambda: {})
    rustc_flags: tuple[str, ...] = ()
    features: frozenset[str] = frozenset()
    deps: frozenset[RuleRef] = frozenset()
    named_deps: Mapping[str, RuleRef] = field(default_factory=lambda: {})
    env: Mapping[str, str] = field(default_factory=lambda: {})
    link_style: str | None = None
    preferred_linkage: str | None = None

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _freeze_maps(self, "mapped_srcs", "named_deps", "env")

    def starlark_args(self) -> Args:
        args: Args = []
        _put(args, "srcs", self.srcs)
        _put(args, "mapped_srcs", self.mapped_srcs)
        _put(args, "rustc_flags", self.rustc_flags)
        _put(args, "features", self.features)
        _put(args, "deps", self.deps)
        _put(args, "named_deps", self.named_deps)
        _put(args, "env", self.env)
        _put(args, "link_style", self.link_style)
        _put(args, "preferred_linkage", self.preferred_linkage)
        return args

    def is_empty(self) -> bool:
        """Return True if no attribute is set."""
        return not self.starlark_args()


def platforms_call(
    platforms: Mapping[PlatformName, PlatformRustCommon],
    known: Collection[PlatformName] | None = None,
) -> Call | None:
    """Return the ``platforms`` argument value, or None if there is nothing to emit.

    Args:
        platforms (Mapping[PlatformName, PlatformRustCommon]): Per-platform overrides.
        known (Collection[PlatformName] | None): Platform names known to the
            configuration. Overrides for other names are skipped with a warning.
            None accepts every name.

    Returns:
        Call | None: A ``dict(...)`` call keyed by platform name, each value
        itself a ``dict(...)`` call over the override's attributes.
    """
    entries: list[tuple[str, Call]] = []
    for name in sorted(platforms):
        if known is not None and name not in known:
            logger.warning("Not emitting overrides for unknown platform %r", name)
            continue
        entries.append((name, Call.dict_of(platforms[name].starlark_args())))
    if not entries:
        return None
    return Call.dict_of(entries)


@dataclass(frozen=True)
class RustCommon:
    """Fields shared by Rust libraries and binaries.

    Attributes:
        common (Common): Shared metadata.
        krate (str): Crate name, emitted as ``crate``.
        rootmod (BuckPath): Crate root, emitted as ``crate_root``.
        edition (str): Rust edition, e.g. ``"2021"``.
        base (PlatformRustCommon): Platform-independent attributes.
        platform (Mapping[PlatformName, PlatformRustCommon]): Per-platform overrides.
    """

    common: Common
    krate: str
    rootmod: BuckPath
    edition: str
    base: PlatformRustCommon = field(default_factory=PlatformRustCommon)
    platform: Mapping[PlatformName, PlatformRustCommon] = field(default_factory=lambda: {})

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _freeze_maps(self, "platform")

    def starlark_args(self, known_platforms: Collection[PlatformName] | None = None) -> Args:
        args: Args = self.common.starlark_args()
        args.append(("crate", self.krate))
        args.append(("crate_root", self.rootmod))
        args.append(("edition", self.edition))
        args.extend(self.base.starlark_args())
        _put(args, "platforms", platforms_call(self.platform, known_platforms))
        return args


@dataclass(frozen=True)
class Alias:
    """An alias to a rule in the same package; ``actual`` is emitted as ``":<name>"``."""

    name: Name
    actual: Name
    public: bool = False

    def starlark_args(self) -> Args:
        return [
            ("name", self.name),
            ("actual", f":{self.actual}"),
            ("visibility", _visibility(self.public)),
        ]


@dataclass(frozen=True)
class RustLibrary:
    """A Rust library crate."""

    common: RustCommon
    proc_macro: bool = False
    dlopen_enable: bool = False
    python_ext: str | None = None
    linkable_alias: str | None = None

    def starlark_args(self, known_platforms: Collection[PlatformName] | None = None) -> Args:
        args: Args = self.common.starlark_args(known_platforms)
        _put(args, "proc_macro", self.proc_macro)
        _put(args, "dlopen_enable", self.dlopen_enable)
        _put(args, "python_ext", self.python_ext)
        _put(args, "linkable_alias", self.linkable_alias)
        return args


@dataclass(frozen=True)
class RustBinary:
    """A Rust binary crate (including build-script binaries)."""

    common: RustCommon

    def starlark_args(self, known_platforms: Collection[PlatformName] | None = None) -> Args:
        return self.common.starlark_args(known_platforms)


@dataclass(frozen=True)
class BuildscriptGenrule:
    """Payload shared by the rules that run a package's build script.

    ``features`` and ``cfgs`` are always emitted, even when empty.
    """

    name: Name
    buildscript_rule: RuleRef
    package_name: str
    version: str
    features: frozenset[str] = frozenset()
    cfgs: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=lambda: {})
    path_env: Mapping[str, str] = field(default_factory=lambda: {})

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _freeze_maps(self, "env", "path_env")

    def starlark_args(self) -> Args:
        args: Args = [
            ("name", self.name),
            ("buildscript_rule", self.buildscript_rule),
            ("package_name", self.package_name),
            ("version", self.version),
            ("features", self.features),
            ("cfgs", self.cfgs),
        ]
        _put(args, "env", self.env)
        _put(args, "path_env", self.path_env)
        return args


@dataclass(frozen=True)
class BuildscriptGenruleFilter:
    """Build-script invocation whose output of interest is a single file."""

    base: BuildscriptGenrule
    outfile: str

    def starlark_args(self) -> Args:
        return [*self.base.starlark_args(), ("outfile", self.outfile)]


@dataclass(frozen=True)
class BuildscriptGenruleSrcs:
    """Build-script invocation that generates source files."""

    base: BuildscriptGenrule
    files: frozenset[str] = frozenset()
    srcs: frozenset[BuckPath] = frozenset()

    def starlark_args(self) -> Args:
        args: Args = [*self.base.starlark_args(), ("files", self.files)]
        _put(args, "srcs", self.srcs)
        return args


@dataclass(frozen=True)
class CxxLibrary:
    """A C/C++ library compiled from sources shipped with a package.

    ``srcs`` and ``headers`` are always emitted, even when empty.
    """

    common: Common
    srcs: frozenset[BuckPath] = frozenset()
    headers: frozenset[BuckPath] = frozenset()
    exported_headers: SetOrMap[BuckPath] = field(default_factory=SetOrMap.of_set)
    compiler_flags: tuple[str, ...] = ()
    preprocessor_flags: tuple[str, ...] = ()
    header_namespace: str | None = None
    include_directories: tuple[BuckPath, ...] = ()
    deps: frozenset[RuleRef] = frozenset()
    preferred_linkage: str | None = None

    __hash__ = None  # type: ignore[assignment]

    def starlark_args(self) -> Args:
        args: Args = self.common.starlark_args()
        args.append(("srcs", self.srcs))
        args.append(("headers", self.headers))
        _put(args, "exported_headers", self.exported_headers)
        _put(args, "compiler_flags", self.compiler_flags)
        _put(args, "preprocessor_flags", self.preprocessor_flags)
        _put(args, "header_namespace", self.header_namespace)
        _put(args, "include_directories", self.include_directories)
        _put(args, "deps", self.deps)
        _put(args, "preferred_linkage", self.preferred_linkage)
        return args


@dataclass(frozen=True)
class PrebuiltCxxLibrary:
    """A prebuilt static C/C++ archive."""

    common: Common
    static_lib: BuckPath

    def starlark_args(self) -> Args:
        return [*self.common.starlark_args(), ("static_lib", self.static_lib)]


Rule = Union[
    Alias,
    RustBinary,
    RustLibrary,
    BuildscriptGenruleSrcs,
    BuildscriptGenruleFilter,
    CxxLibrary,
    PrebuiltCxxLibrary,
]


def rule_name(rule: Rule) -> Name:
    """Return the name of any rule variant."""
    match rule:
        case Alias(name=name):
            return name
        case RustBinary(common=RustCommon(common=Common(name=name))):
            return name
        case RustLibrary(common=RustCommon(common=Common(name=name))):
            return name
        case BuildscriptGenruleSrcs(base=BuildscriptGenrule(name=name)):
            return name
        case BuildscriptGenruleFilter(base=BuildscriptGenrule(name=name)):
            return name
        case CxxLibrary(common=Common(name=name)):
            return name
        case PrebuiltCxxLibrary(common=Common(name=name)):
            return name
        case _:
            raise TypeError(f"not a rule: {rule!r}")


def rule_sort_key(rule: Rule) -> tuple[Name, int]:
    """Return the ordering key of a rule within a build file.

    An alias sorts by the rule it points at with tier 0, so it lands
    immediately before that rule (tier 1). Aliases always point into the
    same package.

    Rules are identified by name within a build file: compare them with
    ``rule_name(a) == rule_name(b)``, not ``a == b``, which compares every
    field.
    """
    if isinstance(rule, Alias):
        return (rule.actual, 0)
    return (rule_name(rule), 1)


def sorted_rules(rules: Iterable[Rule]) -> list[Rule]:
    """Return ``rules`` in canonical build-file order."""
    return sorted(rules, key=rule_sort_key)
