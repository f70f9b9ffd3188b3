# topmark:header:start
#
#   project      : Buckify
#   file         : strategies_buckify.py
#   file_relpath : tests/strategies_buckify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating Buckify rules.

The generated rules stay within the shapes a vendoring tool would produce:
package-style names, package-relative paths and a handful of platforms.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from buckify.buck.names import Name, RuleRef
from buckify.buck.paths import BuckPath
from buckify.buck.rules import Alias, Common, PlatformRustCommon, RustCommon, RustLibrary

Draw = Callable[[st.SearchStrategy[Any]], Any]

PLATFORM_NAMES: tuple[str, ...] = ("linux-x86_64", "macos-arm64", "windows-msvc")

s_ident: st.SearchStrategy[str] = st.from_regex(r"[a-z][a-z0-9_]{0,11}", fullmatch=True)

s_version: st.SearchStrategy[str] = st.builds(
    lambda a, b, c: f"{a}.{b}.{c}",  # pyright: ignore[reportUnknownLambdaType]
    st.integers(0, 9),
    st.integers(0, 20),
    st.integers(0, 20),
)

s_segment: st.SearchStrategy[str] = st.from_regex(
    r"[A-Za-z0-9_][A-Za-z0-9_.-]{0,9}", fullmatch=True
)

s_relpath: st.SearchStrategy[str] = st.lists(s_segment, min_size=1, max_size=4).map("/".join)

s_string: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)), max_size=20
)


@st.composite
def s_package_name(draw: Draw) -> str:
    """Return a ``<crate>-<version>`` rule name."""
    return f"{draw(s_ident)}-{draw(s_version)}"


@st.composite
def s_rule_ref(draw: Draw) -> RuleRef:
    """Return a reference to a rule in some package."""
    return RuleRef(f"//third-party:{draw(s_package_name())}")


@st.composite
def s_platform_common(draw: Draw) -> PlatformRustCommon:
    """Return a possibly empty set of code-build attributes."""
    return PlatformRustCommon(
        srcs=frozenset(BuckPath.of(p) for p in draw(st.lists(s_relpath, max_size=3))),
        rustc_flags=tuple(draw(st.lists(s_string, max_size=2))),
        features=frozenset(draw(st.lists(s_ident, max_size=3))),
        deps=frozenset(draw(st.lists(s_rule_ref(), max_size=3))),
        env=draw(st.dictionaries(s_ident.map(str.upper), s_string, max_size=2)),
    )


@st.composite
def s_rust_library(draw: Draw, name: str | None = None) -> RustLibrary:
    """Return a `RustLibrary` with optional per-platform overrides."""
    pkg: str = name if name is not None else draw(s_package_name())
    platform: dict[str, PlatformRustCommon] = draw(
        st.dictionaries(st.sampled_from(PLATFORM_NAMES), s_platform_common(), max_size=2)
    )
    return RustLibrary(
        common=RustCommon(
            common=Common(name=Name(pkg), public=draw(st.booleans())),
            krate=pkg.split("-", 1)[0],
            rootmod=BuckPath.of(draw(s_relpath)),
            edition=draw(st.sampled_from(("2015", "2018", "2021"))),
            base=draw(s_platform_common()),
            platform=platform,
        ),
        proc_macro=draw(st.booleans()),
    )


@st.composite
def s_package_rules(draw: Draw) -> list[RustLibrary | Alias]:
    """Return libraries with unique names, some of them fronted by an alias."""
    names: list[str] = draw(st.lists(s_package_name(), min_size=1, max_size=4, unique=True))
    rules: list[RustLibrary | Alias] = []
    for name in names:
        rules.append(draw(s_rust_library(name)))
        if draw(st.booleans()):
            rules.append(Alias(name=Name(name.split("-", 1)[0] + "_alias"), actual=Name(name)))
    return rules
