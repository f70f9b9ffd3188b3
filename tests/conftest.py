# topmark:header:start
#
#   project      : Buckify
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Buckify test suite.

This file sets up global fixtures, typed wrappers around pytest decorators and
small builders for rules and configurations.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `buckify.config.model.MutableConfig` (mutable), then
      `freeze()` into a `buckify.config.model.Config`.
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`,
      then `freeze()` again.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from buckify.buck.names import Name, RuleRef
from buckify.buck.paths import BuckPath
from buckify.buck.rules import Common, PlatformRustCommon, RustBinary, RustCommon, RustLibrary
from buckify.config import logging
from buckify.config.model import MutableConfig, apply_prelude_preamble
from buckify.platform.config import PlatformConfig

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from buckify.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

# The type of a decorator that returns the callable it was given.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_buckify_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Buckify's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv(logging.ENV_LOG_LEVEL, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# ---------------------------- Config builders ----------------------------

LINUX: PlatformConfig = PlatformConfig.from_mapping(
    {
        "x86_64-unknown-linux-gnu": [],
        "target_os": ["linux"],
        "target_family": ["unix"],
        "target_arch": ["x86_64"],
        "unix": [],
    }
)

MACOS: PlatformConfig = PlatformConfig.from_mapping(
    {
        "aarch64-apple-darwin": [],
        "target_os": ["macos"],
        "target_family": ["unix"],
        "target_arch": ["aarch64"],
        "unix": [],
    }
)

WINDOWS: PlatformConfig = PlatformConfig.from_mapping(
    {
        "x86_64-pc-windows-msvc": [],
        "target_os": ["windows"],
        "target_family": ["windows"],
        "target_arch": ["x86_64"],
        "target_env": ["msvc"],
        "windows": [],
    }
)


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a mutable builder from defaults with attribute overrides applied.

    Args:
        **overrides (Any): Attributes set verbatim on the builder.

    Returns:
        MutableConfig: A builder ready to be frozen or further edited.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m


def make_config(
    *,
    buck: Mapping[str, str] | None = None,
    platforms: Mapping[str, PlatformConfig] | None = None,
    preamble: bool = False,
) -> Config:
    """Return a frozen `Config` for emission tests.

    Args:
        buck (Mapping[str, str] | None): Explicit ``[buck]`` values.
        platforms (Mapping[str, PlatformConfig] | None): Platforms; defaults to a
            small linux/macos/windows trio so tests do not depend on bundled data.
        preamble (bool): Apply the prelude import preamble as `read_config` does.

    Returns:
        Config: An immutable configuration snapshot.
    """
    m: MutableConfig = make_mutable_config(
        buck_values=dict(buck or {}),
        platforms=dict(platforms)
        if platforms is not None
        else {"linux-x86_64": LINUX, "macos-arm64": MACOS, "windows-msvc": WINDOWS},
    )
    config: Config = m.freeze()
    if preamble:
        config = dataclasses.replace(config, buck=apply_prelude_preamble(config.buck))
    return config


# ---------------------------- Rule builders ----------------------------


def refs(*targets: str) -> frozenset[RuleRef]:
    """Return unconditional references to ``targets``."""
    return frozenset(RuleRef(t) for t in targets)


def paths(*values: str) -> frozenset[BuckPath]:
    """Return `BuckPath` values for ``values``."""
    return frozenset(BuckPath.of(v) for v in values)


def make_library(
    name: str = "foo-1.0",
    *,
    krate: str = "foo",
    public: bool = False,
    deps: Iterable[RuleRef] = (),
    platform: Mapping[str, PlatformRustCommon] | None = None,
    **kwargs: Any,
) -> RustLibrary:
    """Return a small `RustLibrary` with sensible defaults."""
    common = RustCommon(
        common=Common(name=Name(name), public=public),
        krate=krate,
        rootmod=BuckPath.of(f"vendor/{name}/src/lib.rs"),
        edition="2021",
        base=PlatformRustCommon(
            srcs=paths(f"vendor/{name}/src/lib.rs"),
            deps=frozenset(deps),
        ),
        platform=dict(platform or {}),
    )
    return RustLibrary(common=common, **kwargs)


def make_binary(
    name: str = "foo-1.0-build-script-build", *, krate: str = "build_script_build"
) -> RustBinary:
    """Return a small `RustBinary`."""
    return RustBinary(
        common=RustCommon(
            common=Common(name=Name(name)),
            krate=krate,
            rootmod=BuckPath.of("vendor/foo-1.0/build.rs"),
            edition="2021",
        )
    )
