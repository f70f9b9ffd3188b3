# topmark:header:start
#
#   project      : Buckify
#   file         : test_platform_config.py
#   file_relpath : tests/platform/test_platform_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `PlatformConfig` attribute bags."""

from __future__ import annotations

from buckify.platform.config import PlatformConfig
from tests.conftest import LINUX, WINDOWS


def test_flags_and_values() -> None:
    assert LINUX.has("unix")
    assert LINUX.has("x86_64-unknown-linux-gnu")
    assert not LINUX.has("windows")
    assert LINUX.has_value("target_os", "linux")
    assert not LINUX.has_value("target_os", "windows")
    assert not LINUX.has_value("target_env", "gnu")


def test_behaves_as_mapping() -> None:
    assert LINUX["target_family"] == frozenset({"unix"})
    assert LINUX["unix"] == frozenset()
    assert "target_arch" in LINUX
    assert len(WINDOWS) == 6


def test_equal_configs_hash_alike() -> None:
    a = PlatformConfig.from_mapping({"target_os": ["linux"], "unix": []})
    b = PlatformConfig.from_mapping({"unix": (), "target_os": ("linux",)})
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_to_toml_dict_is_sorted() -> None:
    config = PlatformConfig.from_mapping({"b": ["z", "y"], "a": []})
    assert config.to_toml_dict() == {"a": [], "b": ["y", "z"]}
    assert list(config.to_toml_dict()) == ["a", "b"]
