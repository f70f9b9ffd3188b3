# topmark:header:start
#
#   project      : Buckify
#   file         : test_predicate.py
#   file_relpath : tests/platform/test_predicate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for parsing and evaluating platform predicates."""

from __future__ import annotations

import pytest

from buckify.core.errors import PredicateParseError
from buckify.platform.config import PlatformConfig
from buckify.platform.predicate import AllOf, AnyOf, Flag, KeyValue, Not, PlatformPredicate
from tests.conftest import LINUX, MACOS, WINDOWS, parametrize


def _holds(expr: str, config: PlatformConfig) -> bool:
    return PlatformPredicate.parse(expr).eval(config)


@parametrize(
    "expr, linux, macos, windows",
    [
        ('cfg(target_os = "linux")', True, False, False),
        ("cfg(unix)", True, True, False),
        ("cfg(not(windows))", True, True, False),
        ('cfg(any(target_os = "macos", target_env = "msvc"))', False, True, True),
        ('cfg(all(unix, target_arch = "x86_64",))', True, False, False),
        ("cfg(all())", True, True, True),
        ("cfg(any())", False, False, False),
        ("cfg(true)", True, True, True),
        ("cfg(false)", False, False, False),
        ('cfg(target_env = "gnu")', False, False, False),
        ("x86_64-unknown-linux-gnu", True, False, False),
        ("x86_64-pc-windows-msvc", False, False, True),
        ("  cfg( unix )  ", True, True, False),
        ("cfg (unix)", True, True, False),
    ],
)
def test_eval_on_platforms(expr: str, linux: bool, macos: bool, windows: bool) -> None:
    assert (_holds(expr, LINUX), _holds(expr, MACOS), _holds(expr, WINDOWS)) == (
        linux,
        macos,
        windows,
    )


def test_parse_tree_shape() -> None:
    pred = PlatformPredicate.parse('cfg(all(unix, not(target_os = "macos")))')
    assert pred.root == AllOf((Flag("unix"), Not(KeyValue("target_os", "macos"))))
    assert PlatformPredicate.parse("cfg(any())").root == AnyOf(())


def test_string_escapes_are_decoded() -> None:
    pred = PlatformPredicate.parse(r'cfg(feature = "a\"b\\c")')
    assert pred.root == KeyValue("feature", 'a"b\\c')
    config = PlatformConfig.from_mapping({"feature": ['a"b\\c']})
    assert pred.eval(config)


def test_parse_is_memoized() -> None:
    assert PlatformPredicate.parse("cfg(unix)") is PlatformPredicate.parse("cfg(unix)")


@parametrize(
    "expr, offending, position, reason",
    [
        ("", "", 0, "empty platform expression"),
        ("cfg(unix", "cfg(unix", 0, "unbalanced 'cfg(...)'"),
        ("foo bar", "foo bar", 0, "expected 'cfg(...)' or a target triple"),
        ("cfg(foo = )", "", 10, "expected string"),
        ("cfg(unix linux)", "linux", 9, "unexpected trailing input"),
        ("cfg(unix @)", "@", 9, "unexpected character"),
        ("cfg(all(unix linux))", "linux", 13, "expected ',' or ')'"),
        ("cfg()", "", 4, "expected predicate"),
        (r'cfg(x = "a\q")', "\\q", 10, "unsupported string escape"),
    ],
)
def test_parse_errors_report_location(
    expr: str, offending: str, position: int, reason: str
) -> None:
    with pytest.raises(PredicateParseError) as exc_info:
        PlatformPredicate.parse(expr)

    err: PredicateParseError = exc_info.value
    assert err.expr == expr
    assert err.offending == offending
    assert err.position == position
    assert err.reason == reason
    assert repr(expr) in str(err)


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        PlatformPredicate.parse("cfg(=)")
