# topmark:header:start
#
#   project      : Buckify
#   file         : starlark.py
#   file_relpath : src/buckify/buck/starlark.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical Starlark serializer for rule values.

Renders Python values as Starlark literals in the layout ``buildifier``
produces, so generated files need no further formatting:

- strings are double-quoted; sets are emitted sorted, maps sorted by key;
- empty containers render as ``[]``, ``{}`` or ``dict()``;
- a container holding a single one-line element stays on one line;
- anything else is split one element per line with trailing commas.

`Call` is the one reserved wrapper: it renders as a ``NAME(k = v, ...)``
call instead of a ``{"k": v}`` map literal. Build tools sort and normalize
the keyword arguments of a call, but leave the entries of a map literal
alone.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final

from buckify.buck.collection import SetOrMap
from buckify.buck.names import Name, RuleRef
from buckify.buck.paths import BuckPath
from buckify.core.errors import SerializationError

INDENT: Final[str] = "    "

_IDENT_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


@dataclass(frozen=True)
class Call:
    """A value rendered as a function call, e.g. ``dict(srcs = [...])``.

    Attributes:
        name (str): Function to call.
        args (tuple[tuple[str, Any], ...]): Keyword arguments, rendered in the given order.
    """

    name: str
    args: tuple[tuple[str, Any], ...]

    @classmethod
    def dict_of(cls, args: Iterable[tuple[str, Any]]) -> Call:
        """Return a ``dict(...)`` call over ``args``."""
        return cls("dict", tuple(args))


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted Starlark string literal."""
    out: list[str] = ['"']
    for ch in text:
        esc: str | None = _ESCAPES.get(ch)
        if esc is not None:
            out.append(esc)
        elif ord(ch) < 0x20 or ch == "\x7f":
            out.append(f"\\x{ord(ch):02x}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def _kwarg_key(key: str) -> str:
    return key if _IDENT_RE.fullmatch(key) else quote(key)


def _block(open_: str, close: str, items: list[str], depth: int) -> str:
    if not items:
        return open_ + close
    if len(items) == 1 and "\n" not in items[0]:
        return open_ + items[0] + close
    inner: str = INDENT * (depth + 1)
    body: str = "".join(f"{inner}{item},\n" for item in items)
    return f"{open_}\n{body}{INDENT * depth}{close}"


def render_value(value: Any, depth: int = 0) -> str:
    """Render ``value`` as a Starlark expression nested ``depth`` levels deep.

    Args:
        value (Any): Value to render.
        depth (int): Indentation level of the line the value starts on.

    Returns:
        str: The rendered expression.

    Raises:
        SerializationError: For values with no Starlark representation (including ``None``).
        EncodingError: If a path is not representable as UTF-8 text.
    """
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, BuckPath):
        return quote(value.to_text())
    if isinstance(value, (RuleRef, Name)):
        return quote(str(value))
    if isinstance(value, Call):
        items = [f"{_kwarg_key(k)} = {render_value(v, depth + 1)}" for k, v in value.args]
        return _block(f"{value.name}(", ")", items, depth)
    if isinstance(value, SetOrMap):
        return render_value(value.items, depth)
    if isinstance(value, Mapping):
        entries = sorted(value.items(), key=lambda kv: kv[0])
        items = [f"{quote(str(k))}: {render_value(v, depth + 1)}" for k, v in entries]
        return _block("{", "}", items, depth)
    if isinstance(value, (set, frozenset)):
        return _render_list(sorted(value), depth)
    if isinstance(value, Sequence):
        return _render_list(value, depth)
    raise SerializationError(f"cannot serialize {type(value).__name__} value: {value!r}")


def _render_list(values: Iterable[Any], depth: int) -> str:
    return _block("[", "]", [render_value(v, depth + 1) for v in values], depth)


def function_call(function: str, args: Iterable[tuple[str, Any]]) -> str:
    """Render a top-level rule invocation.

    Unlike nested calls, a rule invocation always puts every argument on its
    own line, even when there is only one.

    Args:
        function (str): Rule function name, e.g. ``rust_library`` or ``cargo.rust_library``.
        args (Iterable[tuple[str, Any]]): Ordered keyword arguments.

    Returns:
        str: The rendered call, without a trailing newline.
    """
    lines: list[str] = [f"{function}("]
    for key, value in args:
        lines.append(f"{INDENT}{_kwarg_key(key)} = {render_value(value, 1)},")
    lines.append(")")
    return "\n".join(lines)
