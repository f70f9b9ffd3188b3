# topmark:header:start
#
#   project      : Buckify
#   file         : predicate.py
#   file_relpath : src/buckify/platform/predicate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Platform predicate language.

A platform expression is either ``cfg(<pred>)`` or a bare target triple such
as ``x86_64-unknown-linux-gnu``. Inside ``cfg(...)``::

    pred   := all(list) | any(list) | not(pred) | true | false
            | ident = "string" | ident
    list   := [ pred { , pred } [ , ] ]

Evaluation against a `buckify.platform.config.PlatformConfig`:

- ``ident`` holds when the attribute exists (``unix``, or a bare triple).
- ``ident = "v"`` holds when the attribute's value set contains ``v``.
- ``all()`` is always true and ``any()`` always false.

Parsing is memoized per expression string since the same handful of
predicates are evaluated for every dependency edge on every platform.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, Union

from buckify.config.logging import BuckifyLogger, get_logger
from buckify.core.errors import PredicateParseError

if TYPE_CHECKING:
    from buckify.platform.config import PlatformConfig

logger: BuckifyLogger = get_logger(__name__)


class _Tok(Enum):
    IDENT = "identifier"
    STRING = "string"
    LPAREN = "'('"
    RPAREN = "')'"
    COMMA = "','"
    EQ = "'='"
    END = "end of input"


_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    (?P<ws>\s+)
    | (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
    | (?P<string>"(?:[^"\\]|\\.)*")
    | (?P<lparen>\()
    | (?P<rparen>\))
    | (?P<comma>,)
    | (?P<eq>=)
    """,
    re.VERBOSE,
)

_GROUP_TO_TOK: Final[dict[str, _Tok]] = {
    "ident": _Tok.IDENT,
    "string": _Tok.STRING,
    "lparen": _Tok.LPAREN,
    "rparen": _Tok.RPAREN,
    "comma": _Tok.COMMA,
    "eq": _Tok.EQ,
}

_STRING_ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

# A bare target triple: letters, digits, '_', '-' and '.'.
_TRIPLE_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_.\-]+")


@dataclass(frozen=True, slots=True)
class _Token:
    kind: _Tok
    text: str
    pos: int


# ---------------------------- AST ----------------------------


@dataclass(frozen=True, slots=True)
class Const:
    """Ground atom: always ``value``."""

    value: bool


@dataclass(frozen=True, slots=True)
class Flag:
    """``key``: true when the attribute is present."""

    key: str


@dataclass(frozen=True, slots=True)
class KeyValue:
    """``key = "value"``: true when the attribute holds ``value``."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class AllOf:
    """Conjunction; true when empty."""

    preds: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class AnyOf:
    """Disjunction; false when empty."""

    preds: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Not:
    """Negation."""

    pred: Node


Node = Union[Const, Flag, KeyValue, AllOf, AnyOf, Not]


def _eval_node(node: Node, config: PlatformConfig) -> bool:
    if isinstance(node, Const):
        return node.value
    if isinstance(node, Flag):
        return config.has(node.key)
    if isinstance(node, KeyValue):
        return config.has_value(node.key, node.value)
    if isinstance(node, AllOf):
        return all(_eval_node(p, config) for p in node.preds)
    if isinstance(node, AnyOf):
        return any(_eval_node(p, config) for p in node.preds)
    if isinstance(node, Not):
        return not _eval_node(node.pred, config)
    raise TypeError(f"unknown predicate node: {node!r}")


# --------------------------- Parser ---------------------------


def _tokenize(expr: str, start: int, end: int) -> list[_Token]:
    tokens: list[_Token] = []
    pos: int = start
    while pos < end:
        m: re.Match[str] | None = _TOKEN_RE.match(expr, pos, end)
        if m is None:
            raise PredicateParseError(expr, expr[pos:end], pos, "unexpected character")
        group: str | None = m.lastgroup
        if group is not None and group != "ws":
            tokens.append(_Token(_GROUP_TO_TOK[group], m.group(), pos))
        pos = m.end()
    tokens.append(_Token(_Tok.END, "", end))
    return tokens


def _unquote(expr: str, tok: _Token) -> str:
    body: str = tok.text[1:-1]
    out: list[str] = []
    i: int = 0
    while i < len(body):
        ch: str = body[i]
        if ch == "\\":
            esc: str = body[i + 1]
            if esc not in _STRING_ESCAPES:
                raise PredicateParseError(
                    expr, "\\" + esc, tok.pos + 1 + i, "unsupported string escape"
                )
            out.append(_STRING_ESCAPES[esc])
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


class _Parser:
    """Recursive-descent parser over the tokens of one ``cfg(...)`` body."""

    def __init__(self, expr: str, tokens: list[_Token]) -> None:
        self.expr = expr
        self.tokens = tokens
        self.idx = 0

    def _peek(self) -> _Token:
        return self.tokens[self.idx]

    def _next(self) -> _Token:
        tok = self.tokens[self.idx]
        if tok.kind is not _Tok.END:
            self.idx += 1
        return tok

    def _fail(self, tok: _Token, reason: str) -> PredicateParseError:
        return PredicateParseError(self.expr, tok.text, tok.pos, reason)

    def _expect(self, kind: _Tok) -> _Token:
        tok = self._next()
        if tok.kind is not kind:
            raise self._fail(tok, f"expected {kind.value}")
        return tok

    def parse_all(self) -> Node:
        node: Node = self.parse_pred()
        tok: _Token = self._peek()
        if tok.kind is not _Tok.END:
            raise self._fail(tok, "unexpected trailing input")
        return node

    def parse_pred(self) -> Node:
        tok: _Token = self._expect_ident()
        name: str = tok.text
        nxt: _Token = self._peek()

        if name in ("all", "any") and nxt.kind is _Tok.LPAREN:
            self._next()
            preds: tuple[Node, ...] = self._parse_list()
            return AllOf(preds) if name == "all" else AnyOf(preds)
        if name == "not" and nxt.kind is _Tok.LPAREN:
            self._next()
            inner: Node = self.parse_pred()
            self._expect(_Tok.RPAREN)
            return Not(inner)
        if nxt.kind is _Tok.EQ:
            self._next()
            value_tok: _Token = self._expect(_Tok.STRING)
            return KeyValue(name, _unquote(self.expr, value_tok))
        if name == "true":
            return Const(True)
        if name == "false":
            return Const(False)
        return Flag(name)

    def _expect_ident(self) -> _Token:
        tok = self._next()
        if tok.kind is not _Tok.IDENT:
            raise self._fail(tok, "expected predicate")
        return tok

    def _parse_list(self) -> tuple[Node, ...]:
        preds: list[Node] = []
        while True:
            if self._peek().kind is _Tok.RPAREN:
                self._next()
                return tuple(preds)
            preds.append(self.parse_pred())
            tok: _Token = self._next()
            if tok.kind is _Tok.RPAREN:
                return tuple(preds)
            if tok.kind is not _Tok.COMMA:
                raise self._fail(tok, "expected ',' or ')'")


@dataclass(frozen=True, slots=True)
class PlatformPredicate:
    """A parsed platform expression.

    Attributes:
        expr (str): The source expression.
        root (Node): The parsed predicate tree.
    """

    expr: str
    root: Node

    @staticmethod
    def parse(expr: str) -> PlatformPredicate:
        """Parse a platform expression.

        Args:
            expr (str): ``cfg(...)`` expression or bare target triple.

        Returns:
            PlatformPredicate: The parsed predicate.

        Raises:
            PredicateParseError: If ``expr`` is not well formed.
        """
        return _parse_cached(expr)

    def eval(self, config: PlatformConfig) -> bool:
        """Evaluate this predicate against a platform's attributes."""
        return _eval_node(self.root, config)


@functools.lru_cache(maxsize=1024)
def _parse_cached(expr: str) -> PlatformPredicate:
    text: str = expr.strip()
    offset: int = len(expr) - len(expr.lstrip())
    if not text:
        raise PredicateParseError(expr, "", len(expr), "empty platform expression")

    if text.startswith("cfg(") or text.startswith("cfg "):
        open_idx: int = expr.index("(", offset) if "(" in expr else -1
        if open_idx < 0 or not text.endswith(")"):
            raise PredicateParseError(expr, expr[offset:], offset, "unbalanced 'cfg(...)'")
        close_idx: int = offset + len(text) - 1
        if expr[offset + 3 : open_idx].strip():
            raise PredicateParseError(expr, expr[offset:], offset, "expected 'cfg('")
        tokens: list[_Token] = _tokenize(expr, open_idx + 1, close_idx)
        root: Node = _Parser(expr, tokens).parse_all()
    elif _TRIPLE_RE.fullmatch(text):
        root = Flag(text)
    else:
        raise PredicateParseError(
            expr, expr[offset:], offset, "expected 'cfg(...)' or a target triple"
        )

    logger.trace("Parsed platform predicate %r -> %r", expr, root)
    return PlatformPredicate(expr, root)
