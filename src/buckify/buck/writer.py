# topmark:header:start
#
#   project      : Buckify
#   file         : writer.py
#   file_relpath : src/buckify/buck/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build-file writer.

This module is the canonical place where rules become bytes. A build file
consists of:

1. the configured generated-file header, followed by a newline when
   non-empty,
2. the configured imports, followed by a newline when non-empty,
3. every rule in the order received, separated by blank lines, each
   terminated by a newline.

The writer neither sorts nor deduplicates; pass the rules through
`buckify.buck.rules.sorted_rules` first for canonical order.

Sinks
-----
- Any object with ``write(bytes)`` (`ByteSink`): ``write_buckfile``.
- A filesystem path: ``write_buckfile_to_path`` writes atomically through a
  temporary file in the same directory.

Errors raised by the sink propagate unchanged. Each rule is rendered
completely before any of its bytes reach the sink, so serialization failures
never leave a partial rule behind.
"""

from __future__ import annotations

import io
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from buckify.buck.rules import (
    Alias,
    BuildscriptGenruleFilter,
    BuildscriptGenruleSrcs,
    CxxLibrary,
    PrebuiltCxxLibrary,
    RustBinary,
    RustLibrary,
)
from buckify.buck.starlark import function_call
from buckify.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from buckify.buck.rules import Args, Rule
    from buckify.config.logging import BuckifyLogger
    from buckify.config.model import BuckConfig, Config

logger: BuckifyLogger = get_logger(__name__)


class ByteSink(Protocol):
    """Protocol for byte sinks accepted by `write_buckfile`."""

    def write(self, data: bytes, /) -> object:
        """Write ``data`` to the sink."""
        ...


def rule_function(buck: BuckConfig, rule: Rule) -> str:
    """Return the configured Starlark function name for a rule variant.

    Args:
        buck (BuckConfig): Emission settings.
        rule (Rule): The rule to emit.

    Returns:
        str: Function name, e.g. ``rust_library`` or ``cargo.rust_library``.
    """
    match rule:
        case Alias():
            return buck.alias.value
        case RustLibrary():
            return buck.rust_library.value
        case RustBinary():
            return buck.rust_binary.value
        case BuildscriptGenruleFilter() | BuildscriptGenruleSrcs():
            return buck.buildscript_genrule.value
        case CxxLibrary():
            return buck.cxx_library.value
        case PrebuiltCxxLibrary():
            return buck.prebuilt_cxx_library.value
        case _:
            raise TypeError(f"not a rule: {rule!r}")


def _rule_args(config: Config, rule: Rule) -> Args:
    if isinstance(rule, (RustLibrary, RustBinary)):
        return rule.starlark_args(known_platforms=config.platforms.keys())
    return rule.starlark_args()


def render_rule(config: Config, rule: Rule) -> str:
    """Render a single rule invocation, terminated by a newline.

    Args:
        config (Config): Effective configuration.
        rule (Rule): The rule to render.

    Returns:
        str: The rule text.

    Raises:
        SerializationError: If a field value cannot be rendered.
        EncodingError: If a path cannot be represented as UTF-8.
    """
    return function_call(rule_function(config.buck, rule), _rule_args(config, rule)) + "\n"


def write_buckfile(config: Config, rules: Iterable[Rule], sink: ByteSink) -> int:
    """Write a complete build file to ``sink``.

    Args:
        config (Config): Effective configuration (header, imports, function names).
        rules (Iterable[Rule]): Rules of one package, already in emission order.
        sink (ByteSink): Binary destination.

    Returns:
        int: Number of bytes written.
    """
    written: int = 0

    def _emit(text: str) -> None:
        nonlocal written
        data: bytes = text.encode("utf-8")
        sink.write(data)
        written += len(data)

    header: str = config.buck.generated_file_header.value
    if header:
        _emit(header)
        _emit("\n")

    imports: str = config.buck.buckfile_imports.value
    if imports:
        _emit(imports)
        _emit("\n")

    count: int = 0
    for idx, rule in enumerate(rules):
        text: str = render_rule(config, rule)
        if idx > 0:
            text = "\n" + text
        _emit(text)
        count += 1

    logger.debug("Wrote %d rules (%d bytes)", count, written)
    return written


def write_buckfile_to_path(config: Config, rules: Iterable[Rule], path: Path) -> int:
    """Write a build file atomically to ``path``.

    The content is rendered into memory first, then written to a temporary file
    next to ``path`` and moved into place with `os.replace`.

    Args:
        config (Config): Effective configuration.
        rules (Iterable[Rule]): Rules of one package.
        path (Path): Destination, typically ``<package dir>/<buck.file_name>``.

    Returns:
        int: Number of bytes written.
    """
    buf = io.BytesIO()
    write_buckfile(config, rules, buf)
    data: bytes = buf.getvalue()

    target: Path = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug("Wrote %d bytes to %s", len(data), target)
    return len(data)
