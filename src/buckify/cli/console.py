# topmark:header:start
#
#   project      : Buckify
#   file         : console.py
#   file_relpath : src/buckify/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing output for the Buckify CLI.

`ClickConsole` owns stdout/stderr for commands; internal logging goes through
`buckify.config.logging` instead. Besides plain ``print``/``warn``/``error``
it knows how to render the few structured things commands show: config
diagnostics, platform attributes and predicate verdicts.

Color is decided once, from ``--no-color``, and applied through
`click.style` so that tests running under `click.testing.CliRunner` see
plain text.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TextIO

import click

if TYPE_CHECKING:
    from buckify.core.diagnostics import Diagnostic


class ClickConsole:
    """Program-output console, independent from the logger.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
        out (TextIO): Stream for program output (build-file text, listings).
        err (TextIO): Stream for diagnostics and errors.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged without color."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str) -> None:
        """Write a yellow warning line to the error stream."""
        click.echo(self.styled(text, fg="yellow"), file=self.err, color=self.enable_color)

    def error(self, text: str) -> None:
        """Write a red error line to the error stream."""
        click.echo(self.styled(text, fg="bright_red"), file=self.err, color=self.enable_color)

    def heading(self, text: str) -> None:
        """Write a bold line to the output stream."""
        self.print(self.styled(text, bold=True))

    def diagnostic(self, diag: Diagnostic) -> None:
        """Write a config diagnostic as ``[level] message`` to the error stream."""
        label: str = f"[{diag.level.value}]"
        if self.enable_color:
            label = diag.level.color(label)
        click.echo(f"{label} {diag.message}", file=self.err, color=self.enable_color)

    def attribute(self, name: str, values: Iterable[str]) -> None:
        """Write one platform attribute as ``    name = ["v", ...]``."""
        rendered: str = ", ".join(f'"{v}"' for v in values)
        self.print(f"    {name} = [{rendered}]")

    def verdict(self, name: str, result: bool) -> None:
        """Write ``name: true|false``, green when true and red when false."""
        value: str = "true" if result else "false"
        self.print(f"{name}: {self.styled(value, fg='green' if result else 'red')}")
