# topmark:header:start
#
#   project      : Buckify
#   file         : version.py
#   file_relpath : src/buckify/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buckify `version` command.

Prints the current Buckify version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buckify.cli.cmd_common import get_console, get_effective_verbosity
from buckify.constants import BUCKIFY_VERSION

if TYPE_CHECKING:
    from buckify.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Buckify.",
)
def version_command() -> None:
    """Show the current version of Buckify."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Buckify version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(BUCKIFY_VERSION, bold=True)}")
    else:
        console.print(console.styled(BUCKIFY_VERSION, bold=True))
