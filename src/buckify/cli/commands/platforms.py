# topmark:header:start
#
#   project      : Buckify
#   file         : platforms.py
#   file_relpath : src/buckify/cli/commands/platforms.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buckify `platforms` command.

Lists the configured platforms. Each platform is followed by its attributes,
one per line, as ``name = [values]``; boolean attributes show ``[]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buckify.cli.cmd_common import get_console, get_effective_verbosity, load_config
from buckify.cli.options import config_dir_option

if TYPE_CHECKING:
    from pathlib import Path

    from buckify.cli.console import ClickConsole
    from buckify.config.model import Config


@click.command(
    name="platforms",
    help="List configured platforms and their attributes.",
)
@config_dir_option
def platforms_command(*, config_dir: Path) -> None:
    """List configured platforms and their attributes.

    With ``-q`` only the platform names are printed.

    Args:
        config_dir (Path): Directory holding ``buckify.toml``.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    config: Config = load_config(ctx, config_dir)
    names_only: bool = get_effective_verbosity(ctx) < 0

    for name in sorted(config.platforms):
        console.heading(name)
        if names_only:
            continue
        for attr, values in config.platforms[name].to_toml_dict().items():
            console.attribute(attr, values)
