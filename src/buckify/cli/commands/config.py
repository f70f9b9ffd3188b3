# topmark:header:start
#
#   project      : Buckify
#   file         : config.py
#   file_relpath : src/buckify/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buckify `config` command group.

Subcommands:
    - ``dump``: print the effective configuration as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buckify.cli.cmd_common import get_console, get_effective_verbosity, load_config
from buckify.cli.options import config_dir_option
from buckify.config.io import to_toml
from buckify.constants import CONFIG_FILE_NAME
from buckify.core.diagnostics import compute_diagnostic_stats

if TYPE_CHECKING:
    from pathlib import Path

    from buckify.cli.console import ClickConsole
    from buckify.config.model import Config
    from buckify.core.diagnostics import DiagnosticStats


@click.group(
    name="config",
    help="Inspect Buckify configuration.",
)
def config_command() -> None:
    """Group for configuration subcommands."""


@config_command.command(
    name="dump",
    help="Print the effective configuration (after prelude injection) as TOML.",
)
@config_dir_option
def config_dump_command(*, config_dir: Path) -> None:
    """Print the effective configuration as TOML.

    With ``-v`` a summary of loader diagnostics follows the document on stderr.

    Args:
        config_dir (Path): Directory holding ``buckify.toml``.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    config: Config = load_config(ctx, config_dir)

    console.print(
        to_toml(config.to_toml_dict(), comment=f"Effective {CONFIG_FILE_NAME} for {config_dir}"),
        nl=False,
    )

    if get_effective_verbosity(ctx) > 0:
        stats: DiagnosticStats = compute_diagnostic_stats(config.diagnostics)
        console.warn(
            f"{stats.total} diagnostic(s): {stats.n_error} error(s), "
            f"{stats.n_warning} warning(s), {stats.n_info} info"
        )
