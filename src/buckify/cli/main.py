# topmark:header:start
#
#   project      : Buckify
#   file         : main.py
#   file_relpath : src/buckify/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buckify CLI entry point.

Group-level options are initialized once and placed into ``ctx.obj``:

- ``verbosity_level``: program-output verbosity from ``-v``/``-q``.
- ``log_level``: internal logging level from ``BUCKIFY_LOG_LEVEL``.
- ``console``: the `ClickConsole` used for all user-facing output.
"""

from __future__ import annotations

import click

from buckify.cli.commands.config import config_command
from buckify.cli.commands.eval import eval_command
from buckify.cli.commands.platforms import platforms_command
from buckify.cli.commands.version import version_command
from buckify.cli.console import ClickConsole
from buckify.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from buckify.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging level comes from the environment only; -v/-q shape program output.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env, color=not no_color)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Buckify: generate Buck build files for third-party packages.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the Buckify CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(platforms_command)

cli.add_command(eval_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
