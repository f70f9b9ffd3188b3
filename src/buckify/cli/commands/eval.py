# topmark:header:start
#
#   project      : Buckify
#   file         : eval.py
#   file_relpath : src/buckify/cli/commands/eval.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buckify `eval` command.

Evaluates a platform predicate against the configured platforms and prints
one ``name: true|false`` line per platform, in platform-name order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buckify.cli.cmd_common import get_console, load_config
from buckify.cli.errors import BuckifyUsageError, from_library_error
from buckify.cli.options import config_dir_option
from buckify.config.logging import get_logger
from buckify.core.errors import PredicateParseError
from buckify.platform.predicate import PlatformPredicate

if TYPE_CHECKING:
    from pathlib import Path

    from buckify.cli.console import ClickConsole
    from buckify.config.logging import BuckifyLogger
    from buckify.config.model import Config

logger: BuckifyLogger = get_logger(__name__)


@click.command(
    name="eval",
    help="Evaluate a platform predicate against configured platforms.",
)
@click.argument("expr", metavar="EXPR")
@click.option(
    "--platform",
    "platform_names",
    multiple=True,
    metavar="NAME",
    help="Only evaluate against this platform (repeatable).",
)
@config_dir_option
def eval_command(*, expr: str, platform_names: tuple[str, ...], config_dir: Path) -> None:
    """Evaluate ``EXPR`` against each configured (or each named) platform.

    Args:
        expr (str): ``cfg(...)`` expression or bare target triple.
        platform_names (tuple[str, ...]): Restrict evaluation to these platforms.
        config_dir (Path): Directory holding ``buckify.toml``.

    Raises:
        BuckifyDataError: If ``expr`` does not parse.
        BuckifyUsageError: If a requested platform is not configured.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    try:
        predicate: PlatformPredicate = PlatformPredicate.parse(expr)
    except PredicateParseError as e:
        raise from_library_error(e) from e

    config: Config = load_config(ctx, config_dir)

    unknown: list[str] = [n for n in platform_names if n not in config.platforms]
    if unknown:
        raise BuckifyUsageError(f"Unknown platform(s): {', '.join(sorted(unknown))}")

    names: list[str] = sorted(set(platform_names) if platform_names else config.platforms)
    for name in names:
        result: bool = predicate.eval(config.platforms[name])
        logger.debug("%s on %s -> %s", expr, name, result)
        console.verdict(name, result)
