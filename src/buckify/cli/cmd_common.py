# topmark:header:start
#
#   project      : Buckify
#   file         : cmd_common.py
#   file_relpath : src/buckify/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for Buckify CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buckify.cli.errors import BuckifyFileNotFoundError, from_library_error
from buckify.config.logging import get_logger
from buckify.config.model import read_config
from buckify.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from buckify.cli.console import ClickConsole
    from buckify.config.logging import BuckifyLogger
    from buckify.config.model import Config

logger: BuckifyLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context by the group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command (0 when unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def load_config(ctx: click.Context, config_dir: Path) -> Config:
    """Read the effective configuration and surface its diagnostics.

    Warnings collected while loading are echoed to stderr unless ``-q`` was
    given.

    Args:
        ctx (click.Context): Current Click context.
        config_dir (Path): Directory holding ``buckify.toml``.

    Returns:
        Config: The effective configuration.

    Raises:
        BuckifyFileNotFoundError: If ``config_dir`` does not exist.
        BuckifyConfigError: If ``buckify.toml`` exists but cannot be read or parsed.
    """
    if not config_dir.is_dir():
        raise BuckifyFileNotFoundError(f"Config directory not found: {config_dir}")
    try:
        config: Config = read_config(config_dir)
    except ConfigError as e:
        raise from_library_error(e) from e

    if get_effective_verbosity(ctx) >= 0:
        console: ClickConsole = get_console(ctx)
        for diag in config.diagnostics:
            console.diagnostic(diag)
    logger.debug("Effective config from %s: %s", config_dir, config)
    return config
