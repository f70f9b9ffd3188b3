# topmark:header:start
#
#   project      : Buckify
#   file         : options.py
#   file_relpath : src/buckify/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config directory)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from buckify.cli.errors import BuckifyUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: Positive for verbose, negative for quiet, 0 for the default.

    Raises:
        BuckifyUsageError: If both flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BuckifyUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --no-color flag to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output.",
    )(f)
    return f


def config_dir_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add --config-dir, the directory holding ``buckify.toml``."""
    f = click.option(
        "--config-dir",
        "config_dir",
        type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
        default=Path("."),
        show_default=True,
        help="Directory holding buckify.toml.",
    )(f)
    return f
