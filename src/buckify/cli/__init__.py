# topmark:header:start
#
#   project      : Buckify
#   file         : __init__.py
#   file_relpath : src/buckify/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for Buckify.

The Click group lives in `buckify.cli.main`; each subcommand has its own
module under `buckify.cli.commands`.
"""

from __future__ import annotations
