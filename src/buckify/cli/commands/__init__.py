# topmark:header:start
#
#   project      : Buckify
#   file         : __init__.py
#   file_relpath : src/buckify/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buckify CLI subcommands."""

from __future__ import annotations
