# topmark:header:start
#
#   project      : Buckify
#   file         : __init__.py
#   file_relpath : src/buckify/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Buckify.

The model lives in `buckify.config.model`, TOML I/O in `buckify.config.io`
and logging setup in `buckify.config.logging`. Nothing is re-exported here so
that low-level modules can import `buckify.config.logging` without pulling in
the model.
"""

from __future__ import annotations
