# topmark:header:start
#
#   project      : Buckify
#   file         : __main__.py
#   file_relpath : src/buckify/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m buckify``."""

from __future__ import annotations

from buckify.cli.main import cli

if __name__ == "__main__":
    cli()
