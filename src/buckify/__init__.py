# topmark:header:start
#
#   project      : Buckify
#   file         : __init__.py
#   file_relpath : src/buckify/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buckify package.

Buckify turns a resolved description of third-party packages into Buck build
files: it models the rules, evaluates platform predicates, and serializes
everything deterministically as Starlark.
"""

from __future__ import annotations
