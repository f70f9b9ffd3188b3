# topmark:header:start
#
#   project      : Buckify
#   file         : __init__.py
#   file_relpath : src/buckify/buck/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buck rule model and Starlark emission.

Submodules:
    - `buckify.buck.paths`, `buckify.buck.names`: leaf value types.
    - `buckify.buck.rules`: the rule variants and their argument order.
    - `buckify.buck.starlark`: value serialization.
    - `buckify.buck.writer`: whole build files.
"""

from __future__ import annotations
