# topmark:header:start
#
#   project      : Buckify
#   file         : __init__.py
#   file_relpath : src/buckify/platform/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Platform configurations and the predicate language evaluated against them."""

from __future__ import annotations

from buckify.platform.config import PlatformConfig, PlatformExpr, PlatformName
from buckify.platform.predicate import PlatformPredicate

__all__: list[str] = [
    "PlatformConfig",
    "PlatformExpr",
    "PlatformName",
    "PlatformPredicate",
]
