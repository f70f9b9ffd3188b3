# topmark:header:start
#
#   project      : Buckify
#   file         : constants.py
#   file_relpath : src/buckify/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buckify Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BUCKIFY_VERSION: str = get_version("buckify")

# Name of the project configuration file looked up in the third-party directory.
CONFIG_FILE_NAME: str = "buckify.toml"

# Bundled platform definitions inside the package `buckify.config`:
DEFAULT_PLATFORMS_PACKAGE: str = "buckify.config"
DEFAULT_PLATFORMS_NAME: str = "default_platforms.toml"

# Preamble lines injected by `read_config` when rule names are left at their defaults.
PRELUDE_BUILDSCRIPT_LOAD: str = 'load("@prelude//rust:cargo_buildscript.bzl", "buildscript_run")\n'
PRELUDE_CARGO_LOAD: str = 'load("@prelude//rust:cargo_package.bzl", "cargo")\n'
CARGO_RUST_LIBRARY: str = "cargo.rust_library"
CARGO_RUST_BINARY: str = "cargo.rust_binary"
