# topmark:header:start
#
#   project      : Buckify
#   file         : keys.py
#   file_relpath : src/buckify/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Buckify configuration.

Keys defined here are the external configuration API of ``buckify.toml``;
renaming or removing one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Buckify configuration."""

    # [buck]
    SECTION_BUCK: Final[str] = "buck"

    KEY_FILE_NAME: Final[str] = "file_name"
    KEY_GENERATED_FILE_HEADER: Final[str] = "generated_file_header"
    KEY_BUCKFILE_IMPORTS: Final[str] = "buckfile_imports"

    # [buck] rule function names
    KEY_ALIAS: Final[str] = "alias"
    KEY_HTTP_ARCHIVE: Final[str] = "http_archive"
    KEY_GIT_FETCH: Final[str] = "git_fetch"
    KEY_RUST_LIBRARY: Final[str] = "rust_library"
    KEY_RUST_BINARY: Final[str] = "rust_binary"
    KEY_CXX_LIBRARY: Final[str] = "cxx_library"
    KEY_PREBUILT_CXX_LIBRARY: Final[str] = "prebuilt_cxx_library"
    KEY_BUILDSCRIPT_BINARY: Final[str] = "buildscript_binary"
    KEY_BUILDSCRIPT_GENRULE: Final[str] = "buildscript_genrule"

    # [platform.<name>]
    SECTION_PLATFORM: Final[str] = "platform"


# String-valued [buck] keys that carry a built-in default, with that default.
BUCK_STRING_DEFAULTS: Final[dict[str, str]] = {
    Toml.KEY_FILE_NAME: "BUCK",
    Toml.KEY_GENERATED_FILE_HEADER: "",
    Toml.KEY_BUCKFILE_IMPORTS: "",
    Toml.KEY_ALIAS: "alias",
    Toml.KEY_HTTP_ARCHIVE: "http_archive",
    Toml.KEY_GIT_FETCH: "git_fetch",
    Toml.KEY_RUST_LIBRARY: "rust_library",
    Toml.KEY_RUST_BINARY: "rust_binary",
    Toml.KEY_CXX_LIBRARY: "cxx_library",
    Toml.KEY_PREBUILT_CXX_LIBRARY: "prebuilt_cxx_library",
    Toml.KEY_BUILDSCRIPT_GENRULE: "buildscript_run",
}
