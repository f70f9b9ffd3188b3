# topmark:header:start
#
#   project      : Buckify
#   file         : model.py
#   file_relpath : src/buckify/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `DefaultableString`: a string that remembers whether it is still the
      built-in default.
    - `BuckConfig`: the immutable emission settings (file name, header, rule
      function names).
    - `Config`: an immutable runtime snapshot used by the writer.
    - `MutableConfig`: a mutable builder used while loading and merging; it
      can be frozen into `Config` and thawed back for edits.
    - `read_config`: load ``buckify.toml`` from a directory and apply the
      prelude import preamble.

Scope:
    - *In scope*: data shapes, defaulting rules at the field level, merge policy
      (`MutableConfig.merge_with`), and freeze/thaw mechanics.
    - *Out of scope*: TOML parsing and rendering, which live in
      `buckify.config.io`.

Immutability:
    - `Config` stores tuples and read-only mappings and is ``frozen=True``.
      Use `Config.thaw` → edit → `MutableConfig.freeze` for safe updates.

Defaults:
    - The emitter never consults `DefaultableString.is_default`; only
      `read_config` does, to decide which prelude imports to inject.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from buckify.config.io import TableReader, load_default_platforms_dict, load_toml_dict
from buckify.config.keys import BUCK_STRING_DEFAULTS, Toml
from buckify.config.logging import get_logger
from buckify.constants import (
    CARGO_RUST_BINARY,
    CARGO_RUST_LIBRARY,
    CONFIG_FILE_NAME,
    PRELUDE_BUILDSCRIPT_LOAD,
    PRELUDE_CARGO_LOAD,
)
from buckify.core.diagnostics import Diagnostic, DiagnosticLog
from buckify.platform.config import PlatformConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    from buckify.config.io import TomlTable
    from buckify.config.logging import BuckifyLogger
    from buckify.platform.config import PlatformName

logger: BuckifyLogger = get_logger(__name__)


# ------------------ Value objects ------------------


@dataclass(frozen=True, slots=True)
class DefaultableString:
    """A string setting that records whether it still holds its built-in default.

    Values read from a config file always have ``is_default=False``, even when
    they are textually identical to the default.

    Attributes:
        value (str): The effective string.
        is_default (bool): True when ``value`` was not set explicitly.
    """

    value: str
    is_default: bool = False

    @classmethod
    def default(cls, value: str) -> DefaultableString:
        """Return a defaulted instance holding ``value``."""
        return cls(value, is_default=True)

    def __str__(self) -> str:
        return self.value


def _default_field(key: str) -> DefaultableString:
    return field(default_factory=lambda: DefaultableString.default(BUCK_STRING_DEFAULTS[key]))


@dataclass(frozen=True, slots=True)
class BuckConfig:
    """Emission settings for generated build files.

    Every string setting is a `DefaultableString`; ``buildscript_binary`` has
    no default and is only used by callers that synthesize build-script
    binaries.
    """

    file_name: DefaultableString = _default_field(Toml.KEY_FILE_NAME)
    generated_file_header: DefaultableString = _default_field(Toml.KEY_GENERATED_FILE_HEADER)
    buckfile_imports: DefaultableString = _default_field(Toml.KEY_BUCKFILE_IMPORTS)
    alias: DefaultableString = _default_field(Toml.KEY_ALIAS)
    http_archive: DefaultableString = _default_field(Toml.KEY_HTTP_ARCHIVE)
    git_fetch: DefaultableString = _default_field(Toml.KEY_GIT_FETCH)
    rust_library: DefaultableString = _default_field(Toml.KEY_RUST_LIBRARY)
    rust_binary: DefaultableString = _default_field(Toml.KEY_RUST_BINARY)
    cxx_library: DefaultableString = _default_field(Toml.KEY_CXX_LIBRARY)
    prebuilt_cxx_library: DefaultableString = _default_field(Toml.KEY_PREBUILT_CXX_LIBRARY)
    buildscript_genrule: DefaultableString = _default_field(Toml.KEY_BUILDSCRIPT_GENRULE)
    buildscript_binary: str | None = None

    @classmethod
    def from_values(
        cls, values: Mapping[str, str], buildscript_binary: str | None = None
    ) -> BuckConfig:
        """Build a config where every key in ``values`` is explicitly set.

        Keys absent from ``values`` keep their defaults. Unknown keys are ignored.
        """
        overrides: dict[str, DefaultableString] = {
            k: DefaultableString(v) for k, v in values.items() if k in BUCK_STRING_DEFAULTS
        }
        return cls(buildscript_binary=buildscript_binary, **overrides)

    def explicit_values(self) -> dict[str, str]:
        """Return the string settings that were set explicitly."""
        out: dict[str, str] = {}
        for key in BUCK_STRING_DEFAULTS:
            ds: DefaultableString = getattr(self, key)
            if not ds.is_default:
                out[key] = ds.value
        return out

    def to_toml_dict(self) -> TomlTable:
        """Return the effective settings as a TOML-serializable ``[buck]`` table."""
        table: TomlTable = {key: getattr(self, key).value for key in BUCK_STRING_DEFAULTS}
        table[Toml.KEY_BUILDSCRIPT_BINARY] = self.buildscript_binary
        return table


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Buckify.

    Attributes:
        config_path (Path | None): Directory the configuration was read from.
        config_files (tuple[Path, ...]): Files that contributed to this config.
        buck (BuckConfig): Emission settings.
        platforms (Mapping[PlatformName, PlatformConfig]): Platform attribute bags.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading.
    """

    config_path: Path | None
    config_files: tuple[Path, ...]
    buck: BuckConfig
    platforms: Mapping[PlatformName, PlatformConfig]
    diagnostics: tuple[Diagnostic, ...]

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Returns:
            TomlTable: ``[buck]`` and ``[platform.<name>]`` tables, sorted by platform.
        """
        return {
            Toml.SECTION_BUCK: self.buck.to_toml_dict(),
            Toml.SECTION_PLATFORM: {
                name: self.platforms[name].to_toml_dict() for name in sorted(self.platforms)
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            config_path=self.config_path,
            config_files=list(self.config_files),
            buck_values=self.buck.explicit_values(),
            buildscript_binary=self.buck.buildscript_binary,
            platforms=dict(self.platforms),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during loading and merging.

    Only explicitly-set ``[buck]`` keys are stored in ``buck_values`` so that
    `freeze` can tell them apart from defaults. ``platforms=None`` means
    "not configured": the bundled default platforms are used on freeze.
    """

    config_path: Path | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    buck_values: dict[str, str] = field(default_factory=lambda: {})
    buildscript_binary: str | None = None
    platforms: dict[PlatformName, PlatformConfig] | None = None

    # Collected diagnostics while loading / merging.
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        platforms: dict[PlatformName, PlatformConfig]
        if self.platforms is None:
            platforms = _default_platforms()
        else:
            platforms = dict(self.platforms)

        return Config(
            config_path=self.config_path,
            config_files=tuple(self.config_files),
            buck=BuckConfig.from_values(self.buck_values, self.buildscript_binary),
            platforms=MappingProxyType(platforms),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding only built-in defaults."""
        return cls()

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load configuration from a single TOML file.

        A missing file yields the defaults.

        Args:
            path (Path): Path to ``buckify.toml``.

        Returns:
            MutableConfig: The parsed configuration.

        Raises:
            ConfigError: If the file exists but is unreadable or not valid TOML.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable | None = load_toml_dict(path)
        if toml_data is None:
            draft: MutableConfig = cls.from_defaults()
            draft.config_path = path.parent
            return draft

        draft = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Shape problems never raise: unknown keys and mistyped values are logged
        and recorded as warnings, then ignored.

        Args:
            data (TomlTable): The parsed TOML data.
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting MutableConfig instance.
        """
        draft: MutableConfig = cls(
            config_path=config_file.parent if config_file else None,
            config_files=[config_file] if config_file else [],
        )
        diags: DiagnosticLog = draft.diagnostics

        for key in data:
            if key not in (Toml.SECTION_BUCK, Toml.SECTION_PLATFORM):
                logger.warning("Ignoring unknown top-level config key: %s", key)
                diags.add_warning(f"Ignoring unknown top-level config key: {key}")

        root = TableReader(data, "", diags)

        # ----- [buck] -----
        buck: TableReader | None = root.child(Toml.SECTION_BUCK)
        if buck is not None:
            logger.trace("TOML [buck]: %s", buck.table)
            buck.warn_unknown({*BUCK_STRING_DEFAULTS, Toml.KEY_BUILDSCRIPT_BINARY})
            for key in buck:
                value: str | None = buck.string(key)
                if value is None:
                    continue
                if key == Toml.KEY_BUILDSCRIPT_BINARY:
                    draft.buildscript_binary = value
                elif key in BUCK_STRING_DEFAULTS:
                    draft.buck_values[key] = value

        # ----- [platform.<name>] -----
        if Toml.SECTION_PLATFORM in data:
            section: TableReader | None = root.child(Toml.SECTION_PLATFORM)
            draft.platforms = _platforms_from_toml(section) if section is not None else {}

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values from ``other`` override this draft.

        ``[buck]`` keys merge key-wise (last wins). A configured platform set in
        ``other`` replaces this draft's platforms wholesale.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        merged_diags: DiagnosticLog = DiagnosticLog.from_iterable(self.diagnostics)
        merged_diags.extend(other.diagnostics)
        return MutableConfig(
            config_path=other.config_path if other.config_path is not None else self.config_path,
            config_files=self.config_files + other.config_files,
            buck_values={**self.buck_values, **other.buck_values},
            buildscript_binary=other.buildscript_binary
            if other.buildscript_binary is not None
            else self.buildscript_binary,
            platforms=dict(other.platforms)
            if other.platforms is not None
            else (dict(self.platforms) if self.platforms is not None else None),
            diagnostics=merged_diags,
        )


def _platforms_from_toml(section: TableReader) -> dict[PlatformName, PlatformConfig]:
    platforms: dict[PlatformName, PlatformConfig] = {}
    for name in section:
        platform: TableReader | None = section.child(name)
        if platform is None:
            continue
        attrs: dict[str, list[str]] = {}
        for attr in platform:
            values: list[str] | None = platform.string_list(attr)
            if values is not None:
                attrs[attr] = values
        platforms[str(name)] = PlatformConfig.from_mapping(attrs)
    return platforms


def _default_platforms() -> dict[PlatformName, PlatformConfig]:
    raw: TomlTable = load_default_platforms_dict()
    section: TableReader | None = TableReader(raw, "", DiagnosticLog()).child(
        Toml.SECTION_PLATFORM
    )
    return _platforms_from_toml(section) if section is not None else {}


def apply_prelude_preamble(buck: BuckConfig) -> BuckConfig:
    """Fill in prelude imports so default rule names resolve.

    When ``buckfile_imports`` is still the default, it is replaced by a
    generated preamble:

    - a ``buildscript_run`` load when ``buildscript_genrule`` is default, and
    - a ``cargo`` load when both ``rust_library`` and ``rust_binary`` are
      default, switching those two to ``cargo.rust_library`` and
      ``cargo.rust_binary``.

    Args:
        buck (BuckConfig): Settings as loaded.

    Returns:
        BuckConfig: Settings with the preamble applied (``buck`` itself if unchanged).
    """
    if not buck.buckfile_imports.is_default:
        return buck

    imports: str = ""
    changes: dict[str, object] = {}
    if buck.buildscript_genrule.is_default:
        imports += PRELUDE_BUILDSCRIPT_LOAD
    if buck.rust_library.is_default and buck.rust_binary.is_default:
        imports += PRELUDE_CARGO_LOAD
        changes["rust_library"] = DefaultableString(CARGO_RUST_LIBRARY)
        changes["rust_binary"] = DefaultableString(CARGO_RUST_BINARY)
    changes["buckfile_imports"] = DefaultableString(imports)
    logger.debug("Injected prelude preamble: %r", imports)
    return dataclasses.replace(buck, **changes)  # type: ignore[arg-type]


def read_config(directory: Path) -> Config:
    """Read ``buckify.toml`` from ``directory`` and apply the prelude preamble.

    Args:
        directory (Path): Directory holding the configuration file.

    Returns:
        Config: The effective configuration (defaults when the file is missing).

    Raises:
        ConfigError: If the file exists but is unreadable or not valid TOML.
    """
    path: Path = Path(directory) / CONFIG_FILE_NAME
    config: Config = MutableConfig.from_toml_file(path).freeze()
    return dataclasses.replace(config, buck=apply_prelude_preamble(config.buck))
