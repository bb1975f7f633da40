# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot passed explicitly to the
      processing components.
    - `MutableConfig`: a mutable builder used while layering defaults, TOML
      config files and CLI arguments; it is validated and frozen into `Config`.

Layering:
    defaults < ``--config`` files (in order) < CLI arguments. Later layers
    override scalar values and non-empty lists of earlier ones; include and
    exclude patterns accumulate.

Validation:
    All fatal configuration problems surface from `MutableConfig.freeze`,
    before any file is touched: missing or ambiguous license options, missing
    copyright data for bundled licenses, invalid numbers, an invalid marker
    regex and template placeholders that cannot be satisfied.

Path semantics:
    - Paths declared in a config file are resolved against that file's directory.
    - CLI paths are kept as given (relative to the invocation CWD).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from copyright_header.config.io import (
    extract_settings_table,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_list_value,
    get_string_list,
    get_string_value_or_none,
    load_bundled_license,
    load_toml_dict,
    read_license_file,
)
from copyright_header.config.keys import Toml
from copyright_header.config.logging import get_logger
from copyright_header.constants import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_MARKER,
    DEFAULT_MARKER_LENGTH,
    DEFAULT_WORD_WRAP,
)
from copyright_header.errors import (
    AmbiguousArgumentError,
    ConfigurationError,
    MissingArgumentError,
)
from copyright_header.header.renderer import check_template
from copyright_header.header.years import parse_years

if TYPE_CHECKING:
    from copyright_header.config.io import TomlTable
    from copyright_header.config.logging import CopyrightHeaderLogger

# ArgsLike: generic mapping accepted by config loaders (CLI parameters or API dicts).
ArgsLike = Mapping[str, Any]

logger: CopyrightHeaderLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Copyright Header.

    Produced by `MutableConfig.freeze` once all layers are merged and
    validated. Use `Config.thaw` to obtain a mutable builder for edits.

    Attributes:
        license_name (str | None): Bundled license name (``--license``).
        license_file (Path | None): License template file (``--license-file``).
        license_template (str): The loaded license template text.
        software_name (str | None): Value for ``$copyright_software``.
        software_description (str | None): Value for ``$copyright_software_description``.
        holders (tuple[str, ...]): Requested copyright holders.
        years (frozenset[int]): Requested copyright years.
        word_wrap (int): Maximum raw header line width.
        marker (str): Regex identifying an existing license header.
        marker_length (int): Minimum number of lines searched for a header.
        dry_run (bool): Print would-be results to stdout instead of writing.
        output_dir (Path | None): Mirror processed files into this directory.
        add_paths (tuple[Path, ...]): Files/directories to add or update headers in.
        remove_paths (tuple[Path, ...]): Files/directories to remove headers from.
        guess_extension (bool): Guess the syntax of unknown files from their shebang.
        syntax_file (Path | None): Extra TOML syntax table.
        include_patterns (tuple[str, ...]): Gitignore-style patterns to include.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns to exclude.
        config_files (tuple[Path | str, ...]): Config sources, in merge order.
        verbosity_level (int | None): Console verbosity (None = default).
    """

    license_name: str | None
    license_file: Path | None
    license_template: str

    # Copyright metadata
    software_name: str | None
    software_description: str | None
    holders: tuple[str, ...]
    years: frozenset[int]

    # Formatting and detection
    word_wrap: int
    marker: str
    marker_length: int

    # Output
    dry_run: bool
    output_dir: Path | None

    # Inputs
    add_paths: tuple[Path, ...]
    remove_paths: tuple[Path, ...]
    guess_extension: bool
    syntax_file: Path | None
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]

    # Provenance and verbosity
    config_files: tuple[Path | str, ...]
    verbosity_level: int | None

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            license_name=self.license_name,
            license_file=self.license_file,
            software_name=self.software_name,
            software_description=self.software_description,
            holders=list(self.holders),
            years=sorted(self.years),
            word_wrap=self.word_wrap,
            marker=self.marker,
            marker_length=self.marker_length,
            dry_run=self.dry_run,
            output_dir=self.output_dir,
            add_paths=list(self.add_paths),
            remove_paths=list(self.remove_paths),
            guess_extension=self.guess_extension,
            syntax_file=self.syntax_file,
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
            verbosity_level=self.verbosity_level,
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while merging config layers.

    ``None`` means "not set by this layer"; `merge_with` only lets set values
    override. Years are kept in their raw form (``"2012-2014"``, ``2016``) and
    parsed by `freeze`.
    """

    license_name: str | None = None
    license_file: Path | None = None

    software_name: str | None = None
    software_description: str | None = None
    holders: list[str] = field(default_factory=lambda: [])
    years: list[str | int] = field(default_factory=lambda: [])

    word_wrap: int | None = None
    marker: str | None = None
    marker_length: int | None = None

    dry_run: bool | None = None
    output_dir: Path | None = None

    add_paths: list[Path] = field(default_factory=lambda: [])
    remove_paths: list[Path] = field(default_factory=lambda: [])
    guess_extension: bool | None = None
    syntax_file: Path | None = None
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])

    config_files: list[Path | str] = field(default_factory=lambda: [])
    verbosity_level: int | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this builder and freeze it into an immutable `Config`.

        Returns:
            Config: The validated runtime configuration.

        Raises:
            AmbiguousArgumentError: If both ``--license`` and ``--license-file`` are set.
            MissingArgumentError: If no license is given, the license file cannot
                be read, or a bundled license lacks its copyright data.
            ConfigurationError: If a numeric option, the marker or a year is invalid.
            TemplateError: If the license template cannot be satisfied.
        """
        if self.license_name and self.license_file:
            raise AmbiguousArgumentError(
                "Cannot use --license and --license-file together",
            )
        if not self.license_name and not self.license_file:
            raise MissingArgumentError("Missing --license or --license-file argument")

        template: str
        if self.license_file is not None:
            template = read_license_file(self.license_file)
        else:
            template = load_bundled_license(self.license_name or "")
            # Bundled templates reference every placeholder
            required: dict[str, bool] = {
                "--copyright-software": bool(self.software_name),
                "--copyright-software-description": bool(self.software_description),
                "--copyright-holder": bool(self.holders),
                "--copyright-year": bool(self.years),
            }
            for option, present in required.items():
                if not present:
                    raise MissingArgumentError(f"Missing {option} argument")

        word_wrap: int = DEFAULT_WORD_WRAP if self.word_wrap is None else self.word_wrap
        if word_wrap <= 0:
            raise ConfigurationError(f"--word-wrap must be a positive integer, got {word_wrap}")

        marker_length: int = (
            DEFAULT_MARKER_LENGTH if self.marker_length is None else self.marker_length
        )
        if marker_length <= 0:
            raise ConfigurationError(
                f"--marker-length must be a positive integer, got {marker_length}"
            )

        marker: str = DEFAULT_MARKER if self.marker is None else self.marker
        try:
            re.compile(marker)
        except re.error as exc:
            raise ConfigurationError(f"Invalid --marker regex {marker!r}: {exc}") from exc

        years: frozenset[int] = parse_years(self.years)

        check_template(
            template,
            software_name=self.software_name,
            software_description=self.software_description,
            holders=self.holders,
        )

        if self.dry_run and self.output_dir is not None:
            logger.warning("--dry-run given: ignoring --output-dir %s", self.output_dir)

        return Config(
            license_name=self.license_name.upper() if self.license_name else None,
            license_file=self.license_file,
            license_template=template,
            software_name=self.software_name,
            software_description=self.software_description,
            holders=tuple(dict.fromkeys(self.holders)),
            years=years,
            word_wrap=word_wrap,
            marker=marker,
            marker_length=marker_length,
            dry_run=bool(self.dry_run),
            output_dir=self.output_dir,
            add_paths=tuple(self.add_paths),
            remove_paths=tuple(self.remove_paths),
            guess_extension=bool(self.guess_extension),
            syntax_file=self.syntax_file,
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(dict.fromkeys(self.exclude_patterns)),
            config_files=tuple(self.config_files),
            verbosity_level=self.verbosity_level,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return cls(
            word_wrap=DEFAULT_WORD_WRAP,
            marker=DEFAULT_MARKER,
            marker_length=DEFAULT_MARKER_LENGTH,
            exclude_patterns=list(DEFAULT_EXCLUDE_PATTERNS),
            config_files=["<defaults>"],
        )

    @classmethod
    def from_mapping(cls, args: ArgsLike) -> MutableConfig:
        """Return a builder holding only the values of an arguments mapping."""
        return cls().apply_cli_args(args)

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load configuration from a single TOML file.

        Supports dedicated config files (``[copyright-header]`` table) and
        ``pyproject.toml`` (``[tool.copyright-header]`` table).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig: The layer described by the file.

        Raises:
            ConfigurationError: If the file is unreadable or malformed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        table: TomlTable = extract_settings_table(data, path)
        draft: MutableConfig = cls.from_toml_dict(table, config_file=path)
        draft.config_files = [path]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a layer from a parsed ``[copyright-header]`` table.

        Args:
            table (TomlTable): The settings table.
            config_file (Path | None): File the table came from; relative paths
                are resolved against its directory.

        Returns:
            MutableConfig: The resulting layer.

        Raises:
            ConfigurationError: If a value has the wrong type.
        """
        base: Path = config_file.parent if config_file is not None else Path.cwd()

        def _path(key: str) -> Path | None:
            raw: str | None = get_string_value_or_none(table, key)
            if raw is None:
                return None
            return (base / Path(raw).expanduser()).resolve()

        known: set[str] = {
            value for name, value in vars(Toml).items() if name.startswith("KEY_")
        }
        for key in table:
            if key not in known:
                logger.warning("Unknown config key '%s' in %s", key, config_file or "<mapping>")

        years: list[str | int] = []
        for item in get_list_value(table, Toml.KEY_YEARS):
            if isinstance(item, bool) or not isinstance(item, (str, int)):
                raise ConfigurationError(f"'{Toml.KEY_YEARS}' must hold years, got {item!r}")
            years.append(item)

        return cls(
            license_name=get_string_value_or_none(table, Toml.KEY_LICENSE),
            license_file=_path(Toml.KEY_LICENSE_FILE),
            software_name=get_string_value_or_none(table, Toml.KEY_SOFTWARE),
            software_description=get_string_value_or_none(table, Toml.KEY_SOFTWARE_DESCRIPTION),
            holders=get_string_list(table, Toml.KEY_HOLDERS),
            years=years,
            word_wrap=get_int_value_or_none(table, Toml.KEY_WORD_WRAP),
            marker=get_string_value_or_none(table, Toml.KEY_MARKER),
            marker_length=get_int_value_or_none(table, Toml.KEY_MARKER_LENGTH),
            output_dir=_path(Toml.KEY_OUTPUT_DIR),
            guess_extension=get_bool_value_or_none(table, Toml.KEY_GUESS_EXTENSION),
            syntax_file=_path(Toml.KEY_SYNTAX),
            include_patterns=get_string_list(table, Toml.KEY_INCLUDE),
            exclude_patterns=get_string_list(table, Toml.KEY_EXCLUDE),
        )

    @classmethod
    def load_merged(
        cls,
        *,
        config_files: list[Path] | tuple[Path, ...] = (),
        args: ArgsLike | None = None,
    ) -> MutableConfig:
        """Merge defaults, config files and arguments into one builder.

        Args:
            config_files (list[Path] | tuple[Path, ...]): TOML files, lowest precedence first.
            args (ArgsLike | None): CLI or API arguments (highest precedence).

        Returns:
            MutableConfig: The merged builder (not yet validated).
        """
        draft: MutableConfig = cls.from_defaults()
        for path in config_files:
            draft = draft.merge_with(cls.from_toml_file(path))
        if args is not None:
            draft.apply_cli_args(args)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Scalars override when set (not ``None``); lists override when non-empty,
        except include/exclude patterns which accumulate.

        Args:
            other (MutableConfig): The layer whose values take precedence.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """

        def _pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        return MutableConfig(
            license_name=_pick(self.license_name, other.license_name),
            license_file=_pick(self.license_file, other.license_file),
            software_name=_pick(self.software_name, other.software_name),
            software_description=_pick(self.software_description, other.software_description),
            holders=list(other.holders or self.holders),
            years=list(other.years or self.years),
            word_wrap=_pick(self.word_wrap, other.word_wrap),
            marker=_pick(self.marker, other.marker),
            marker_length=_pick(self.marker_length, other.marker_length),
            dry_run=_pick(self.dry_run, other.dry_run),
            output_dir=_pick(self.output_dir, other.output_dir),
            add_paths=list(other.add_paths or self.add_paths),
            remove_paths=list(other.remove_paths or self.remove_paths),
            guess_extension=_pick(self.guess_extension, other.guess_extension),
            syntax_file=_pick(self.syntax_file, other.syntax_file),
            include_patterns=self.include_patterns + other.include_patterns,
            exclude_patterns=self.exclude_patterns + other.exclude_patterns,
            config_files=self.config_files + other.config_files,
            verbosity_level=_pick(self.verbosity_level, other.verbosity_level),
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Keys that are absent, ``None`` or empty leave the current value alone,
        so CLI defaults never mask config-file values.

        Args:
            args (ArgsLike): Arguments mapping keyed by parameter name
                (``license``, ``copyright_holders``, ``add_paths``, ...).

        Returns:
            MutableConfig: This builder, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append("<CLI overrides>")

        def _set(key: str) -> Any:
            value: Any = args.get(key)
            if value is None or (isinstance(value, (list, tuple)) and not value):
                return None
            return value

        if (value := _set("license")) is not None:
            self.license_name = str(value)
        if (value := _set("license_file")) is not None:
            self.license_file = Path(value)
        if (value := _set("copyright_software")) is not None:
            self.software_name = str(value)
        if (value := _set("copyright_software_description")) is not None:
            self.software_description = str(value)
        if (value := _set("copyright_holders")) is not None:
            self.holders = [str(v) for v in value]
        if (value := _set("copyright_years")) is not None:
            self.years = list(value)
        if (value := _set("word_wrap")) is not None:
            self.word_wrap = int(value)
        if (value := _set("marker_length")) is not None:
            self.marker_length = int(value)
        if (value := _set("marker")) is not None:
            self.marker = str(value)
        if (value := _set("output_dir")) is not None:
            self.output_dir = Path(value)
        if (value := _set("add_paths")) is not None:
            self.add_paths = [Path(v) for v in value]
        if (value := _set("remove_paths")) is not None:
            self.remove_paths = [Path(v) for v in value]
        if (value := _set("syntax_file")) is not None:
            self.syntax_file = Path(value)
        if (value := _set("include_patterns")) is not None:
            self.include_patterns.extend(value)
        if (value := _set("exclude_patterns")) is not None:
            self.exclude_patterns.extend(value)
        if (value := _set("verbosity_level")) is not None:
            self.verbosity_level = int(value)

        # Flags: only an explicit True overrides a config file
        if args.get("dry_run"):
            self.dry_run = True
        if args.get("guess_extension"):
            self.guess_extension = True

        logger.debug("Patched MutableConfig: %s", self)
        return self
