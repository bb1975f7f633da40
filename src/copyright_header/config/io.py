# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Configuration I/O: TOML files, value getters and license templates.

TOML parsing is done with `tomlkit` and returned as plain `dict` structures.
License templates are either user files (``--license-file``) or bundled
package resources (``--license NAME``) read with `importlib.resources`.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from copyright_header.config.logging import get_logger
from copyright_header.constants import (
    LICENSE_TEMPLATE_SUFFIX,
    LICENSES_PACKAGE,
    TOML_TABLE_NAME,
)
from copyright_header.errors import ConfigurationError, MissingArgumentError

if TYPE_CHECKING:
    from pathlib import Path

    from copyright_header.config.logging import CopyrightHeaderLogger

TomlTable = dict[str, Any]

logger: CopyrightHeaderLogger = get_logger(__name__)


# --- TOML file I/O ---


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into a plain dictionary.

    Args:
        path (Path): Path to the TOML file.

    Returns:
        TomlTable: The parsed document, unwrapped to plain Python values.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid TOML.
    """
    logger.debug("Loading TOML file: %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
    try:
        data: TomlTable = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc
    logger.trace("Parsed TOML from %s: %r", path, data)
    return data


def extract_settings_table(data: TomlTable, path: Path) -> TomlTable:
    """Return the Copyright Header settings table of a parsed TOML document.

    ``pyproject.toml`` carries the settings under ``[tool.copyright-header]``;
    any other file under ``[copyright-header]``. A document without that table
    yields an empty table (a warning is logged).

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): The file the document was read from (used for messages).

    Returns:
        TomlTable: The settings table.

    Raises:
        ConfigurationError: If the table exists but is not a table.
    """
    if path.name == "pyproject.toml":
        tool: Any = data.get("tool", {})
        table: Any = tool.get(TOML_TABLE_NAME) if isinstance(tool, dict) else None
        section = f"[tool.{TOML_TABLE_NAME}]"
    else:
        table = data.get(TOML_TABLE_NAME)
        section = f"[{TOML_TABLE_NAME}]"

    if table is None:
        logger.warning("%s section missing in %s", section, path)
        return {}
    if not isinstance(table, dict):
        raise ConfigurationError(f"{section} in {path} must be a table")
    return table


# --- Value getters ---


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent.

    Raises:
        ConfigurationError: If the value is present but not a string.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigurationError(f"'{key}' must be a string, got {value!r}")


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The integer value, or ``None`` when absent.

    Raises:
        ConfigurationError: If the value is present but not an integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"'{key}' must be an integer, got {value!r}")
    return value


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when absent.

    Raises:
        ConfigurationError: If the value is present but not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ConfigurationError(f"'{key}' must be a boolean, got {value!r}")


def get_list_value(table: TomlTable, key: str) -> list[Any]:
    """Extract a list value from a TOML table; a scalar is wrapped in a list.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        list[Any]: The list (empty when the key is absent).
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


def get_string_list(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        list[str]: The strings (empty when the key is absent).

    Raises:
        ConfigurationError: If an item is not a string.
    """
    items: list[Any] = get_list_value(table, key)
    for item in items:
        if not isinstance(item, str):
            raise ConfigurationError(f"'{key}' must hold strings, got {item!r}")
    return items


# --- License templates ---


def available_licenses() -> list[str]:
    """Return the names of the bundled license templates, sorted."""
    names: list[str] = []
    for entry in files(LICENSES_PACKAGE).iterdir():
        if entry.name.endswith(LICENSE_TEMPLATE_SUFFIX):
            names.append(entry.name[: -len(LICENSE_TEMPLATE_SUFFIX)])
    return sorted(names)


def load_bundled_license(name: str) -> str:
    """Return the text of a bundled license template.

    Names are matched case-insensitively (``mit`` selects ``MIT``).

    Args:
        name (str): License name, e.g. ``"MIT"`` or ``"GPL3"``.

    Returns:
        str: The template text.

    Raises:
        ConfigurationError: If no bundled template has that name.
    """
    wanted: str = name.strip().upper()
    known: list[str] = available_licenses()
    if wanted not in known:
        raise ConfigurationError(
            f"Unknown license '{name}' (available: {', '.join(known)})",
        )
    resource = files(LICENSES_PACKAGE).joinpath(f"{wanted}{LICENSE_TEMPLATE_SUFFIX}")
    logger.debug("Loading bundled license template %s", wanted)
    return resource.read_text(encoding="utf-8")


def read_license_file(path: Path) -> str:
    """Return the text of a user-supplied license template.

    Args:
        path (Path): Template file.

    Returns:
        str: The template text.

    Raises:
        MissingArgumentError: If the file cannot be read.
    """
    logger.debug("Loading license template file %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MissingArgumentError(f"Cannot read license file {path}: {exc}") from exc
