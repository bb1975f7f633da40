# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Load comment syntax descriptors from a TOML syntax table.

A syntax table holds one TOML table per syntax::

    [python]
    extensions = [".py"]
    line_comment = "#"
    allow_shebang = true

    [c]
    extensions = [".c", ".h"]
    block_comment = ["/*", " */"]
    block_line_prefix = " * "
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from copyright_header.config.io import (
    get_bool_value_or_none,
    get_list_value,
    get_string_list,
    get_string_value_or_none,
    load_toml_dict,
)
from copyright_header.config.keys import SyntaxToml
from copyright_header.config.logging import get_logger
from copyright_header.errors import ConfigurationError
from copyright_header.syntax.base import SyntaxDescriptor

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from copyright_header.config.logging import CopyrightHeaderLogger

logger: CopyrightHeaderLogger = get_logger(__name__)


def descriptor_from_table(name: str, table: Mapping[str, Any]) -> SyntaxDescriptor:
    """Build one descriptor from a syntax table entry.

    Args:
        name (str): Syntax name (the TOML table name).
        table (Mapping[str, Any]): The entry.

    Returns:
        SyntaxDescriptor: The descriptor.

    Raises:
        ConfigurationError: If the entry is malformed.
    """
    entry: dict[str, Any] = dict(table)
    block: list[Any] = get_list_value(entry, SyntaxToml.KEY_BLOCK_COMMENT)
    if block and (len(block) != 2 or not all(isinstance(t, str) for t in block)):
        raise ConfigurationError(
            f"Syntax '{name}': '{SyntaxToml.KEY_BLOCK_COMMENT}' must be [start, end], got {block!r}"
        )

    prefix: str | None = get_string_value_or_none(entry, SyntaxToml.KEY_BLOCK_LINE_PREFIX)
    try:
        return SyntaxDescriptor(
            name=name,
            extensions=frozenset(get_string_list(entry, SyntaxToml.KEY_EXTENSIONS)),
            filenames=frozenset(get_string_list(entry, SyntaxToml.KEY_FILENAMES)),
            line_comment=get_string_value_or_none(entry, SyntaxToml.KEY_LINE_COMMENT),
            block_comment=(block[0], block[1]) if block else None,
            block_line_prefix="  " if prefix is None else prefix,
            allow_shebang=bool(get_bool_value_or_none(entry, SyntaxToml.KEY_ALLOW_SHEBANG)),
            encoding_line_regex=get_string_value_or_none(
                entry, SyntaxToml.KEY_ENCODING_LINE_REGEX
            ),
        )
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


def descriptors_from_mapping(mapping: Mapping[str, Mapping[str, Any]]) -> list[SyntaxDescriptor]:
    """Build descriptors from a ``name -> entry`` table, keeping its order.

    Raises:
        ConfigurationError: If an entry is not a table or is malformed.
    """
    descriptors: list[SyntaxDescriptor] = []
    for name, table in mapping.items():
        if not isinstance(table, dict):
            raise ConfigurationError(f"Syntax '{name}' must be a table, got {table!r}")
        descriptors.append(descriptor_from_table(name, table))
    return descriptors


def load_syntax_table(path: Path) -> dict[str, Any]:
    """Read a TOML syntax table file.

    Args:
        path (Path): The syntax table file.

    Returns:
        dict[str, Any]: ``name -> entry`` mapping, ready for
            `copyright_header.syntax.registry.SyntaxRegistry.from_mapping`.

    Raises:
        ConfigurationError: If the file is unreadable or not valid TOML.
    """
    data: dict[str, Any] = load_toml_dict(path)
    logger.info("Loaded %d syntax definitions from %s", len(data), path)
    return data
