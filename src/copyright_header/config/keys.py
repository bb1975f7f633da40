# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Canonical TOML key names for Copyright Header configuration.

Keys live in a ``[copyright-header]`` table of a dedicated config file, or in
``[tool.copyright-header]`` inside ``pyproject.toml``. They are kebab-case and
mirror the long CLI option names.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by Copyright Header configuration files.

    Notes:
        - Values must match user-facing TOML keys exactly.
        - Renaming or removing a key is a breaking change.
    """

    KEY_LICENSE: Final[str] = "license"
    KEY_LICENSE_FILE: Final[str] = "license-file"

    KEY_SOFTWARE: Final[str] = "copyright-software"
    KEY_SOFTWARE_DESCRIPTION: Final[str] = "copyright-software-description"
    KEY_HOLDERS: Final[str] = "copyright-holders"
    KEY_YEARS: Final[str] = "copyright-years"

    KEY_WORD_WRAP: Final[str] = "word-wrap"
    KEY_MARKER: Final[str] = "marker"
    KEY_MARKER_LENGTH: Final[str] = "marker-length"

    KEY_OUTPUT_DIR: Final[str] = "output-dir"
    KEY_GUESS_EXTENSION: Final[str] = "guess-extension"
    KEY_SYNTAX: Final[str] = "syntax"

    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"


class SyntaxToml:
    """Keys of one entry of a TOML syntax table (see `copyright_header.syntax.io`)."""

    KEY_EXTENSIONS: Final[str] = "extensions"
    KEY_FILENAMES: Final[str] = "filenames"
    KEY_LINE_COMMENT: Final[str] = "line_comment"
    KEY_BLOCK_COMMENT: Final[str] = "block_comment"
    KEY_BLOCK_LINE_PREFIX: Final[str] = "block_line_prefix"
    KEY_ALLOW_SHEBANG: Final[str] = "allow_shebang"
    KEY_ENCODING_LINE_REGEX: Final[str] = "encoding_line_regex"
