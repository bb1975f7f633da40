# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Copyright Header constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    COPYRIGHT_HEADER_VERSION: str = get_version("copyright-header")
except PackageNotFoundError:
    COPYRIGHT_HEADER_VERSION = "0.0.0"

# Package holding the bundled license templates (``<NAME>.txt``):
LICENSES_PACKAGE: str = "copyright_header.licenses"
LICENSE_TEMPLATE_SUFFIX: str = ".txt"

# Defaults mirrored by the CLI and the configuration builder
DEFAULT_WORD_WRAP: int = 80
DEFAULT_MARKER_LENGTH: int = 20
DEFAULT_MARKER: str = "[Cc]opyright|[Ll]icense"

# Directories never descended into by the tree walker
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (".git/", ".hg/", ".svn/")

# Table holding our settings inside a TOML config file / pyproject.toml
TOML_TABLE_NAME: str = "copyright-header"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: str = "COPYRIGHT_HEADER_LOG_LEVEL"

# Banner printed before each file's content in dry-run mode
DRY_RUN_BANNER: str = "==> {path} <=="
