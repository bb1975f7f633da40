# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Domain exceptions for Copyright Header.

These exceptions are UI-agnostic; the CLI translates the fatal ones into Click
exceptions with dedicated exit codes (see `copyright_header.cli.errors`).

Taxonomy:
    - `ConfigurationError` (fatal): ambiguous or missing options, raised while the
      runtime `Config` is validated, before any file is touched.
      `MissingArgumentError` and `AmbiguousArgumentError` refine it.
    - `TemplateError` (fatal): the license template references unknown
      placeholders or data required by the template is absent.
    - `UnknownSyntaxError` (per file): no comment syntax is known for a file;
      the processor records the file as skipped.
"""

from __future__ import annotations


class CopyrightHeaderError(Exception):
    """Base class for all Copyright Header errors."""


class ConfigurationError(CopyrightHeaderError):
    """Invalid, ambiguous or incomplete configuration."""


class MissingArgumentError(ConfigurationError):
    """A required option (or the data it carries) is missing."""


class AmbiguousArgumentError(ConfigurationError):
    """Two mutually exclusive options were given together."""


class TemplateError(CopyrightHeaderError):
    """The license template cannot be expanded with the available data."""


class UnknownSyntaxError(CopyrightHeaderError):
    """No comment syntax descriptor is registered for a file.

    Attributes:
        filename (str): The file name that could not be resolved.
    """

    def __init__(self, filename: str) -> None:
        super().__init__(f"No comment syntax known for '{filename}'")
        self.filename = filename
