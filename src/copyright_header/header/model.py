# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Immutable value types shared by the header engine.

- `HeaderRequest`: the copyright metadata and formatting options requested
  for a run (derived once from the runtime `Config`).
- `HeaderRegion`: where an existing header sits in a file, plus the metadata
  extracted from it.
- `HeaderContext`: the merged metadata used to render one file's header.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from copyright_header.config.model import Config


@dataclass(frozen=True, slots=True)
class HeaderRequest:
    """Requested header metadata and formatting options.

    Attributes:
        software_name (str | None): Value of ``copyright_software``.
        software_description (str | None): Value of ``copyright_software_description``.
        holders (tuple[str, ...]): Requested copyright holders, in order.
        years (frozenset[int]): Requested copyright years.
        word_wrap (int): Maximum line width of the raw (uncommented) header text.
        marker_regex (str): Pattern identifying a comment as a license header.
        marker_search_lines (int): Minimum number of lines scanned for a header.
    """

    software_name: str | None
    software_description: str | None
    holders: tuple[str, ...]
    years: frozenset[int]
    word_wrap: int
    marker_regex: str
    marker_search_lines: int

    @classmethod
    def from_config(cls, config: Config) -> HeaderRequest:
        """Build the request from a frozen runtime configuration."""
        return cls(
            software_name=config.software_name,
            software_description=config.software_description,
            holders=config.holders,
            years=config.years,
            word_wrap=config.word_wrap,
            marker_regex=config.marker,
            marker_search_lines=config.marker_length,
        )


@dataclass(frozen=True, slots=True)
class HeaderRegion:
    """Location of a license header within a list of lines.

    Line numbers are 0-based and inclusive. An unmatched region marks the
    insertion anchor instead: ``start_line == end_line == anchor`` and its
    `length` is 0.

    Attributes:
        start_line (int): First header line (or the insertion anchor).
        end_line (int): Last header line (or the insertion anchor).
        matched (bool): Whether an existing header was found.
        extracted_years (frozenset[int]): Years found in the header's copyright lines.
        extracted_holders (tuple[str, ...]): Holders found in the header's copyright lines.
    """

    start_line: int
    end_line: int
    matched: bool
    extracted_years: frozenset[int] = frozenset()
    extracted_holders: tuple[str, ...] = ()

    @classmethod
    def unmatched(cls, anchor: int) -> HeaderRegion:
        """Return the empty region located at ``anchor``."""
        return cls(start_line=anchor, end_line=anchor, matched=False)

    @property
    def length(self) -> int:
        """Number of lines covered by the region (0 when unmatched)."""
        if not self.matched:
            return 0
        return self.end_line - self.start_line + 1


@dataclass(frozen=True, slots=True)
class HeaderContext:
    """Merged metadata used to render the header of one file.

    Attributes:
        software_name (str | None): Software name.
        software_description (str | None): One-line software description.
        holders (tuple[str, ...]): Ordered, de-duplicated copyright holders.
        years (frozenset[int]): Copyright years.
        word_wrap (int): Maximum raw line width.
        marker_regex (str): Header marker pattern.
        marker_search_lines (int): Minimum header search depth.
    """

    software_name: str | None
    software_description: str | None
    holders: tuple[str, ...]
    years: frozenset[int]
    word_wrap: int
    marker_regex: str
    marker_search_lines: int
