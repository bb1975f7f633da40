# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Additive merge of existing header metadata with the requested metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING

from copyright_header.errors import MissingArgumentError
from copyright_header.header.model import HeaderContext

if TYPE_CHECKING:
    from collections.abc import Iterable

    from copyright_header.header.model import HeaderRegion, HeaderRequest


def ordered_union(*groups: Iterable[str]) -> tuple[str, ...]:
    """Concatenate string groups, dropping exact duplicates (first seen wins)."""
    return tuple(dict.fromkeys(item for group in groups for item in group))


def merge(existing: HeaderRegion, request: HeaderRequest) -> HeaderContext:
    """Merge a file's existing copyright metadata with the requested values.

    Holders keep the existing order and are followed by new requested holders;
    years are the union of both sets. Nothing is ever removed.

    Args:
        existing (HeaderRegion): The matched (or unmatched) header region.
        request (HeaderRequest): Requested metadata and formatting options.

    Returns:
        HeaderContext: The merged context for rendering.

    Raises:
        MissingArgumentError: If neither the file nor the request supplies any year.
    """
    years: frozenset[int] = existing.extracted_years | request.years
    if not years:
        raise MissingArgumentError("Missing --copyright-year argument")
    return HeaderContext(
        software_name=request.software_name,
        software_description=request.software_description,
        holders=ordered_union(existing.extracted_holders, request.holders),
        years=years,
        word_wrap=request.word_wrap,
        marker_regex=request.marker_regex,
        marker_search_lines=request.marker_search_lines,
    )
