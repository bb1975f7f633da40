# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Line-list surgery for inserting, replacing and removing a header.

All helpers return new lists; lines outside the header region are passed
through unchanged (including their line endings and a missing final newline).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from copyright_header.header.model import HeaderRegion


def detect_newline(lines: Sequence[str]) -> str:
    """Return the newline style of the first terminated line (default ``"\\n"``).

    Args:
        lines (Sequence[str]): Lines read with their line endings kept.

    Returns:
        str: ``"\\r\\n"``, ``"\\r"`` or ``"\\n"``.
    """
    for line in lines:
        if line.endswith("\r\n"):
            return "\r\n"
        if line.endswith("\n"):
            return "\n"
        if line.endswith("\r"):
            return "\r"
    return "\n"


def insert_header(
    lines: Sequence[str],
    anchor: int,
    header: Sequence[str],
    newline: str,
) -> list[str]:
    """Insert ``header`` at ``anchor``, followed by one blank separator line.

    No separator is added when nothing follows the header. When the preamble
    ends the file without a final newline (a lone shebang), each header line
    carries its newline in front instead, so the file still lacks a final
    newline and `remove_header` can restore it exactly.

    Args:
        lines (Sequence[str]): Original file lines.
        anchor (int): Insertion index.
        header (Sequence[str]): Decorated header lines.
        newline (str): The file's newline style.

    Returns:
        list[str]: The new file lines.
    """
    before: list[str] = list(lines[:anchor])
    after: list[str] = list(lines[anchor:])
    if before and not before[-1].endswith(("\n", "\r")):
        moved: list[str] = [newline + line.rstrip("\r\n") for line in header]
        return "".join(before + moved).splitlines(keepends=True)
    separator: list[str] = [newline] if after else []
    return before + list(header) + separator + after


def replace_header(
    lines: Sequence[str],
    region: HeaderRegion,
    header: Sequence[str],
) -> list[str]:
    """Replace the lines of a matched region with ``header``."""
    replaced: list[str] = list(lines[: region.start_line]) + list(header)
    tail: list[str] = list(lines[region.end_line + 1 :])
    if not tail and not lines[region.end_line].endswith(("\n", "\r")) and replaced:
        # Keep a header-only file without its final newline as it was
        replaced[-1] = replaced[-1].rstrip("\r\n")
    return replaced + tail


def remove_header(lines: Sequence[str], region: HeaderRegion) -> list[str]:
    """Delete a matched region plus one following blank line, if present.

    A region ending the file without a final newline takes the newline of
    the line before it along, undoing `insert_header` after a lone shebang.
    """
    end: int = region.end_line + 1
    if end < len(lines) and not lines[end].strip():
        end += 1
    kept: list[str] = list(lines[: region.start_line])
    if end >= len(lines) and kept and not lines[region.end_line].endswith(("\n", "\r")):
        kept[-1] = kept[-1].rstrip("\r\n")
    return kept + list(lines[end:])
