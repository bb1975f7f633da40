# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Locate an existing license header and extract its copyright metadata.

Detection is heuristic and bounded:

1. The insertion anchor is the first line after an optional shebang (when
   the syntax allows one) and optional encoding/magic lines.
2. Blank lines after the anchor are skipped to find the candidate start.
3. A block comment opening there must close within ``max_lines`` lines;
   otherwise a contiguous run of line comments (at most ``max_lines``) is taken.
4. The candidate is a header only if one of its lines matches the marker
   regex (case-insensitive). Anything else is left untouched.

Years and holders are extracted from copyright lines that carry years, e.g.
``Copyright (C) 2012-2014, 2016 Jane Doe, Acme Inc.``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from copyright_header.config.logging import get_logger
from copyright_header.header.model import HeaderRegion
from copyright_header.header.years import YEAR_LIST_PATTERN, expand_year_text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from copyright_header.config.logging import CopyrightHeaderLogger
    from copyright_header.syntax.base import SyntaxDescriptor

logger: CopyrightHeaderLogger = get_logger(__name__)

# Encoding/magic lines are only recognised within the first lines of a file (PEP 263)
_MAX_PREAMBLE_LINES: Final[int] = 2

_RE_COPYRIGHT_LINE: Final[re.Pattern[str]] = re.compile(
    r"copyright\b:?\s*(?:\(c\)|©)?\s*"
    rf"(?P<years>{YEAR_LIST_PATTERN})\s*,?\s*"
    r"(?:by\s+)?(?P<holders>.*)$",
    re.IGNORECASE,
)

_RE_ALL_RIGHTS_RESERVED: Final[re.Pattern[str]] = re.compile(
    r"[\s,;]*all\s+rights\s+reserved\.?\s*$",
    re.IGNORECASE,
)

# Commas separate holders, except in front of a corporate suffix ("Acme, Inc.")
_RE_HOLDER_SEPARATOR: Final[re.Pattern[str]] = re.compile(
    r",\s*(?!(?:inc|ltd|llc|llp|gmbh|corp|co|plc|ag|sa|bv|nv|s\.a|b\.v|n\.v)\b\.?)",
    re.IGNORECASE,
)


def find_insertion_anchor(lines: Sequence[str], syntax: SyntaxDescriptor) -> int:
    """Return the index of the first line after the shebang/encoding preamble.

    A shebang is skipped only when the syntax allows one. Encoding/magic lines
    are skipped whenever the syntax defines ``encoding_line_regex``, with or
    without a shebang, but only within the first two lines of the file.

    Args:
        lines (Sequence[str]): File lines (with or without line endings).
        syntax (SyntaxDescriptor): Comment syntax of the file.

    Returns:
        int: The insertion anchor (0 when there is no preamble).
    """
    index = 0
    if syntax.allow_shebang and lines and lines[0].startswith("#!"):
        index = 1
    if syntax.encoding_line_regex:
        encoding: re.Pattern[str] = re.compile(syntax.encoding_line_regex)
        limit: int = min(len(lines), _MAX_PREAMBLE_LINES)
        while index < limit and encoding.search(lines[index]):
            index += 1
    return index


def _find_block_end(
    lines: Sequence[str],
    start: int,
    syntax: SyntaxDescriptor,
    max_lines: int,
) -> int | None:
    """Return the index of the line closing the block opened at ``start``."""
    start_token: str | None = syntax.block_start
    end_token: str | None = syntax.block_end
    if start_token is None or end_token is None:
        return None
    limit: int = min(len(lines), start + max_lines)
    for i in range(start, limit):
        text: str = lines[i]
        if i == start:
            # Look past the opening token so "/*/" style lines are not misread
            text = text.lstrip()[len(start_token) :]
        if end_token in text:
            return i
    return None


def _find_line_run_end(
    lines: Sequence[str],
    start: int,
    syntax: SyntaxDescriptor,
    max_lines: int,
) -> int:
    """Return the index of the last line of the line-comment run at ``start``."""
    end: int = start
    limit: int = min(len(lines), start + max_lines)
    while end + 1 < limit and syntax.is_line_comment(lines[end + 1]):
        end += 1
    return end


def comment_text(line: str, syntax: SyntaxDescriptor) -> str:
    """Return the text of a header line without comment delimiters.

    Args:
        line (str): A line of a header region.
        syntax (SyntaxDescriptor): Comment syntax of the file.

    Returns:
        str: The stripped comment text.
    """
    text: str = line.strip()
    start_token: str | None = syntax.block_start
    end_token: str | None = syntax.block_end
    if start_token and text.startswith(start_token):
        text = text[len(start_token) :]
    if end_token and text.endswith(end_token):
        text = text[: -len(end_token)]
    prefix: str = syntax.block_line_prefix.strip()
    if syntax.block_comment is not None and prefix and text.lstrip().startswith(prefix):
        text = text.lstrip()[len(prefix) :]
    if syntax.line_comment and text.startswith(syntax.line_comment):
        text = text[len(syntax.line_comment) :]
    return text.strip()


def split_holders(text: str) -> list[str]:
    """Split a holder list on commas, keeping corporate suffixes attached.

    ``"Jane Doe, Acme, Inc. All rights reserved."`` yields
    ``["Jane Doe", "Acme, Inc."]``.

    Args:
        text (str): The text following the years of a copyright line.

    Returns:
        list[str]: The holders, in order, without empty entries.
    """
    text = _RE_ALL_RIGHTS_RESERVED.sub("", text).strip()
    holders: list[str] = []
    for part in _RE_HOLDER_SEPARATOR.split(text):
        holder: str = part.strip().rstrip(",").strip()
        if holder:
            holders.append(holder)
    return holders


def _continues_statement(previous: str, following: str, word_wrap: int | None) -> bool:
    """Whether ``following`` continues the copyright statement ending with ``previous``.

    A statement continues after a trailing comma, or when the first word of
    the next line would not have fitted on the previous one (a word-wrap
    break at ``word_wrap`` columns).
    """
    if not following or _RE_COPYRIGHT_LINE.search(following):
        return False
    if previous.endswith(","):
        return True
    if word_wrap is None:
        return False
    return len(previous) + 1 + len(following.split()[0]) > word_wrap


def copyright_statements(
    lines: Sequence[str],
    syntax: SyntaxDescriptor,
    word_wrap: int | None = None,
) -> list[str]:
    """Return the copyright statements of a header, rejoining wrapped lines.

    Args:
        lines (Sequence[str]): The header region's lines.
        syntax (SyntaxDescriptor): Comment syntax of the file.
        word_wrap (int | None): Width the header was wrapped at, if known.

    Returns:
        list[str]: One uncommented text per copyright statement.
    """
    texts: list[str] = [comment_text(line, syntax) for line in lines]
    statements: list[str] = []
    i = 0
    while i < len(texts):
        if _RE_COPYRIGHT_LINE.search(texts[i]) is None:
            i += 1
            continue
        parts: list[str] = [texts[i]]
        i += 1
        while i < len(texts) and _continues_statement(parts[-1], texts[i], word_wrap):
            parts.append(texts[i])
            i += 1
        statements.append(" ".join(parts))
    return statements


def extract_copyright_metadata(
    lines: Sequence[str],
    syntax: SyntaxDescriptor,
    word_wrap: int | None = None,
) -> tuple[frozenset[int], tuple[str, ...]]:
    """Extract years and holders from the copyright lines of a header.

    Lines mentioning "copyright" without any year are ignored, so license
    prose ("the above copyright notice ...") never yields holders. A
    copyright line wrapped onto the following lines is read as one statement
    (see `copyright_statements`).

    Args:
        lines (Sequence[str]): The header region's lines.
        syntax (SyntaxDescriptor): Comment syntax of the file.
        word_wrap (int | None): Width the header was wrapped at, if known.

    Returns:
        tuple[frozenset[int], tuple[str, ...]]: Years and ordered, de-duplicated holders.
    """
    years: set[int] = set()
    holders: list[str] = []
    for statement in copyright_statements(lines, syntax, word_wrap):
        m: re.Match[str] | None = _RE_COPYRIGHT_LINE.search(statement)
        if m is None:
            continue
        years.update(expand_year_text(m.group("years")))
        for holder in split_holders(m.group("holders")):
            if holder not in holders:
                holders.append(holder)
    return frozenset(years), tuple(holders)


def match_header(
    lines: Sequence[str],
    syntax: SyntaxDescriptor,
    marker_regex: str,
    max_lines: int,
    word_wrap: int | None = None,
) -> HeaderRegion:
    """Locate the license header of a file.

    Args:
        lines (Sequence[str]): File lines.
        syntax (SyntaxDescriptor): Comment syntax of the file.
        marker_regex (str): Pattern a header must contain (case-insensitive).
        max_lines (int): Maximum number of lines examined for the header.
        word_wrap (int | None): Width headers are wrapped at, used to rejoin
            wrapped copyright lines.

    Returns:
        HeaderRegion: The matched region, or an unmatched region at the
            insertion anchor.
    """
    anchor: int = find_insertion_anchor(lines, syntax)
    unmatched: HeaderRegion = HeaderRegion.unmatched(anchor)

    start: int = anchor
    limit: int = min(len(lines), anchor + max_lines)
    while start < limit and not lines[start].strip():
        start += 1
    if start >= len(lines) or not lines[start].strip():
        logger.trace("No candidate header after anchor %d", anchor)
        return unmatched

    end: int | None
    if syntax.opens_block(lines[start]):
        end = _find_block_end(lines, start, syntax, max_lines)
        if end is None:
            logger.debug("Unterminated block comment at line %d treated as no header", start + 1)
            return unmatched
    elif syntax.is_line_comment(lines[start]):
        end = _find_line_run_end(lines, start, syntax, max_lines)
    else:
        logger.trace("Line %d is not a comment; no header", start + 1)
        return unmatched

    candidate: Sequence[str] = lines[start : end + 1]
    marker: re.Pattern[str] = re.compile(marker_regex, re.IGNORECASE)
    if not any(marker.search(line) for line in candidate):
        logger.debug("Leading comment at lines %d-%d has no license marker", start + 1, end + 1)
        return unmatched

    years, holders = extract_copyright_metadata(candidate, syntax, word_wrap)
    logger.debug(
        "Header found at lines %d-%d (years=%s, holders=%s)",
        start + 1,
        end + 1,
        sorted(years),
        holders,
    )
    return HeaderRegion(
        start_line=start,
        end_line=end,
        matched=True,
        extracted_years=years,
        extracted_holders=holders,
    )
