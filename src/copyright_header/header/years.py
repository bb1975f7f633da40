# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Copyright year parsing and range collapsing.

Years are handled as plain integers. Text forms accepted on input are single
years (``2016``), inclusive ranges (``2012-2016``, also with an en dash) and
comma-separated lists of both (``2012, 2014-2015``). On output, sorted years
are collapsed into ranges: ``{2012, 2013, 2014, 2016}`` renders as
``"2012-2014, 2016"``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from copyright_header.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

# A single year or an inclusive range of years
YEAR_RANGE_PATTERN: Final[str] = r"\d{4}(?:\s*[-–]\s*\d{4})?"

# One or more year ranges separated by commas
YEAR_LIST_PATTERN: Final[str] = rf"{YEAR_RANGE_PATTERN}(?:\s*,\s*{YEAR_RANGE_PATTERN})*"

_RE_YEAR_RANGE: Final[re.Pattern[str]] = re.compile(
    r"(?P<start>\d{4})(?:\s*[-–]\s*(?P<end>\d{4}))?"
)
_RE_YEAR_LIST_FULL: Final[re.Pattern[str]] = re.compile(rf"\s*{YEAR_LIST_PATTERN}\s*")


def expand_year_text(text: str) -> set[int]:
    """Return every year mentioned in a year list such as ``"2012-2014, 2016"``.

    Reversed ranges (``2016-2012``) are normalized. Non-year text is ignored.

    Args:
        text (str): Text holding years and year ranges.

    Returns:
        set[int]: The expanded set of years (empty when none are found).
    """
    years: set[int] = set()
    for m in _RE_YEAR_RANGE.finditer(text):
        start = int(m.group("start"))
        end = int(m.group("end")) if m.group("end") else start
        if end < start:
            start, end = end, start
        years.update(range(start, end + 1))
    return years


def parse_years(values: Iterable[str | int]) -> frozenset[int]:
    """Parse requested copyright years (CLI or config values).

    Args:
        values (Iterable[str | int]): Years as integers or year-list strings.

    Returns:
        frozenset[int]: The union of all years.

    Raises:
        ConfigurationError: If a value is not a year, a year range or a list of those.
    """
    years: set[int] = set()
    for value in values:
        if isinstance(value, bool):
            raise ConfigurationError(f"Invalid copyright year: {value!r}")
        if isinstance(value, int):
            years.add(value)
            continue
        text = str(value)
        if not _RE_YEAR_LIST_FULL.fullmatch(text):
            raise ConfigurationError(f"Invalid copyright year: {value!r}")
        years.update(expand_year_text(text))
    return frozenset(years)


def collapse_years(years: Iterable[int]) -> str:
    """Render years as a compact, comma-separated list of ranges.

    Runs of consecutive years render as ``start-end``; isolated years render
    individually.

    Args:
        years (Iterable[int]): Years to render (duplicates are ignored).

    Returns:
        str: The collapsed representation, e.g. ``"2012-2014, 2016"``.
    """
    ordered: list[int] = sorted(set(years))
    parts: list[str] = []
    i = 0
    while i < len(ordered):
        j = i
        while j + 1 < len(ordered) and ordered[j + 1] == ordered[j] + 1:
            j += 1
        if j > i:
            parts.append(f"{ordered[i]}-{ordered[j]}")
        else:
            parts.append(str(ordered[i]))
        i = j + 1
    return ", ".join(parts)
