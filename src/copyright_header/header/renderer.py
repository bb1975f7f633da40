# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""License template expansion and word wrapping.

Templates use `string.Template` placeholders (``$name`` or ``${name}``, with
``$$`` for a literal dollar sign). The recognised placeholders are listed in
`PLACEHOLDERS`; anything else is a `TemplateError`.

`render` produces *raw* header lines: expanded, word-wrapped and without
comment delimiters or newlines. Comment decoration is applied afterwards by
`copyright_header.header.decorator.decorate`.
"""

from __future__ import annotations

import datetime
import textwrap
from string import Template
from typing import TYPE_CHECKING, Final

from copyright_header.config.logging import get_logger
from copyright_header.errors import MissingArgumentError, TemplateError
from copyright_header.header.years import collapse_years

if TYPE_CHECKING:
    from collections.abc import Iterable

    from copyright_header.config.logging import CopyrightHeaderLogger
    from copyright_header.header.model import HeaderContext

logger: CopyrightHeaderLogger = get_logger(__name__)

PH_SOFTWARE: Final[str] = "copyright_software"
PH_SOFTWARE_DESCRIPTION: Final[str] = "copyright_software_description"
PH_HOLDERS: Final[str] = "copyright_holders"
PH_YEARS: Final[str] = "copyright_years"
PH_CURRENT_YEAR: Final[str] = "current_year"

PLACEHOLDERS: Final[frozenset[str]] = frozenset(
    {PH_SOFTWARE, PH_SOFTWARE_DESCRIPTION, PH_HOLDERS, PH_YEARS, PH_CURRENT_YEAR}
)

# Option that supplies each placeholder's value (used in error messages)
_PLACEHOLDER_OPTIONS: Final[dict[str, str]] = {
    PH_SOFTWARE: "--copyright-software",
    PH_SOFTWARE_DESCRIPTION: "--copyright-software-description",
    PH_HOLDERS: "--copyright-holder",
    PH_YEARS: "--copyright-year",
}


def template_identifiers(template: str) -> set[str]:
    """Return the placeholder names referenced by a template.

    Args:
        template (str): Template text.

    Returns:
        set[str]: Placeholder names (``$$`` escapes are not placeholders).

    Raises:
        TemplateError: If the template contains a malformed placeholder such as
            a lone ``$`` followed by a non-identifier.
    """
    names: set[str] = set()
    for m in Template.pattern.finditer(template):
        name: str | None = m.group("named") or m.group("braced")
        if name is not None:
            names.add(name)
        elif m.group("invalid") is not None:
            offset: int = m.start("invalid")
            line_no: int = template.count("\n", 0, offset) + 1
            raise TemplateError(f"Invalid placeholder in license template at line {line_no}")
    return names


def check_template(
    template: str,
    *,
    software_name: str | None,
    software_description: str | None,
    holders: Iterable[str],
) -> set[str]:
    """Validate a template against the data available for the run.

    Years are not checked here: they may come from headers already present in
    the processed files and are validated per file by the merger.

    Args:
        template (str): Template text.
        software_name (str | None): Requested software name.
        software_description (str | None): Requested software description.
        holders (Iterable[str]): Requested holders.

    Returns:
        set[str]: The placeholders used by the template.

    Raises:
        TemplateError: If the template references an unknown placeholder, or a
            placeholder whose data was not supplied.
    """
    used: set[str] = template_identifiers(template)
    unknown: set[str] = used - PLACEHOLDERS
    if unknown:
        raise TemplateError(
            "Unknown placeholder(s) in license template: "
            + ", ".join(f"${name}" for name in sorted(unknown))
        )

    supplied: dict[str, bool] = {
        PH_SOFTWARE: bool(software_name),
        PH_SOFTWARE_DESCRIPTION: bool(software_description),
    }
    for name, present in supplied.items():
        if name in used and not present:
            raise TemplateError(f"Missing {_PLACEHOLDER_OPTIONS[name]} argument")
    # Holders, like years, may be recovered from existing headers, so only warn
    if PH_HOLDERS in used and not list(holders):
        logger.warning(
            "No %s given; holders are taken from existing headers only",
            _PLACEHOLDER_OPTIONS[PH_HOLDERS],
        )
    return used


def build_mapping(context: HeaderContext, *, current_year: int | None = None) -> dict[str, str]:
    """Return the placeholder values for a merged header context.

    Args:
        context (HeaderContext): Merged header metadata.
        current_year (int | None): Override for ``$current_year`` (defaults to today).

    Returns:
        dict[str, str]: Placeholder name to value; unset values are omitted.
    """
    mapping: dict[str, str] = {
        PH_CURRENT_YEAR: str(current_year or datetime.date.today().year),
    }
    if context.software_name:
        mapping[PH_SOFTWARE] = context.software_name
    if context.software_description:
        mapping[PH_SOFTWARE_DESCRIPTION] = context.software_description
    if context.holders:
        mapping[PH_HOLDERS] = ", ".join(context.holders)
    if context.years:
        mapping[PH_YEARS] = collapse_years(context.years)
    return mapping


def expand_template(
    template: str,
    context: HeaderContext,
    *,
    current_year: int | None = None,
) -> str:
    """Substitute every placeholder of ``template``.

    Args:
        template (str): Template text.
        context (HeaderContext): Merged header metadata.
        current_year (int | None): Override for ``$current_year``.

    Returns:
        str: The expanded text.

    Raises:
        TemplateError: If a placeholder is unknown or malformed.
        MissingArgumentError: If a known placeholder has no value for this file.
    """
    mapping: dict[str, str] = build_mapping(context, current_year=current_year)
    try:
        return Template(template).substitute(mapping)
    except KeyError as exc:
        name: str = str(exc.args[0])
        if name in _PLACEHOLDER_OPTIONS:
            raise MissingArgumentError(f"Missing {_PLACEHOLDER_OPTIONS[name]} argument") from exc
        raise TemplateError(f"Unknown placeholder in license template: ${name}") from exc
    except ValueError as exc:
        raise TemplateError(f"Invalid placeholder in license template: {exc}") from exc


def wrap_line(line: str, width: int) -> list[str]:
    """Word-wrap one raw line at ``width`` columns.

    Words are never split: a word longer than ``width`` occupies its own line.
    The line's leading indentation is repeated on continuation lines. Trailing
    whitespace is removed.

    Args:
        line (str): Line to wrap (without newline).
        width (int): Maximum width, > 0.

    Returns:
        list[str]: The wrapped lines (``[""]`` for a blank line).
    """
    stripped: str = line.rstrip()
    if len(stripped) <= width:
        return [stripped]
    body: str = stripped.lstrip()
    indent: str = stripped[: len(stripped) - len(body)]
    wrapped: list[str] = textwrap.wrap(
        body,
        width=width,
        initial_indent=indent,
        subsequent_indent=indent,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return wrapped or [""]


def render(
    template: str,
    context: HeaderContext,
    *,
    current_year: int | None = None,
) -> list[str]:
    """Expand and word-wrap a license template into raw header lines.

    Leading and trailing blank lines of the expanded text are dropped; blank
    lines in between are preserved.

    Args:
        template (str): Template text.
        context (HeaderContext): Merged header metadata.
        current_year (int | None): Override for ``$current_year``.

    Returns:
        list[str]: Raw header lines without newlines.
    """
    text: str = expand_template(template, context, current_year=current_year)
    raw: list[str] = text.splitlines()

    while raw and not raw[-1].strip():
        raw.pop()
    while raw and not raw[0].strip():
        raw.pop(0)

    lines: list[str] = []
    for line in raw:
        lines.extend(wrap_line(line, context.word_wrap))
    logger.trace("Rendered %d raw header lines", len(lines))
    return lines
