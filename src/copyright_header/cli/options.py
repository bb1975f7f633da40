# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Click option groups and small resolvers used by the CLI command.

Option decorators are grouped by concern so the command definition in
`copyright_header.cli.main` stays readable.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from copyright_header.cli.errors import CopyrightHeaderUsageError
from copyright_header.config.io import available_licenses
from copyright_header.config.logging import TRACE_LEVEL, resolve_env_log_level
from copyright_header.constants import DEFAULT_MARKER, DEFAULT_MARKER_LENGTH, DEFAULT_WORD_WRAP

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def split_path_list(
    ctx: click.Context,
    param: click.Parameter,
    values: tuple[str, ...],
) -> tuple[str, ...]:
    """Click callback splitting each value on ``os.pathsep``.

    ``-a src:lib -a bin`` yields ``("src", "lib", "bin")`` on POSIX.
    """
    paths: list[str] = []
    for value in values:
        paths.extend(p for p in value.split(os.pathsep) if p)
    return tuple(paths)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: -1 (quiet), 0 (default) or the number of ``-v`` flags.

    Raises:
        CopyrightHeaderUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CopyrightHeaderUsageError(
            "The '--verbose' and '--quiet' options are mutually exclusive."
        )
    if quiet_count > 0:
        return -1
    return verbose_count


def resolve_log_level(verbosity: int) -> int | None:
    """Return the internal log level for a verbosity.

    ``COPYRIGHT_HEADER_LOG_LEVEL`` wins when set. Otherwise ``-vv`` enables
    DEBUG and ``-vvv`` TRACE; lower verbosities keep the logging default.
    """
    env_level: int | None = resolve_env_log_level()
    if env_level is not None:
        return env_level
    if verbosity >= 3:
        return TRACE_LEVEL
    if verbosity == 2:
        return logging.DEBUG
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="List every file (-v); add debug (-vv) or trace (-vvv) logging.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors and the summary.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable colored output.",
    )(f)
    return f


def license_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the license template and copyright metadata options."""
    f = click.option(
        "--license-file",
        "license_file",
        type=click.Path(dir_okay=False, path_type=str),
        help="Use a custom license template file.",
    )(f)
    f = click.option(
        "--license",
        "license",
        metavar="NAME",
        help=f"Use a bundled license template ({', '.join(available_licenses())}).",
    )(f)
    f = click.option(
        "--copyright-software",
        "copyright_software",
        metavar="NAME",
        help="Software name ($copyright_software).",
    )(f)
    f = click.option(
        "--copyright-software-description",
        "copyright_software_description",
        metavar="DESC",
        help="One-line software description ($copyright_software_description).",
    )(f)
    f = click.option(
        "--copyright-holder",
        "copyright_holders",
        multiple=True,
        metavar="NAME",
        help="Copyright holder ($copyright_holders). Repeatable.",
    )(f)
    f = click.option(
        "--copyright-year",
        "copyright_years",
        multiple=True,
        metavar="YEAR",
        help="Copyright year or range, e.g. 2016 or 2012-2014 ($copyright_years). Repeatable.",
    )(f)
    return f


def formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add header formatting and detection options."""
    f = click.option(
        "-w",
        "--word-wrap",
        "word_wrap",
        type=int,
        metavar="LEN",
        help=f"Maximum width of the header text [default: {DEFAULT_WORD_WRAP}].",
    )(f)
    f = click.option(
        "--marker-length",
        "marker_length",
        type=int,
        metavar="LEN",
        help=(
            "Number of leading lines searched for an existing header "
            f"[default: {DEFAULT_MARKER_LENGTH}]."
        ),
    )(f)
    f = click.option(
        "--marker",
        "marker",
        metavar="REGEX",
        help=f"Pattern identifying an existing license header [default: {DEFAULT_MARKER}].",
    )(f)
    return f


def input_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add path selection, syntax and output options."""
    f = click.option(
        "-a",
        "--add-path",
        "add_paths",
        multiple=True,
        callback=split_path_list,
        metavar="PATH",
        help=f"Add or update headers below PATH ('{os.pathsep}'-separated list). Repeatable.",
    )(f)
    f = click.option(
        "-r",
        "--remove-path",
        "remove_paths",
        multiple=True,
        callback=split_path_list,
        metavar="PATH",
        help=f"Remove headers below PATH ('{os.pathsep}'-separated list). Repeatable.",
    )(f)
    f = click.option(
        "--include",
        "include_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Only process files matching this gitignore-style pattern. Repeatable.",
    )(f)
    f = click.option(
        "--exclude",
        "exclude_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Skip files matching this gitignore-style pattern. Repeatable.",
    )(f)
    f = click.option(
        "-g",
        "--guess-extension",
        "guess_extension",
        is_flag=True,
        default=False,
        help="Guess the syntax of unrecognised files from their shebang.",
    )(f)
    f = click.option(
        "-c",
        "--syntax",
        "syntax_file",
        type=click.Path(dir_okay=False, path_type=str),
        help="TOML syntax table extending the bundled comment syntaxes.",
    )(f)
    f = click.option(
        "-o",
        "--output-dir",
        "output_dir",
        type=click.Path(file_okay=False, path_type=str),
        help="Write processed files below this directory instead of in place.",
    )(f)
    f = click.option(
        "-n",
        "--dry-run",
        "dry_run",
        is_flag=True,
        default=False,
        help="Print the would-be content of changed files to stdout.",
    )(f)
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=str),
        help="TOML config file ([copyright-header] or pyproject's "
        "[tool.copyright-header]). Repeatable.",
    )(f)
    return f
