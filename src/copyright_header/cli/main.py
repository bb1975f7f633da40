# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""The ``copyright-header`` command.

Flow:
    1. Resolve verbosity and configure logging.
    2. Merge defaults, ``--config`` files and CLI options; validate and freeze.
    3. Build the syntax registry (bundled table plus ``--syntax``).
    4. Walk ``--add-path`` roots, then ``--remove-path`` roots.
    5. Report per-file outcomes and a summary.

Configuration problems abort before any file is touched (exit 78). Per-file
errors do not stop the run; they make the command exit with 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from copyright_header.cli.console import ClickConsole
from copyright_header.cli.errors import CopyrightHeaderConfigError, CopyrightHeaderUsageError
from copyright_header.cli.exit_codes import ExitCode
from copyright_header.cli.options import (
    common_verbose_options,
    formatting_options,
    input_output_options,
    license_options,
    resolve_log_level,
    resolve_verbosity,
)
from copyright_header.config.logging import get_logger, setup_logging
from copyright_header.config.model import MutableConfig
from copyright_header.constants import COPYRIGHT_HEADER_VERSION
from copyright_header.errors import ConfigurationError, TemplateError
from copyright_header.pipeline.processor import FileProcessor
from copyright_header.pipeline.result import RunSummary
from copyright_header.pipeline.status import FileAction, ProcessingMode
from copyright_header.pipeline.walker import TreeWalker
from copyright_header.syntax.io import load_syntax_table
from copyright_header.syntax.registry import SyntaxRegistry

if TYPE_CHECKING:
    from copyright_header.config.logging import CopyrightHeaderLogger
    from copyright_header.config.model import Config
    from copyright_header.pipeline.result import FileResult

logger: CopyrightHeaderLogger = get_logger(__name__)

# Keys of the CLI parameters that feed the configuration layer
_CONFIG_KEYS: tuple[str, ...] = (
    "license",
    "license_file",
    "copyright_software",
    "copyright_software_description",
    "copyright_holders",
    "copyright_years",
    "word_wrap",
    "marker_length",
    "marker",
    "dry_run",
    "output_dir",
    "add_paths",
    "remove_paths",
    "guess_extension",
    "syntax_file",
    "include_patterns",
    "exclude_patterns",
)


def build_config(params: dict[str, Any], *, verbosity: int) -> Config:
    """Merge config files and CLI parameters into a validated `Config`.

    Raises:
        CopyrightHeaderConfigError: If the configuration is invalid.
    """
    args: dict[str, Any] = {key: params.get(key) for key in _CONFIG_KEYS}
    args["verbosity_level"] = verbosity
    config_files: list[Path] = [Path(p) for p in params.get("config_files") or ()]
    try:
        draft: MutableConfig = MutableConfig.load_merged(config_files=config_files, args=args)
        return draft.freeze()
    except (ConfigurationError, TemplateError) as exc:
        raise CopyrightHeaderConfigError(str(exc)) from exc


def build_registry(config: Config) -> SyntaxRegistry:
    """Return the bundled registry, extended by the ``--syntax`` table if given.

    Raises:
        CopyrightHeaderConfigError: If the syntax table is invalid.
    """
    if config.syntax_file is None:
        return SyntaxRegistry.default()
    try:
        return SyntaxRegistry.from_mapping(load_syntax_table(config.syntax_file))
    except ConfigurationError as exc:
        raise CopyrightHeaderConfigError(str(exc)) from exc


def report(
    console: ClickConsole,
    results: list[FileResult],
    *,
    verbosity: int,
    to_stderr: bool,
    color: bool,
) -> None:
    """Print per-file lines and the summary.

    Unchanged files are listed only with ``-v``; with ``-q`` only errors are.
    """
    emit = console.note if to_stderr else console.print
    for result in results:
        if result.action == FileAction.ERROR:
            console.error(result.summary_line())
            continue
        if verbosity < 0:
            continue
        if result.action == FileAction.UNCHANGED and verbosity < 1:
            continue
        emit(result.summary_line(color=color))
    emit(RunSummary.from_results(results).format(color=color))


@click.command(
    name="copyright-header",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Add, update or remove license headers in source files.",
)
@license_options
@formatting_options
@input_output_options
@common_verbose_options
@click.version_option(
    COPYRIGHT_HEADER_VERSION,
    "-V",
    "--version",
    prog_name="copyright-header",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool, **params: Any) -> None:
    """Entry point for the ``copyright-header`` command."""
    verbosity: int = resolve_verbosity(verbose, quiet)
    setup_logging(level=resolve_log_level(verbosity))

    console = ClickConsole(enable_color=not no_color)
    ctx.obj = {"console": console, "verbosity_level": verbosity}

    if not params.get("add_paths") and not params.get("remove_paths"):
        raise CopyrightHeaderUsageError("Missing --add-path or --remove-path argument")

    config: Config = build_config(params, verbosity=verbosity)
    registry: SyntaxRegistry = build_registry(config)

    if config.dry_run:
        console.note("-- DRY RUN --")

    processor = FileProcessor(config, registry=registry)
    walker = TreeWalker(
        include_patterns=config.include_patterns,
        exclude_patterns=config.exclude_patterns,
    )
    results: list[FileResult] = []
    if config.add_paths:
        results.extend(walker.walk(config.add_paths, ProcessingMode.ADD, processor))
    if config.remove_paths:
        results.extend(walker.walk(config.remove_paths, ProcessingMode.REMOVE, processor))

    report(
        console,
        results,
        verbosity=verbosity,
        to_stderr=config.dry_run,
        color=not no_color,
    )

    if RunSummary.from_results(results).has_errors:
        ctx.exit(ExitCode.FAILURE)
    ctx.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
