# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Per-file header processing.

`FileProcessor` drives one file through:

    resolve syntax -> read -> match -> merge -> render -> decorate -> splice -> write

and short-circuits to ``skipped`` (unknown syntax) or ``error`` (I/O, decoding
or missing per-file data). Failures never escape `FileProcessor.process`, so a
run always continues with the next file.

The pure part of the work (`plan_add`, `plan_remove`) operates on line lists
and is usable without any file system access.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from copyright_header.config.logging import get_logger
from copyright_header.errors import MissingArgumentError, TemplateError, UnknownSyntaxError
from copyright_header.header.decorator import decorate
from copyright_header.header.matcher import match_header
from copyright_header.header.merger import merge
from copyright_header.header.model import HeaderRequest
from copyright_header.header.renderer import render
from copyright_header.header.splice import (
    detect_newline,
    insert_header,
    remove_header,
    replace_header,
)
from copyright_header.pipeline.result import FileResult
from copyright_header.pipeline.sinks import select_sink
from copyright_header.pipeline.status import FileAction, ProcessingMode
from copyright_header.syntax.guess import guess_extension_from_shebang
from copyright_header.syntax.registry import SyntaxRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from copyright_header.config.logging import CopyrightHeaderLogger
    from copyright_header.config.model import Config
    from copyright_header.header.model import HeaderRegion
    from copyright_header.pipeline.sinks import WriteResult, WriteSink
    from copyright_header.syntax.base import SyntaxDescriptor
    from copyright_header.syntax.guess import ExtensionGuesser

logger: CopyrightHeaderLogger = get_logger(__name__)


def read_lines(path: Path) -> list[str]:
    """Read a UTF-8 text file into lines, keeping their original endings.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, encoding="utf-8", newline="") as fh:
        return fh.read().splitlines(keepends=True)


def _render_header(
    region: HeaderRegion,
    request: HeaderRequest,
    template: str,
    syntax: SyntaxDescriptor,
    newline: str,
    current_year: int | None,
) -> list[str]:
    context = merge(region, request)
    return decorate(render(template, context, current_year=current_year), syntax, newline)


def locate_header(
    lines: Sequence[str],
    syntax: SyntaxDescriptor,
    request: HeaderRequest,
    template: str,
    *,
    newline: str = "\n",
    current_year: int | None = None,
) -> tuple[HeaderRegion, list[str]]:
    """Find the header region and render the header that belongs there.

    The search depth is at least the marker window and at least the length
    of the rendered header, so headers longer than the marker window are
    still recognised on the next run.

    Args:
        lines (Sequence[str]): File lines.
        syntax (SyntaxDescriptor): The file's comment syntax.
        request (HeaderRequest): Requested metadata.
        template (str): License template.
        newline (str): The file's newline style.
        current_year (int | None): Override for ``$current_year``.

    Returns:
        tuple[HeaderRegion, list[str]]: The region and the decorated header.

    Raises:
        MissingArgumentError: If the merged metadata lacks data the template needs.
        TemplateError: If the template cannot be expanded.
    """
    depth: int = request.marker_search_lines
    region: HeaderRegion = match_header(
        lines, syntax, request.marker_regex, depth, request.word_wrap
    )
    header: list[str] = _render_header(region, request, template, syntax, newline, current_year)
    if len(header) > depth:
        depth = len(header)
        region = match_header(lines, syntax, request.marker_regex, depth, request.word_wrap)
        header = _render_header(region, request, template, syntax, newline, current_year)
    return region, header


def plan_add(
    lines: Sequence[str],
    syntax: SyntaxDescriptor,
    request: HeaderRequest,
    template: str,
    *,
    current_year: int | None = None,
) -> tuple[FileAction, list[str]]:
    """Compute the content of a file after adding or updating its header.

    Args:
        lines (Sequence[str]): Current file lines.
        syntax (SyntaxDescriptor): The file's comment syntax.
        request (HeaderRequest): Requested metadata.
        template (str): License template.
        current_year (int | None): Override for ``$current_year``.

    Returns:
        tuple[FileAction, list[str]]: ``added``, ``replaced`` or ``unchanged``
            with the resulting lines.
    """
    newline: str = detect_newline(lines)
    region, header = locate_header(
        lines, syntax, request, template, newline=newline, current_year=current_year
    )
    if not region.matched:
        return FileAction.ADDED, insert_header(lines, region.start_line, header, newline)
    updated: list[str] = replace_header(lines, region, header)
    if updated == list(lines):
        return FileAction.UNCHANGED, updated
    return FileAction.REPLACED, updated


def plan_remove(
    lines: Sequence[str],
    syntax: SyntaxDescriptor,
    request: HeaderRequest,
    template: str,
    *,
    current_year: int | None = None,
) -> tuple[FileAction, list[str]]:
    """Compute the content of a file after removing its header.

    The template is only used to size the search window; missing copyright
    data never prevents a removal.

    Returns:
        tuple[FileAction, list[str]]: ``removed`` or ``unchanged`` with the
            resulting lines.
    """
    newline: str = detect_newline(lines)
    try:
        region, _ = locate_header(
            lines, syntax, request, template, newline=newline, current_year=current_year
        )
    except (MissingArgumentError, TemplateError) as exc:
        logger.debug("Cannot size the header search window from the template: %s", exc)
        region = match_header(
            lines, syntax, request.marker_regex, request.marker_search_lines, request.word_wrap
        )
    if not region.matched:
        return FileAction.UNCHANGED, list(lines)
    return FileAction.REMOVED, remove_header(lines, region)


class FileProcessor:
    """Add, update or remove the license header of individual files.

    Args:
        config (Config): Frozen runtime configuration.
        registry (SyntaxRegistry | None): Syntax lookup (bundled table by default).
        sink (WriteSink | None): Output destination (derived from ``config`` by default).
        guesser (ExtensionGuesser | None): Fallback extension guesser; by default
            the shebang guesser when ``config.guess_extension`` is set.
        current_year (int | None): Override for ``$current_year`` (today by default).
    """

    def __init__(
        self,
        config: Config,
        *,
        registry: SyntaxRegistry | None = None,
        sink: WriteSink | None = None,
        guesser: ExtensionGuesser | None = None,
        current_year: int | None = None,
    ) -> None:
        self.config: Config = config
        self.registry: SyntaxRegistry = registry or SyntaxRegistry.default()
        self.sink: WriteSink = sink or select_sink(config)
        if guesser is None and config.guess_extension:
            guesser = guess_extension_from_shebang
        self.guesser: ExtensionGuesser | None = guesser
        self.request: HeaderRequest = HeaderRequest.from_config(config)
        self.current_year: int | None = current_year

    def add(self, path: Path) -> FileResult:
        """Add or update the header of ``path``."""
        return self.process(path, ProcessingMode.ADD)

    def remove(self, path: Path) -> FileResult:
        """Remove the header of ``path``."""
        return self.process(path, ProcessingMode.REMOVE)

    def resolve_syntax(self, path: Path) -> SyntaxDescriptor:
        """Return the comment syntax of ``path``, consulting the guesser last.

        Raises:
            UnknownSyntaxError: If no syntax applies.
        """
        try:
            return self.registry.lookup(path)
        except UnknownSyntaxError:
            if self.guesser is None:
                raise
            guessed: str | None = self.guesser(path)
            if guessed is None:
                raise
            logger.debug("Guessed extension %s for %s", guessed, path)
            return self.registry.lookup(path, fallback_extension=guessed)

    def process(self, path: Path, mode: ProcessingMode) -> FileResult:
        """Process one file in the given mode.

        Args:
            path (Path): The file.
            mode (ProcessingMode): Add/update or remove.

        Returns:
            FileResult: The outcome; never raises for per-file problems.
        """
        logger.trace("Processing %s (%s)", path, mode.value)
        try:
            syntax: SyntaxDescriptor = self.resolve_syntax(path)
        except UnknownSyntaxError as exc:
            logger.info("Skipping %s: %s", path, exc)
            return FileResult(path=path, action=FileAction.SKIPPED, error_detail=str(exc))

        try:
            lines: list[str] = read_lines(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot read %s: %s", path, exc)
            return FileResult(
                path=path, action=FileAction.ERROR, error_detail=str(exc), syntax=syntax.name
            )

        template: str = self.config.license_template
        try:
            if mode == ProcessingMode.ADD:
                action, updated = plan_add(
                    lines, syntax, self.request, template, current_year=self.current_year
                )
            else:
                action, updated = plan_remove(
                    lines, syntax, self.request, template, current_year=self.current_year
                )
        except (MissingArgumentError, TemplateError) as exc:
            logger.error("Cannot render header for %s: %s", path, exc)
            return FileResult(
                path=path, action=FileAction.ERROR, error_detail=str(exc), syntax=syntax.name
            )

        if action.changed or self.sink.writes_unchanged:
            try:
                written: WriteResult = self.sink.write(path, "".join(updated))
            except OSError as exc:
                logger.error("Cannot write %s: %s", path, exc)
                return FileResult(
                    path=path, action=FileAction.ERROR, error_detail=str(exc), syntax=syntax.name
                )
            logger.debug(
                "Wrote %s to %s (%d bytes)", path, written.destination, written.bytes_written
            )

        logger.info("%s: %s (%s)", path, action.value, syntax.name)
        return FileResult(path=path, action=action, syntax=syntax.name)
