# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Deterministic traversal of the paths given on the command line.

- A file path is processed directly (no filtering).
- A directory is walked recursively in lexicographic order. Symbolic links
  found inside a tree are not followed.
- Gitignore-style include/exclude patterns (via `pathspec`) are matched
  against paths relative to the walked directory. Excluded directories are
  pruned; include patterns select files.
- A missing or unlistable path yields an ``error`` result and the walk
  continues with the next path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from copyright_header.config.logging import get_logger
from copyright_header.constants import DEFAULT_EXCLUDE_PATTERNS
from copyright_header.pipeline.result import FileResult
from copyright_header.pipeline.status import FileAction

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from copyright_header.config.logging import CopyrightHeaderLogger
    from copyright_header.pipeline.processor import FileProcessor
    from copyright_header.pipeline.status import ProcessingMode

logger: CopyrightHeaderLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style path relative to ``base`` for PathSpec matching."""
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


class TreeWalker:
    """Expand paths into files and feed them to a `FileProcessor`.

    Args:
        include_patterns (Iterable[str]): Files must match one of these (when given).
        exclude_patterns (Iterable[str]): Files and directories matching these are skipped.
    """

    def __init__(
        self,
        *,
        include_patterns: Iterable[str] = (),
        exclude_patterns: Iterable[str] = DEFAULT_EXCLUDE_PATTERNS,
    ) -> None:
        includes: list[str] = list(include_patterns)
        excludes: list[str] = list(exclude_patterns)
        self._include: PathSpec | None = (
            PathSpec.from_lines(GitWildMatchPattern, includes) if includes else None
        )
        self._exclude: PathSpec | None = (
            PathSpec.from_lines(GitWildMatchPattern, excludes) if excludes else None
        )

    def is_excluded_dir(self, rel: str) -> bool:
        """Whether the directory at ``rel`` (relative to the root) is pruned."""
        return self._exclude is not None and self._exclude.match_file(rel + "/")

    def is_selected_file(self, rel: str) -> bool:
        """Whether the file at ``rel`` (relative to the root) is processed."""
        if self._exclude is not None and self._exclude.match_file(rel):
            return False
        return self._include is None or self._include.match_file(rel)

    def iter_files(self, root: Path, errors: list[FileResult] | None = None) -> Iterator[Path]:
        """Yield the selected files below ``root`` in lexicographic order.

        Args:
            root (Path): Directory to walk.
            errors (list[FileResult] | None): Receives an ``error`` result for
                each directory that cannot be listed.

        Yields:
            Path: Selected regular files.
        """
        stack: list[Path] = [root]
        while stack:
            directory: Path = stack.pop()
            try:
                entries: list[Path] = sorted(directory.iterdir(), key=lambda p: p.name)
            except OSError as exc:
                logger.error("Cannot list %s: %s", directory, exc)
                if errors is not None:
                    errors.append(
                        FileResult(path=directory, action=FileAction.ERROR, error_detail=str(exc))
                    )
                continue

            subdirs: list[Path] = []
            for entry in entries:
                if entry.is_symlink():
                    logger.debug("Not following symlink %s", entry)
                    continue
                rel: str = _rel_for_match(entry, root)
                if entry.is_dir():
                    if self.is_excluded_dir(rel):
                        logger.trace("Pruned directory %s", entry)
                        continue
                    subdirs.append(entry)
                elif entry.is_file() and self.is_selected_file(rel):
                    yield entry
            # Files of a directory come before its subdirectories, which are
            # visited in name order
            stack.extend(reversed(subdirs))

    def walk(
        self,
        paths: Iterable[Path],
        mode: ProcessingMode,
        processor: FileProcessor,
    ) -> list[FileResult]:
        """Process every file reachable from ``paths``.

        Args:
            paths (Iterable[Path]): Files and directories, in order.
            mode (ProcessingMode): Add/update or remove.
            processor (FileProcessor): Per-file processor.

        Returns:
            list[FileResult]: One result per processed file (plus errors for
                missing paths), in traversal order.
        """
        results: list[FileResult] = []
        for path in paths:
            if path.is_dir():
                logger.info("Walking %s", path)
                errors: list[FileResult] = []
                for file in self.iter_files(path, errors):
                    results.extend(errors)
                    errors.clear()
                    results.append(processor.process(file, mode))
                results.extend(errors)
            elif path.is_file():
                results.append(processor.process(path, mode))
            else:
                logger.error("No such file or directory: %s", path)
                results.append(
                    FileResult(
                        path=path,
                        action=FileAction.ERROR,
                        error_detail="No such file or directory",
                    )
                )
        return results


def walk(
    paths: Iterable[Path],
    mode: ProcessingMode,
    processor: FileProcessor,
    *,
    include_patterns: Iterable[str] = (),
    exclude_patterns: Iterable[str] = DEFAULT_EXCLUDE_PATTERNS,
) -> list[FileResult]:
    """Process every file reachable from ``paths`` (see `TreeWalker.walk`)."""
    walker = TreeWalker(include_patterns=include_patterns, exclude_patterns=exclude_patterns)
    return walker.walk(paths, mode, processor)
