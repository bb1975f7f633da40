# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Write sinks: where processed file content goes.

Sinks
-----
- FileSystemSink: writes in place, only when the content changed.
- OutputDirSink: mirrors every processed file under an output directory.
- StdoutSink: dry run; prints changed files to stdout behind a banner.

Text is written as UTF-8 with ``newline=""`` so the line endings computed by
the processor reach the destination unaltered.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TextIO

from copyright_header.constants import DRY_RUN_BANNER

if TYPE_CHECKING:
    from copyright_header.config.model import Config


@dataclass(frozen=True, slots=True)
class WriteResult:
    """Structured result of a write operation."""

    destination: str
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for the destination of processed file content."""

    # Whether files whose content did not change are written too
    writes_unchanged: bool

    def write(self, path: Path, text: str) -> WriteResult:
        """Write the processed content of ``path``.

        Args:
            path (Path): The processed source file.
            text (str): Its full new content.

        Returns:
            WriteResult: Where the content went and how many bytes were written.

        Raises:
            OSError: If the destination cannot be written.
        """
        ...


def _write_text(target: Path, text: str) -> int:
    with open(target, "w", encoding="utf-8", newline="") as fh:
        fh.write(text)
    return len(text.encode("utf-8"))


class FileSystemSink:
    """Filesystem sink writing in place to the processed path."""

    writes_unchanged: bool = False

    def write(self, path: Path, text: str) -> WriteResult:
        """Overwrite ``path`` with ``text``."""
        written: int = _write_text(path, text)
        return WriteResult(destination=str(path), bytes_written=written)


class OutputDirSink:
    """Sink mirroring processed files under an output directory.

    The mirrored path is the source path relative to ``base`` (the current
    working directory by default); paths outside ``base`` keep their full path
    below the output directory. Every processed file is written, changed or
    not, so the mirror is complete.
    """

    writes_unchanged: bool = True

    def __init__(self, output_dir: Path, *, base: Path | None = None) -> None:
        self.output_dir: Path = output_dir
        self.base: Path = (base or Path.cwd()).resolve()

    def target_for(self, path: Path) -> Path:
        """Return the mirrored destination of ``path``."""
        absolute: Path = path.resolve()
        try:
            relative: Path = absolute.relative_to(self.base)
        except ValueError:
            relative = absolute.relative_to(absolute.anchor)
        return self.output_dir / relative

    def write(self, path: Path, text: str) -> WriteResult:
        """Write ``text`` to the mirrored location of ``path``, creating directories."""
        target: Path = self.target_for(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        written: int = _write_text(target, text)
        return WriteResult(destination=str(target), bytes_written=written)


class StdoutSink:
    """Dry-run sink printing changed files to a text stream.

    Each file is preceded by a ``==> path <==`` banner line.
    """

    writes_unchanged: bool = False

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream

    @property
    def stream(self) -> TextIO:
        """The target stream (``sys.stdout`` at write time by default)."""
        return self._stream if self._stream is not None else sys.stdout

    def write(self, path: Path, text: str) -> WriteResult:
        """Print the banner and ``text``, terminating an unterminated last line."""
        out: TextIO = self.stream
        out.write(DRY_RUN_BANNER.format(path=path) + "\n")
        out.write(text)
        if text and not text.endswith(("\n", "\r")):
            out.write("\n")
        out.flush()
        return WriteResult(destination="<stdout>", bytes_written=len(text.encode("utf-8")))


def select_sink(config: Config, *, stream: TextIO | None = None) -> WriteSink:
    """Return the sink implied by the configuration.

    Dry run wins over an output directory; in-place writing is the default.

    Args:
        config (Config): Runtime configuration.
        stream (TextIO | None): Dry-run output stream (defaults to stdout).

    Returns:
        WriteSink: The sink to use.
    """
    if config.dry_run:
        return StdoutSink(stream)
    if config.output_dir is not None:
        return OutputDirSink(config.output_dir)
    return FileSystemSink()
