# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Per-file results and run summaries."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from copyright_header.pipeline.status import FileAction

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of processing one file.

    Attributes:
        path (Path): The processed path.
        action (FileAction): What happened to the file.
        error_detail (str | None): Cause of a ``skipped`` or ``error`` outcome.
        syntax (str | None): Name of the resolved comment syntax, if any.
    """

    path: Path
    action: FileAction
    error_detail: str | None = None
    syntax: str | None = None

    def summary_line(self, *, color: bool = False) -> str:
        """Return a one-line, human-readable description of the result."""
        label: str = self.action.colored() if color else self.action.value
        line = f"{self.path}: {label}"
        if self.error_detail:
            line += f" ({self.error_detail})"
        return line


@dataclass
class RunSummary:
    """Counts of per-file outcomes over a run."""

    counts: Counter[FileAction] = field(default_factory=lambda: Counter[FileAction]())

    @classmethod
    def from_results(cls, results: Iterable[FileResult]) -> RunSummary:
        """Count the actions of ``results``."""
        return cls(counts=Counter(r.action for r in results))

    @property
    def total(self) -> int:
        """Number of files accounted for."""
        return sum(self.counts.values())

    @property
    def has_errors(self) -> bool:
        """Whether any file ended in ``error``."""
        return self.counts[FileAction.ERROR] > 0

    def __getitem__(self, action: FileAction) -> int:
        return self.counts[action]

    def format(self, *, color: bool = False) -> str:
        """Render the non-zero counts in declaration order, e.g. ``"2 added, 1 unchanged"``."""
        parts: list[str] = []
        for action in FileAction:
            n: int = self.counts[action]
            if n:
                text = f"{n} {action.value}"
                parts.append(action.colored(text) if color else text)
        return ", ".join(parts) if parts else "no files processed"
