# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Processing modes and per-file outcomes.

Values are human-readable strings used in CLI output; compare members with
``==`` rather than identity.
"""

from __future__ import annotations

from enum import Enum

from yachalk import chalk

from copyright_header.rendering.colored_enum import ColoredStrEnum


class ProcessingMode(str, Enum):
    """What the processor does to each file."""

    ADD = "add"
    REMOVE = "remove"


class FileAction(ColoredStrEnum):
    """Outcome of processing one file."""

    # Value format: (description: str, color_renderer: ChalkBuilder)
    ADDED = ("added", chalk.green)
    REPLACED = ("replaced", chalk.cyan)
    REMOVED = ("removed", chalk.magenta)
    UNCHANGED = ("unchanged", chalk.gray)
    SKIPPED = ("skipped", chalk.yellow)
    ERROR = ("error", chalk.red_bright)

    @property
    def changed(self) -> bool:
        """Whether the action modifies the file content."""
        return self in (FileAction.ADDED, FileAction.REPLACED, FileAction.REMOVED)
