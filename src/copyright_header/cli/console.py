# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Console abstraction for user-facing program output.

This keeps CLI output separate from internal logging. Use it for messages
intended for end users; use `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If False, ANSI color codes are stripped. If True,
            Click still strips them when the stream is not a terminal.
        out (TextIO | None): Stream for standard output (defaults to ``sys.stdout``).
        err (TextIO | None): Stream for error output (defaults to ``sys.stderr``).
    """

    enable_color: bool
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    @property
    def _color(self) -> bool | None:
        # None lets Click auto-detect terminal support
        return None if self.enable_color else False

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self._color)

    def note(self, text: str, *, nl: bool = True) -> None:
        """Write an informational message to stderr."""
        click.echo(text, nl=nl, file=self.err or sys.stderr, color=self._color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err or sys.stderr, color=self._color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self._color, fg="bright_red"
        )
