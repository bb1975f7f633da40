# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Click exceptions raised by the CLI.

Domain errors from `copyright_header.errors` are translated into these at the
command boundary so that each class of failure gets its own exit code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from copyright_header.cli.exit_codes import ExitCode


class CopyrightHeaderCliError(click.ClickException):
    """Base class for all Copyright Header CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colour is applied in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the project console when one is available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is not None:
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class CopyrightHeaderUsageError(CopyrightHeaderCliError):
    """Invalid command-line invocation (e.g. nothing to process)."""

    exit_code = ExitCode.USAGE_ERROR


class CopyrightHeaderConfigError(CopyrightHeaderCliError):
    """Missing, ambiguous or invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR
