# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Comment decoration of raw header lines.

A descriptor with a block comment is decorated as a block::

    /*
     * Copyright (C) 2016 Jane Doe
     */

otherwise each line gets the line-comment token::

    # Copyright (C) 2016 Jane Doe
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from copyright_header.syntax.base import SyntaxDescriptor


def decorate(lines: Sequence[str], syntax: SyntaxDescriptor, newline: str = "\n") -> list[str]:
    """Wrap raw header lines in the comment delimiters of ``syntax``.

    Args:
        lines (Sequence[str]): Raw header lines (no newlines).
        syntax (SyntaxDescriptor): Comment syntax of the target file.
        newline (str): Line terminator to append (the file's own style).

    Returns:
        list[str]: Decorated lines, each ending with ``newline`` and free of
            trailing whitespace.
    """
    if syntax.block_comment is not None:
        start, end = syntax.block_comment
        decorated: list[str] = [start.rstrip() + newline]
        decorated.extend((syntax.block_line_prefix + line).rstrip() + newline for line in lines)
        decorated.append(end.rstrip() + newline)
        return decorated

    token: str = syntax.line_comment or ""
    return [(f"{token} {line}" if line else token).rstrip() + newline for line in lines]
