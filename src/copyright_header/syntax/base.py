# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Comment syntax descriptor.

A `SyntaxDescriptor` tells the header engine how comments look in a family of
files: a line-comment token, a block-comment token pair, or both. When a block
comment is available it takes precedence, both for rendering and matching.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SyntaxDescriptor:
    """Comment syntax for one family of files.

    Attributes:
        name (str): Unique identifier, e.g. ``"python"``.
        extensions (frozenset[str]): File extensions including the leading dot.
        filenames (frozenset[str]): Exact basenames, e.g. ``"Makefile"``.
        line_comment (str | None): Line-comment token, e.g. ``"#"``.
        block_comment (tuple[str, str] | None): Block start and end tokens,
            e.g. ``("/*", " */")``.
        block_line_prefix (str): Prefix of each header line inside a block.
        allow_shebang (bool): Whether a leading ``#!`` line is kept above the header.
        encoding_line_regex (str | None): Pattern of encoding/magic lines kept
            above the header (e.g. ``# -*- coding: utf-8 -*-``).
    """

    name: str
    extensions: frozenset[str] = field(default_factory=frozenset)
    filenames: frozenset[str] = field(default_factory=frozenset)
    line_comment: str | None = None
    block_comment: tuple[str, str] | None = None
    block_line_prefix: str = "  "
    allow_shebang: bool = False
    encoding_line_regex: str | None = None

    def __post_init__(self) -> None:
        """Validate the comment tokens.

        Raises:
            ValueError: If no comment style is declared, a token is blank, an
                extension lacks its leading dot, or the encoding regex is invalid.
        """
        if self.line_comment is None and self.block_comment is None:
            raise ValueError(f"Syntax '{self.name}' declares no comment style")
        if self.line_comment is not None and not self.line_comment.strip():
            raise ValueError(f"Syntax '{self.name}' has a blank line-comment token")
        if self.block_comment is not None and not all(t.strip() for t in self.block_comment):
            raise ValueError(f"Syntax '{self.name}' has a blank block-comment token")
        for ext in self.extensions:
            if not ext.startswith("."):
                raise ValueError(f"Syntax '{self.name}': extension {ext!r} must start with '.'")
        if self.encoding_line_regex is not None:
            try:
                re.compile(self.encoding_line_regex)
            except re.error as exc:
                raise ValueError(
                    f"Syntax '{self.name}': invalid encoding_line_regex: {exc}"
                ) from exc

    @property
    def block_start(self) -> str | None:
        """The block start token without surrounding whitespace."""
        return self.block_comment[0].strip() if self.block_comment else None

    @property
    def block_end(self) -> str | None:
        """The block end token without surrounding whitespace."""
        return self.block_comment[1].strip() if self.block_comment else None

    def opens_block(self, line: str) -> bool:
        """Return True if ``line`` starts a block comment."""
        start: str | None = self.block_start
        return start is not None and line.lstrip().startswith(start)

    def is_line_comment(self, line: str) -> bool:
        """Return True if ``line`` is a line comment."""
        return self.line_comment is not None and line.lstrip().startswith(self.line_comment)
