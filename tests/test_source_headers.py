# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""The project's own files carry a header this tool recognises."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from copyright_header.constants import DEFAULT_MARKER
from copyright_header.header.matcher import match_header

if TYPE_CHECKING:
    from copyright_header.syntax.registry import SyntaxRegistry

ROOT: Path = Path(__file__).resolve().parents[1]

SOURCES: list[Path] = sorted(
    [
        *(ROOT / "src").rglob("*.py"),
        *(ROOT / "tests").rglob("*.py"),
        ROOT / "noxfile.py",
        ROOT / "pyproject.toml",
    ]
)


@pytest.mark.parametrize("path", SOURCES, ids=lambda p: p.relative_to(ROOT).as_posix())
def test_project_file_header(registry: SyntaxRegistry, path: Path) -> None:
    lines: list[str] = path.read_text(encoding="utf-8").splitlines(keepends=True)
    region = match_header(lines, registry.lookup(path.name), DEFAULT_MARKER, 20)
    assert region.matched
    assert region.start_line == 0
    assert region.extracted_years == frozenset({2025})
    assert region.extracted_holders == ("The Copyright Header authors",)
