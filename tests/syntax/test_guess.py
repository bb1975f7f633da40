# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Shebang-based extension guessing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from copyright_header.syntax.guess import guess_extension_from_shebang, interpreter_from_shebang

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    ("line", "interpreter"),
    [
        ("#!/bin/sh", "sh"),
        ("#!/bin/bash -e", "bash"),
        ("#!/usr/bin/env python3", "python"),
        ("#!/usr/bin/env python3.12 -u", "python"),
        ("#!/usr/bin/env -S node --harmony", "node"),
        ("#! /usr/local/bin/ruby", "ruby"),
        ("#!/usr/bin/env", None),
        ("print('hi')", None),
    ],
)
def test_interpreter_from_shebang(line: str, interpreter: str | None) -> None:
    assert interpreter_from_shebang(line) == interpreter


def test_guess_extension_from_shebang(tmp_path: Path) -> None:
    script = tmp_path / "deploy"
    script.write_text("#!/usr/bin/env python3\nprint(1)\n", encoding="utf-8")
    assert guess_extension_from_shebang(script) == ".py"


def test_guess_extension_without_shebang_or_known_interpreter(tmp_path: Path) -> None:
    plain = tmp_path / "notes"
    plain.write_text("hello\n", encoding="utf-8")
    odd = tmp_path / "odd"
    odd.write_text("#!/usr/bin/frobnicate\n", encoding="utf-8")
    assert guess_extension_from_shebang(plain) is None
    assert guess_extension_from_shebang(odd) is None
    assert guess_extension_from_shebang(tmp_path / "missing") is None
