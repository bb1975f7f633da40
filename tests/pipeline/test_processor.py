# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Per-file add/update/remove behaviour of `FileProcessor`."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from copyright_header.pipeline.processor import FileProcessor, plan_add, plan_remove, read_lines
from copyright_header.pipeline.sinks import OutputDirSink, StdoutSink
from copyright_header.pipeline.status import FileAction, ProcessingMode
from tests.helpers import SHORT_TEMPLATE, make_config, make_request, short_config

if TYPE_CHECKING:
    from copyright_header.syntax.base import SyntaxDescriptor

pytestmark: pytest.MarkDecorator = pytest.mark.pipeline

SHORT_HEADER: str = "# Copyright (C) 2016 Erik\n# Licensed under the MIT license.\n"


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


def _read(path: Path) -> str:
    return path.read_bytes().decode("utf-8")


# ------------------------------ add ------------------------------


def test_add_scenario_a_py(tmp_path: Path) -> None:
    """Bundled MIT header above unchanged content."""
    original = "import sys\n\nprint(sys.argv)\n"
    f = _write(tmp_path / "a.py", original)
    result = FileProcessor(make_config()).add(f)

    assert result.action == FileAction.ADDED
    assert result.syntax == "python"
    text = _read(f)
    header, _, rest = text.partition("\n\n")
    assert all(line.startswith("#") for line in header.splitlines())
    assert "Erik" in header
    assert "2016" in header
    assert text.startswith("# Tool - A tool\n# Copyright (C) 2016 Erik\n#\n")
    assert text.endswith("\n\n" + original)
    assert rest.endswith(original)


def test_add_is_idempotent(tmp_path: Path) -> None:
    f = _write(tmp_path / "a.py", "x = 1\n")
    processor = FileProcessor(make_config())
    assert processor.add(f).action == FileAction.ADDED
    once = _read(f)
    assert processor.add(f).action == FileAction.UNCHANGED
    assert _read(f) == once


def test_long_header_stays_idempotent(tmp_path: Path) -> None:
    """A header longer than the marker window is still found on the next run."""
    f = _write(tmp_path / "a.c", "int x;\n")
    processor = FileProcessor(make_config(license_name="GPL3", marker_length=3, word_wrap=30))
    assert processor.add(f).action == FileAction.ADDED
    assert len(_read(f).splitlines()) > 10
    assert processor.add(f).action == FileAction.UNCHANGED


def test_add_exact_output(tmp_path: Path) -> None:
    f = _write(tmp_path / "a.py", "x = 1\n")
    FileProcessor(short_config(tmp_path)).add(f)
    assert _read(f) == SHORT_HEADER + "\nx = 1\n"


def test_add_to_empty_file(tmp_path: Path) -> None:
    f = _write(tmp_path / "empty.py", "")
    processor = FileProcessor(short_config(tmp_path))
    assert processor.add(f).action == FileAction.ADDED
    assert _read(f) == SHORT_HEADER
    assert processor.add(f).action == FileAction.UNCHANGED


def test_add_keeps_shebang_and_encoding_lines_on_top(tmp_path: Path) -> None:
    preamble = "#!/usr/bin/env python\n# -*- coding: utf-8 -*-\n"
    f = _write(tmp_path / "tool.py", preamble + "print(1)\n")
    FileProcessor(short_config(tmp_path)).add(f)
    assert _read(f) == preamble + SHORT_HEADER + "\nprint(1)\n"


def test_add_block_comment_header(tmp_path: Path) -> None:
    f = _write(tmp_path / "main.c", "int main(void) { return 0; }\n")
    FileProcessor(short_config(tmp_path)).add(f)
    assert _read(f) == (
        "/*\n"
        " * Copyright (C) 2016 Erik\n"
        " * Licensed under the MIT license.\n"
        " */\n"
        "\n"
        "int main(void) { return 0; }\n"
    )


def test_add_preserves_crlf_and_missing_final_newline(tmp_path: Path) -> None:
    f = _write(tmp_path / "a.py", "x = 1\r\ny = 2")
    FileProcessor(short_config(tmp_path)).add(f)
    text = _read(f)
    assert text == SHORT_HEADER.replace("\n", "\r\n") + "\r\nx = 1\r\ny = 2"
    assert text.count("\n") == text.count("\r\n")


def test_leading_comment_without_marker_is_left_alone(tmp_path: Path) -> None:
    original = "# Helpers for the build.\nimport os\n"
    f = _write(tmp_path / "a.py", original)
    assert FileProcessor(short_config(tmp_path)).add(f).action == FileAction.ADDED
    assert _read(f) == SHORT_HEADER + "\n" + original


def test_update_merges_years_and_holders(tmp_path: Path) -> None:
    """Existing years and holders are kept; requested ones are added."""
    f = _write(
        tmp_path / "a.py",
        "# Copyright (C) 2012-2014 Erik\n# Licensed under the MIT license.\n\ncode()\n",
    )
    config = short_config(tmp_path, holders=["Jane"], years=["2016"])
    assert FileProcessor(config).add(f).action == FileAction.REPLACED
    assert _read(f) == (
        "# Copyright (C) 2012-2014, 2016 Erik, Jane\n"
        "# Licensed under the MIT license.\n"
        "\n"
        "code()\n"
    )


def test_replace_keeps_content_below_the_header(tmp_path: Path) -> None:
    body = "\n\n# unrelated\nx = 1\n"
    f = _write(tmp_path / "a.py", "# License: proprietary, Copyright 2010 Old Corp\n" + body)
    FileProcessor(short_config(tmp_path, holders=["Erik"])).add(f)
    text = _read(f)
    assert text.endswith(body)
    assert text.startswith("# Copyright (C) 2010, 2016 Old Corp, Erik\n")


def test_years_may_come_from_the_file_alone(tmp_path: Path) -> None:
    f = _write(tmp_path / "a.py", "# Copyright (C) 2014 Erik\n# License: MIT\n\nx = 1\n")
    config = short_config(tmp_path, holders=[], years=[])
    assert FileProcessor(config).add(f).action == FileAction.REPLACED
    assert _read(f).startswith("# Copyright (C) 2014 Erik\n# Licensed under the MIT license.\n")


def test_missing_years_is_a_per_file_error(tmp_path: Path) -> None:
    f = _write(tmp_path / "a.py", "x = 1\n")
    result = FileProcessor(short_config(tmp_path, years=[])).add(f)
    assert result.action == FileAction.ERROR
    assert result.error_detail == "Missing --copyright-year argument"
    assert _read(f) == "x = 1\n"


LONG_HOLDERS: list[str] = [
    "Erik Osterman <e@osterman.com>",
    "Jane Doe <jane@example.com>",
    "Acme Widgets International",
]


@pytest.mark.parametrize("word_wrap", [60, 80])
def test_wrapped_copyright_line_stays_idempotent(tmp_path: Path, word_wrap: int) -> None:
    f = _write(tmp_path / "a.py", "x = 1\n")
    processor = FileProcessor(make_config(holders=LONG_HOLDERS, word_wrap=word_wrap))
    assert processor.add(f).action == FileAction.ADDED
    header = _read(f).splitlines()
    assert header[1].startswith("# Copyright (C) 2016 Erik Osterman")
    assert header[2] != "#"
    assert processor.add(f).action == FileAction.UNCHANGED


def test_wrapped_metadata_in_the_file_is_kept(tmp_path: Path) -> None:
    f = _write(
        tmp_path / "a.py",
        "# Copyright (C) 2001, 2003, 2005, 2007,\n"
        "# 2009 Acme Corp\n"
        "# Licensed under the MIT license.\n"
        "\n"
        "x = 1\n",
    )
    config = short_config(tmp_path, holders=["B"], years=["2015"])
    assert FileProcessor(config).add(f).action == FileAction.REPLACED
    assert _read(f) == (
        "# Copyright (C) 2001, 2003, 2005, 2007, 2009, 2015 Acme Corp, B\n"
        "# Licensed under the MIT license.\n"
        "\n"
        "x = 1\n"
    )


def test_lone_shebang_without_newline(tmp_path: Path) -> None:
    f = _write(tmp_path / "run.sh", "#!/bin/sh")
    processor = FileProcessor(short_config(tmp_path))
    assert processor.add(f).action == FileAction.ADDED
    assert _read(f) == "#!/bin/sh\n" + SHORT_HEADER.rstrip("\n")
    assert processor.add(f).action == FileAction.UNCHANGED
    assert processor.remove(f).action == FileAction.REMOVED
    assert _read(f) == "#!/bin/sh"


# ------------------------------ remove ------------------------------


def test_remove_without_header_is_unchanged(tmp_path: Path) -> None:
    f = _write(tmp_path / "a.py", "# just a note\nx = 1\n")
    before = f.stat().st_mtime_ns
    result = FileProcessor(short_config(tmp_path)).remove(f)
    assert result.action == FileAction.UNCHANGED
    assert _read(f) == "# just a note\nx = 1\n"
    assert f.stat().st_mtime_ns == before


@pytest.mark.parametrize(
    ("name", "original"),
    [
        ("a.py", "import os\n"),
        ("b.py", "#!/usr/bin/env python\nprint(1)\n"),
        ("c.py", "\n\nx = 1"),
        ("d.c", "int x;\r\n"),
        ("e.html", "<p>hi</p>\n"),
        ("f.sh", ""),
        ("g.sh", "#!/bin/sh"),
        ("h.sh", "#!/bin/sh\r\n"),
    ],
)
def test_add_then_remove_round_trip(tmp_path: Path, name: str, original: str) -> None:
    f = _write(tmp_path / name, original)
    processor = FileProcessor(make_config())
    assert processor.process(f, ProcessingMode.ADD).action == FileAction.ADDED
    assert processor.process(f, ProcessingMode.REMOVE).action == FileAction.REMOVED
    assert _read(f) == original


def test_remove_ignores_missing_copyright_data(tmp_path: Path) -> None:
    """Removal works even when the template could not be rendered for the file."""
    f = _write(tmp_path / "a.py", "# Copyright Erik\n\nx = 1\n")
    result = FileProcessor(short_config(tmp_path, holders=[], years=[])).remove(f)
    assert result.action == FileAction.REMOVED
    assert _read(f) == "x = 1\n"


# ------------------------------ outcomes ------------------------------


def test_unknown_syntax_is_skipped(tmp_path: Path) -> None:
    f = _write(tmp_path / "data.unknownext", "x\n")
    result = FileProcessor(short_config(tmp_path)).add(f)
    assert result.action == FileAction.SKIPPED
    assert result.error_detail == "No comment syntax known for 'data.unknownext'"
    assert _read(f) == "x\n"


def test_guess_extension_from_shebang(tmp_path: Path) -> None:
    f = _write(tmp_path / "bin" / "deploy", "#!/usr/bin/env python3\nprint(1)\n")
    assert FileProcessor(short_config(tmp_path)).add(f).action == FileAction.SKIPPED

    result = FileProcessor(short_config(tmp_path, guess_extension=True)).add(f)
    assert result.action == FileAction.ADDED
    assert result.syntax == "python"
    assert _read(f) == "#!/usr/bin/env python3\n" + SHORT_HEADER + "\nprint(1)\n"


def test_custom_guesser_is_consulted() -> None:
    processor = FileProcessor(make_config(), guesser=lambda path: ".rb")
    assert processor.resolve_syntax(Path("Brewfile")).name == "ruby"


def test_undecodable_file_is_an_error(tmp_path: Path) -> None:
    f = tmp_path / "bin.py"
    f.write_bytes(b"\xff\xfe\x00 not utf-8")
    result = FileProcessor(short_config(tmp_path)).add(f)
    assert result.action == FileAction.ERROR
    assert result.syntax == "python"
    assert f.read_bytes() == b"\xff\xfe\x00 not utf-8"


def test_missing_file_is_an_error(tmp_path: Path) -> None:
    result = FileProcessor(short_config(tmp_path)).add(tmp_path / "gone.py")
    assert result.action == FileAction.ERROR


# ------------------------------ sinks ------------------------------


def test_dry_run_prints_changed_files_only(tmp_path: Path) -> None:
    changed = _write(tmp_path / "a.py", "x = 1")
    clean = _write(tmp_path / "b.py", SHORT_HEADER + "\ny = 2\n")
    stream = io.StringIO()
    processor = FileProcessor(short_config(tmp_path, dry_run=True), sink=StdoutSink(stream))

    assert processor.add(changed).action == FileAction.ADDED
    assert processor.add(clean).action == FileAction.UNCHANGED

    assert stream.getvalue() == f"==> {changed} <==\n" + SHORT_HEADER + "\nx = 1\n"
    assert _read(changed) == "x = 1"


def test_output_dir_mirrors_every_processed_file(tmp_path: Path) -> None:
    src = tmp_path / "proj"
    changed = _write(src / "pkg" / "a.py", "x = 1\n")
    clean = _write(src / "pkg" / "b.py", SHORT_HEADER + "\ny = 2\n")
    out = tmp_path / "out"
    sink = OutputDirSink(out, base=src)
    processor = FileProcessor(short_config(tmp_path, output_dir=out), sink=sink)

    processor.add(changed)
    processor.add(clean)

    assert _read(changed) == "x = 1\n"
    assert _read(out / "pkg" / "a.py") == SHORT_HEADER + "\nx = 1\n"
    assert _read(out / "pkg" / "b.py") == SHORT_HEADER + "\ny = 2\n"


def test_write_destination_is_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)
    f = _write(tmp_path / "proj" / "a.py", "x = 1\n")
    out = tmp_path / "out"
    sink = OutputDirSink(out, base=tmp_path / "proj")
    FileProcessor(short_config(tmp_path, output_dir=out), sink=sink).add(f)
    assert f"Wrote {f} to {out / 'a.py'}" in caplog.text


def test_output_dir_outside_base_keeps_full_path(tmp_path: Path) -> None:
    sink = OutputDirSink(tmp_path / "out", base=tmp_path / "elsewhere")
    source = (tmp_path / "x" / "a.py").resolve()
    target = sink.target_for(source)
    assert target == tmp_path / "out" / source.relative_to(source.anchor)


def test_write_failure_is_an_error(tmp_path: Path) -> None:
    f = _write(tmp_path / "a.py", "x = 1\n")
    blocker = _write(tmp_path / "out", "not a directory")
    processor = FileProcessor(
        short_config(tmp_path), sink=OutputDirSink(blocker, base=tmp_path)
    )
    result = processor.add(f)
    assert result.action == FileAction.ERROR


# ------------------------------ pure planning ------------------------------


def test_plan_add_and_remove_work_on_lines(python_syntax: SyntaxDescriptor) -> None:
    lines = ["x = 1\n"]
    request = make_request()
    action, added = plan_add(lines, python_syntax, request, SHORT_TEMPLATE)
    assert action == FileAction.ADDED
    assert "".join(added) == SHORT_HEADER + "\nx = 1\n"
    action, removed = plan_remove(added, python_syntax, request, SHORT_TEMPLATE)
    assert action == FileAction.REMOVED
    assert removed == lines


def test_read_lines_keeps_line_endings(tmp_path: Path) -> None:
    f = _write(tmp_path / "a.py", "a\r\nb\nc")
    assert read_lines(f) == ["a\r\n", "b\n", "c"]