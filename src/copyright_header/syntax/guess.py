# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Guess a file extension from a script's shebang line.

Used for ``--guess-extension``: files whose name does not resolve to a syntax
(``bin/deploy``) get a fallback extension derived from their interpreter
(``#!/usr/bin/env python3`` yields ``.py``).
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Final, Protocol

from copyright_header.config.logging import get_logger

if TYPE_CHECKING:
    from copyright_header.config.logging import CopyrightHeaderLogger

logger: CopyrightHeaderLogger = get_logger(__name__)

# Bytes read from the start of a file to find its shebang
_PROBE_SIZE: Final[int] = 256

_RE_SHEBANG: Final[re.Pattern[str]] = re.compile(r"^#!\s*(?P<cmd>\S+)(?P<args>.*)$")
_RE_INTERPRETER: Final[re.Pattern[str]] = re.compile(r"^(?P<name>[A-Za-z]+)")

INTERPRETER_EXTENSIONS: Final[dict[str, str]] = {
    "sh": ".sh",
    "bash": ".sh",
    "dash": ".sh",
    "ash": ".sh",
    "ksh": ".sh",
    "zsh": ".sh",
    "python": ".py",
    "pypy": ".py",
    "ruby": ".rb",
    "perl": ".pl",
    "node": ".js",
    "nodejs": ".js",
    "deno": ".ts",
    "Rscript": ".R",
    "julia": ".jl",
    "lua": ".lua",
    "luajit": ".lua",
    "escript": ".erl",
    "groovy": ".groovy",
    "make": ".mk",
}


class ExtensionGuesser(Protocol):
    """Callable returning a fallback extension (with dot) for a file, or None."""

    def __call__(self, path: Path) -> str | None: ...


def interpreter_from_shebang(line: str) -> str | None:
    """Return the interpreter name of a shebang line.

    ``/usr/bin/env`` is looked through (including ``env -S``), and version
    suffixes are dropped: ``#!/usr/bin/env python3.12 -u`` yields ``python``.

    Args:
        line (str): The first line of a file.

    Returns:
        str | None: The interpreter name, or None if ``line`` is not a shebang.
    """
    m: re.Match[str] | None = _RE_SHEBANG.match(line.strip())
    if m is None:
        return None
    command: str = Path(m.group("cmd")).name
    if command == "env":
        args: list[str] = [a for a in m.group("args").split() if not a.startswith("-")]
        args = [a for a in args if "=" not in a]
        if not args:
            return None
        command = Path(args[0]).name
    name: re.Match[str] | None = _RE_INTERPRETER.match(command)
    return name.group("name") if name else None


def guess_extension_from_shebang(path: Path) -> str | None:
    """Guess a file's extension from its shebang line.

    Only the first bytes of the file are read. Unreadable or binary files
    yield None.

    Args:
        path (Path): The file to inspect.

    Returns:
        str | None: The guessed extension (e.g. ``".py"``), or None.
    """
    try:
        with path.open("rb") as fh:
            head: bytes = fh.read(_PROBE_SIZE)
    except OSError as exc:
        logger.debug("Cannot probe %s for a shebang: %s", path, exc)
        return None
    if not head.startswith(b"#!"):
        return None
    first_line: str = head.split(b"\n", 1)[0].decode("utf-8", errors="replace")
    interpreter: str | None = interpreter_from_shebang(first_line)
    if interpreter is None:
        return None
    ext: str | None = INTERPRETER_EXTENSIONS.get(interpreter)
    logger.debug("Shebang interpreter %r of %s maps to %r", interpreter, path, ext)
    return ext
