# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Bundled comment syntax descriptors.

Exports:
    SYNTAXES: Descriptors for common languages, in registration order.

Notes:
    - C-family languages use ``/* ... */`` blocks with a `` * `` line prefix.
    - Interpreted languages keep a shebang line above the header.
    - Python and Ruby also keep encoding/magic comment lines.
    - XML-based formats keep the ``<?xml ...?>`` declaration above the header.
"""

from __future__ import annotations

from typing import Final

from copyright_header.syntax.base import SyntaxDescriptor

_C_BLOCK: Final[tuple[str, str]] = ("/*", " */")
_C_PREFIX: Final[str] = " * "
_XML_BLOCK: Final[tuple[str, str]] = ("<!--", "-->")

PYTHON_ENCODING_REGEX: Final[str] = r"^[ \t\f]*#.*?coding[:=][ \t]*[-\w.]+"
RUBY_MAGIC_REGEX: Final[str] = (
    r"^#\s*(?:-\*-.*)?(?:en)?coding[:=]|^#\s*frozen_string_literal:|^#\s*warn_indent:"
)
XML_DECLARATION_REGEX: Final[str] = r"^\s*<\?xml\b"

SYNTAXES: list[SyntaxDescriptor] = [
    # --- Hash-comment scripting languages ---
    SyntaxDescriptor(
        name="python",
        extensions=frozenset({".py", ".pyw", ".pyi"}),
        line_comment="#",
        allow_shebang=True,
        encoding_line_regex=PYTHON_ENCODING_REGEX,
    ),
    SyntaxDescriptor(
        name="ruby",
        extensions=frozenset({".rb", ".rake", ".gemspec", ".ru"}),
        filenames=frozenset({"Rakefile", "Gemfile", "Guardfile", "Capfile", "Vagrantfile"}),
        line_comment="#",
        allow_shebang=True,
        encoding_line_regex=RUBY_MAGIC_REGEX,
    ),
    SyntaxDescriptor(
        name="shell",
        extensions=frozenset({".sh", ".bash", ".zsh", ".ksh"}),
        filenames=frozenset({".bashrc", ".bash_profile", ".profile", ".zshrc"}),
        line_comment="#",
        allow_shebang=True,
    ),
    SyntaxDescriptor(
        name="perl",
        extensions=frozenset({".pl", ".pm", ".t"}),
        line_comment="#",
        allow_shebang=True,
    ),
    SyntaxDescriptor(
        name="r",
        extensions=frozenset({".r", ".R"}),
        line_comment="#",
        allow_shebang=True,
    ),
    SyntaxDescriptor(
        name="julia",
        extensions=frozenset({".jl"}),
        line_comment="#",
        allow_shebang=True,
    ),
    SyntaxDescriptor(
        name="makefile",
        extensions=frozenset({".mk", ".mak"}),
        filenames=frozenset({"Makefile", "makefile", "GNUmakefile"}),
        line_comment="#",
    ),
    SyntaxDescriptor(
        name="cmake",
        extensions=frozenset({".cmake"}),
        filenames=frozenset({"CMakeLists.txt"}),
        line_comment="#",
    ),
    SyntaxDescriptor(
        name="dockerfile",
        extensions=frozenset({".dockerfile"}),
        filenames=frozenset({"Dockerfile", "Containerfile"}),
        line_comment="#",
    ),
    SyntaxDescriptor(
        name="yaml",
        extensions=frozenset({".yml", ".yaml"}),
        line_comment="#",
    ),
    SyntaxDescriptor(
        name="toml",
        extensions=frozenset({".toml"}),
        line_comment="#",
    ),
    SyntaxDescriptor(
        name="config",
        extensions=frozenset({".cfg", ".conf", ".properties"}),
        filenames=frozenset({".gitignore", ".gitattributes", ".dockerignore", ".editorconfig"}),
        line_comment="#",
    ),
    SyntaxDescriptor(
        name="ini",
        extensions=frozenset({".ini"}),
        line_comment=";",
    ),
    # --- C family ---
    SyntaxDescriptor(
        name="c",
        extensions=frozenset({".c", ".h"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="cpp",
        extensions=frozenset({".cc", ".cpp", ".cxx", ".c++", ".hh", ".hpp", ".hxx", ".ipp"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="objective-c",
        extensions=frozenset({".m", ".mm"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="csharp",
        extensions=frozenset({".cs"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="java",
        extensions=frozenset({".java"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="kotlin",
        extensions=frozenset({".kt", ".kts"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="scala",
        extensions=frozenset({".scala", ".sc"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="groovy",
        extensions=frozenset({".groovy", ".gradle"}),
        filenames=frozenset({"Jenkinsfile"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
        allow_shebang=True,
    ),
    SyntaxDescriptor(
        name="javascript",
        extensions=frozenset({".js", ".mjs", ".cjs", ".jsx"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
        allow_shebang=True,
    ),
    SyntaxDescriptor(
        name="typescript",
        extensions=frozenset({".ts", ".mts", ".cts", ".tsx"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
        allow_shebang=True,
    ),
    SyntaxDescriptor(
        name="go",
        extensions=frozenset({".go"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="rust",
        extensions=frozenset({".rs"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="swift",
        extensions=frozenset({".swift"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="dart",
        extensions=frozenset({".dart"}),
        line_comment="//",
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    SyntaxDescriptor(
        name="css",
        extensions=frozenset({".css", ".scss", ".less"}),
        block_comment=_C_BLOCK,
        block_line_prefix=_C_PREFIX,
    ),
    # --- Markup ---
    SyntaxDescriptor(
        name="html",
        extensions=frozenset({".html", ".htm", ".xhtml", ".vue", ".md"}),
        block_comment=_XML_BLOCK,
    ),
    SyntaxDescriptor(
        name="xml",
        extensions=frozenset({".xml", ".xsd", ".xsl", ".xslt", ".svg", ".plist"}),
        block_comment=_XML_BLOCK,
        encoding_line_regex=XML_DECLARATION_REGEX,
    ),
    # --- Double-dash comments ---
    SyntaxDescriptor(
        name="sql",
        extensions=frozenset({".sql"}),
        line_comment="--",
    ),
    SyntaxDescriptor(
        name="lua",
        extensions=frozenset({".lua"}),
        line_comment="--",
        allow_shebang=True,
    ),
    SyntaxDescriptor(
        name="haskell",
        extensions=frozenset({".hs"}),
        line_comment="--",
        block_comment=("{-", "-}"),
    ),
    SyntaxDescriptor(
        name="ada",
        extensions=frozenset({".adb", ".ads"}),
        line_comment="--",
    ),
    # --- Percent comments ---
    SyntaxDescriptor(
        name="erlang",
        extensions=frozenset({".erl", ".hrl"}),
        line_comment="%",
        allow_shebang=True,
    ),
    SyntaxDescriptor(
        name="tex",
        extensions=frozenset({".tex", ".sty", ".cls"}),
        line_comment="%",
    ),
    # --- Lisp family ---
    SyntaxDescriptor(
        name="lisp",
        extensions=frozenset({".lisp", ".lsp", ".el", ".scm", ".clj", ".cljs", ".edn"}),
        line_comment=";;",
    ),
    # --- Miscellaneous ---
    SyntaxDescriptor(
        name="vim",
        extensions=frozenset({".vim"}),
        filenames=frozenset({".vimrc"}),
        line_comment='"',
    ),
    SyntaxDescriptor(
        name="batch",
        extensions=frozenset({".bat", ".cmd"}),
        line_comment="REM",
    ),
]
