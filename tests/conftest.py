# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Pytest configuration for the Copyright Header test suite.

Notes:
    Tests should respect the immutable/mutable configuration split: build a
    `MutableConfig` (see `tests.helpers.make_mutable_config`), then
    `freeze()` it into a `Config` before handing it to the pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from copyright_header.config import logging
from copyright_header.constants import LOG_LEVEL_ENV_VAR
from copyright_header.syntax.registry import SyntaxRegistry

if TYPE_CHECKING:
    from pathlib import Path

    from copyright_header.syntax.base import SyntaxDescriptor


@pytest.fixture(autouse=True)
def silence_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so failures come with full diagnostics.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an isolated project directory.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The working directory, holding an empty ``src/`` directory.
    """
    cwd: Path = tmp_path / "proj"
    (cwd / "src").mkdir(parents=True)
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture(scope="session")
def registry() -> SyntaxRegistry:
    """The bundled syntax registry."""
    return SyntaxRegistry.default()


@pytest.fixture(scope="session")
def python_syntax(registry: SyntaxRegistry) -> SyntaxDescriptor:
    """The bundled Python syntax descriptor."""
    return registry.lookup("x.py")


@pytest.fixture(scope="session")
def c_syntax(registry: SyntaxRegistry) -> SyntaxDescriptor:
    """The bundled C syntax descriptor."""
    return registry.lookup("x.c")
