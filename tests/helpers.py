# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Shared builders for configs, templates, requests and CLI invocations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from copyright_header.cli.main import cli
from copyright_header.config.model import MutableConfig
from copyright_header.header.model import HeaderRequest

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from copyright_header.config.model import Config

# A short template whose rendered header is easy to spell out in assertions
SHORT_TEMPLATE: str = (
    "Copyright (C) $copyright_years $copyright_holders\nLicensed under the MIT license.\n"
)

# Data satisfying every bundled license template
BUNDLED_ARGS: dict[str, Any] = {
    "license_name": "MIT",
    "software_name": "Tool",
    "software_description": "A tool",
    "holders": ["Erik"],
    "years": ["2016"],
}


def write_template(tmp_path: Path, text: str = SHORT_TEMPLATE, name: str = "LICENSE.tmpl") -> Path:
    """Write a license template file and return its path."""
    path: Path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a defaults builder with ``overrides`` applied verbatim.

    Without a license override the bundled MIT template and its data are used.

    Args:
        **overrides (Any): Field values set on the builder.

    Returns:
        MutableConfig: The builder, not yet validated.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    fields: dict[str, Any] = {}
    if "license_name" not in overrides and "license_file" not in overrides:
        fields.update(BUNDLED_ARGS)
    fields.update(overrides)
    for k, v in fields.items():
        setattr(m, k, v)
    return m


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides."""
    return make_mutable_config(**overrides).freeze()


def short_config(tmp_path: Path, **overrides: Any) -> Config:
    """Return a config using `SHORT_TEMPLATE` (holder Erik, year 2016 unless overridden)."""
    fields: dict[str, Any] = {
        "license_file": write_template(tmp_path),
        "holders": ["Erik"],
        "years": ["2016"],
    }
    fields.update(overrides)
    return make_config(**fields)


def make_request(
    *,
    holders: Sequence[str] = ("Erik",),
    years: Sequence[int] = (2016,),
    software_name: str | None = "Tool",
    software_description: str | None = "A tool",
    word_wrap: int = 80,
    marker_regex: str = "[Cc]opyright|[Ll]icense",
    marker_search_lines: int = 20,
) -> HeaderRequest:
    """Return a `HeaderRequest` with test-friendly defaults."""
    return HeaderRequest(
        software_name=software_name,
        software_description=software_description,
        holders=tuple(holders),
        years=frozenset(years),
        word_wrap=word_wrap,
        marker_regex=marker_regex,
        marker_search_lines=marker_search_lines,
    )


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the ``copyright-header`` command in-process."""
    runner = CliRunner()
    return runner.invoke(cli, list(argv))


def bundled_cli_args() -> list[str]:
    """CLI options satisfying the bundled MIT template."""
    return [
        "--license",
        "MIT",
        "--copyright-software",
        "Tool",
        "--copyright-software-description",
        "A tool",
        "--copyright-holder",
        "Erik",
        "--copyright-year",
        "2016",
    ]
