# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Config validation, layering and TOML loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from copyright_header.config.io import available_licenses, load_bundled_license
from copyright_header.config.model import Config, MutableConfig
from copyright_header.errors import (
    AmbiguousArgumentError,
    ConfigurationError,
    MissingArgumentError,
    TemplateError,
)
from tests.helpers import make_config, make_mutable_config, write_template


def test_defaults_freeze_with_bundled_license() -> None:
    config: Config = make_config(license_name="mit", **_bundled_data())
    assert config.license_name == "MIT"
    assert config.word_wrap == 80
    assert config.marker_length == 20
    assert config.marker == "[Cc]opyright|[Ll]icense"
    assert config.years == frozenset({2016})
    assert config.holders == ("Erik",)
    assert config.exclude_patterns == (".git/", ".hg/", ".svn/")
    assert "$copyright_holders" in config.license_template


def test_bundled_licenses_are_available() -> None:
    assert available_licenses() == [
        "AGPL3",
        "ASL2",
        "BSD-2-CLAUSE",
        "BSD-3-CLAUSE",
        "GPL3",
        "LGPL3",
        "MIT",
    ]
    for name in available_licenses():
        text: str = load_bundled_license(name)
        assert "$copyright_years" in text
        assert "$copyright_holders" in text


def test_unknown_bundled_license() -> None:
    with pytest.raises(ConfigurationError, match="Unknown license 'FOO'"):
        make_config(license_name="FOO", **_bundled_data())


def test_license_and_license_file_are_exclusive(tmp_path: Path) -> None:
    with pytest.raises(AmbiguousArgumentError, match="Cannot use --license and --license-file"):
        make_config(license_name="MIT", license_file=write_template(tmp_path))


def test_a_license_is_required() -> None:
    with pytest.raises(MissingArgumentError, match="Missing --license or --license-file"):
        MutableConfig.from_defaults().freeze()


@pytest.mark.parametrize(
    ("missing", "option"),
    [
        ("software_name", "--copyright-software"),
        ("software_description", "--copyright-software-description"),
        ("holders", "--copyright-holder"),
        ("years", "--copyright-year"),
    ],
)
def test_bundled_license_requires_all_copyright_data(missing: str, option: str) -> None:
    data = _bundled_data()
    data[missing] = [] if missing in ("holders", "years") else None
    with pytest.raises(MissingArgumentError, match=f"Missing {option} argument"):
        make_config(license_name="MIT", **data)


def test_license_file_needs_only_the_data_it_references(tmp_path: Path) -> None:
    template = write_template(tmp_path, "Copyright $copyright_years $copyright_holders\n")
    config = make_config(license_file=template)
    assert config.years == frozenset()
    assert config.holders == ()
    assert config.license_name is None


def test_unreadable_license_file(tmp_path: Path) -> None:
    with pytest.raises(MissingArgumentError, match="Cannot read license file"):
        make_config(license_file=tmp_path / "missing.tmpl")


def test_license_file_with_unknown_placeholder(tmp_path: Path) -> None:
    template = write_template(tmp_path, "Copyright $year $copyright_holders\n")
    with pytest.raises(TemplateError, match=r"\$year"):
        make_config(license_file=template)


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("word_wrap", 0, "--word-wrap must be a positive integer"),
        ("marker_length", -1, "--marker-length must be a positive integer"),
        ("marker", "(", "Invalid --marker regex"),
        ("years", ["20x6"], "Invalid copyright year"),
    ],
)
def test_invalid_values_are_configuration_errors(field: str, value: object, message: str) -> None:
    with pytest.raises(ConfigurationError, match=message):
        make_config(**{field: value})


def test_dry_run_with_output_dir_warns(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    config = make_config(dry_run=True, output_dir=Path("out"))
    assert config.dry_run
    assert "ignoring --output-dir" in caplog.text


def test_thaw_freeze_round_trip() -> None:
    config = make_config(years=["2012-2014", 2016])
    again = config.thaw().freeze()
    assert again.years == config.years
    assert again.holders == config.holders
    assert again.license_template == config.license_template


def test_cli_arguments_override_without_masking() -> None:
    draft = make_mutable_config(word_wrap=60)
    draft.apply_cli_args(
        {
            "word_wrap": None,
            "copyright_holders": ("Jane",),
            "copyright_years": (),
            "include_patterns": ("*.py",),
            "dry_run": False,
        }
    )
    assert draft.word_wrap == 60
    assert draft.holders == ["Jane"]
    assert draft.years == ["2016"]
    assert draft.include_patterns == ["*.py"]
    assert draft.dry_run is None
    assert draft.config_files[-1] == "<CLI overrides>"


def test_from_mapping_sets_only_given_values() -> None:
    draft = MutableConfig.from_mapping({"license": "GPL3", "add_paths": ("src", "bin")})
    assert draft.license_name == "GPL3"
    assert draft.add_paths == [Path("src"), Path("bin")]
    assert draft.word_wrap is None


def test_merge_overrides_scalars_and_accumulates_patterns() -> None:
    base = MutableConfig(word_wrap=80, holders=["Erik"], exclude_patterns=[".git/"])
    layer = MutableConfig(word_wrap=72, exclude_patterns=["build/"])
    merged = base.merge_with(layer)
    assert merged.word_wrap == 72
    assert merged.holders == ["Erik"]
    assert merged.exclude_patterns == [".git/", "build/"]


# ------------------------------ TOML files ------------------------------


def test_from_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "copyright-header.toml"
    path.write_text(
        "[copyright-header]\n"
        'license = "MIT"\n'
        'copyright-software = "Tool"\n'
        'copyright-software-description = "A tool"\n'
        'copyright-holders = ["Erik", "Jane"]\n'
        'copyright-years = ["2012-2014", 2016]\n'
        "word-wrap = 60\n"
        'output-dir = "out"\n'
        'exclude = ["build/"]\n',
        encoding="utf-8",
    )
    draft = MutableConfig.from_toml_file(path)
    assert draft.license_name == "MIT"
    assert draft.holders == ["Erik", "Jane"]
    assert draft.years == ["2012-2014", 2016]
    assert draft.word_wrap == 60
    assert draft.output_dir == (tmp_path / "out").resolve()
    assert draft.config_files == [path]

    config = MutableConfig.load_merged(config_files=[path]).freeze()
    assert config.years == frozenset({2012, 2013, 2014, 2016})
    assert config.exclude_patterns == (".git/", ".hg/", ".svn/", "build/")


def test_pyproject_uses_the_tool_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.copyright-header]\nlicense = "ASL2"\nmarker-length = 30\n',
        encoding="utf-8",
    )
    draft = MutableConfig.from_toml_file(path)
    assert draft.license_name == "ASL2"
    assert draft.marker_length == 30


def test_cli_overrides_config_file(tmp_path: Path) -> None:
    path = tmp_path / "ch.toml"
    path.write_text('[copyright-header]\nword-wrap = 60\nlicense = "MIT"\n', encoding="utf-8")
    draft = MutableConfig.load_merged(config_files=[path], args={"word_wrap": 72})
    assert draft.word_wrap == 72
    assert draft.license_name == "MIT"


def test_missing_table_and_unknown_keys_warn(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING)
    empty = tmp_path / "empty.toml"
    empty.write_text("[other]\nx = 1\n", encoding="utf-8")
    assert MutableConfig.from_toml_file(empty).license_name is None
    assert "[copyright-header] section missing" in caplog.text

    typo = tmp_path / "typo.toml"
    typo.write_text('[copyright-header]\nlicence = "MIT"\n', encoding="utf-8")
    MutableConfig.from_toml_file(typo)
    assert "Unknown config key 'licence'" in caplog.text


@pytest.mark.parametrize(
    "body",
    [
        'word-wrap = "wide"\n',
        "copyright-holders = [1, 2]\n",
        "copyright-years = [true]\n",
        "guess-extension = 1\n",
    ],
)
def test_wrong_value_types_are_rejected(tmp_path: Path, body: str) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("[copyright-header]\n" + body, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        MutableConfig.from_toml_file(path)


def test_unreadable_and_invalid_toml(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read config file"):
        MutableConfig.from_toml_file(tmp_path / "missing.toml")
    broken = tmp_path / "broken.toml"
    broken.write_text("[copyright-header\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid TOML"):
        MutableConfig.from_toml_file(broken)


def _bundled_data() -> dict[str, object]:
    return {
        "software_name": "Tool",
        "software_description": "A tool",
        "holders": ["Erik"],
        "years": ["2016"],
    }
