"""Tests for generator settings and Rust decorations."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from typeshape.codegen.core.config import (
    ConfigError,
    GeneratorConfig,
    load_config,
    read_config_file,
)
from typeshape.codegen.languages.rust import RustConfig

DERIVE = "#[derive(Debug, serde::Serialize, serde::Deserialize)]"


def test_defaults() -> None:
    config = load_config()

    assert config == GeneratorConfig()
    assert config.indent_size == 4
    assert config.add_comments is True
    assert config.custom == {}


def test_unknown_keys_land_in_custom() -> None:
    config = load_config(
        custom_config={"add_comments": False, "decorations": {"enum": ["#[x]"]}}
    )

    assert config.add_comments is False
    assert config.custom == {"decorations": {"enum": ["#[x]"]}}


def test_overrides_win_over_config_file(tmp_path: Path) -> None:
    config_file = tmp_path / "typeshape.json"
    config_file.write_text(
        json.dumps({"header": "Generated.", "indent_size": 2, "custom": {"a": 1}}),
        encoding="utf-8",
    )

    config = load_config(
        custom_config={"indent_size": 8, "custom": {"b": 2}}, config_file=config_file
    )

    assert config.header == "Generated."
    assert config.indent_size == 8
    assert config.custom == {"a": 1, "b": 2}


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_bad_config_file_raises(tmp_path: Path, content: str) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        read_config_file(config_file)


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(config_file=tmp_path / "missing.json")


@pytest.mark.parametrize("indent_size", [-1, "4", True])
def test_indent_size_is_validated(indent_size) -> None:
    with pytest.raises(ConfigError):
        load_config(custom_config={"indent_size": indent_size})


def test_struct_derive_is_always_present() -> None:
    rust = RustConfig(GeneratorConfig())

    assert rust.decorations_for("struct") == [DERIVE]
    assert rust.decorations_for("enum") == []
    assert rust.decorations_for("docs") == []


def test_configured_decorations_add_to_the_derive() -> None:
    rust = RustConfig(
        load_config(
            custom_config={
                "decorations": {"struct": ["#[serde(default)]", DERIVE], "enum": ["#[x]"]}
            }
        )
    )

    assert rust.decorations_for("struct") == [DERIVE, "#[serde(default)]"]
    assert rust.decorations_for("enum") == ["#[x]"]


@pytest.mark.parametrize(
    "decorations",
    [["#[x]"], {"struct": "#[x]"}, {"struct": [1]}, {"docs": ["#[x]"]}],
)
def test_malformed_decorations_raise_config_error(decorations) -> None:
    with pytest.raises(ConfigError):
        RustConfig(GeneratorConfig(custom={"decorations": decorations}))
