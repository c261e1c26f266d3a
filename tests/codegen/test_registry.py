"""Tests for the generator registry."""

from __future__ import annotations

import json

import pytest

from typeshape.codegen import generate_from_ir, render
from typeshape.codegen.core.config import ConfigError, GeneratorConfig
from typeshape.codegen.core.definitions import Declarations, TPrimitive, TVec, TypeDeclaration
from typeshape.codegen.core.generator import RenderError
from typeshape.codegen.languages.rust import RustGenerator
from typeshape.codegen.registry import GeneratorRegistry, RegistryError, get_generator, get_registry


def test_global_registry_knows_rust_and_alias() -> None:
    registry = get_registry()

    assert registry.languages() == ["rust"]
    assert "Rust" in registry
    assert "rs" in registry
    assert "cobol" not in registry
    assert registry.resolve("RS") == "rust"
    assert registry.aliases("rust") == ["rs"]


def test_get_generator_by_alias_with_dict_config() -> None:
    generator = get_generator("rs", {"add_comments": False})

    assert isinstance(generator, RustGenerator)
    assert generator.config.add_comments is False


def test_get_generator_accepts_config_instance() -> None:
    config = GeneratorConfig(indent_size=2)
    assert get_generator("rust", config).config is config


def test_get_generator_reads_settings_file(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"indent_size": 2}), encoding="utf-8")

    assert get_generator("rust", path).config.indent_size == 2
    assert get_generator("rust", str(path)).config.indent_size == 2


def test_invalid_decorations_surface_as_config_error() -> None:
    with pytest.raises(ConfigError):
        get_generator("rust", {"decorations": {"struct": "#[x]"}})


def test_describe() -> None:
    info = get_registry().describe("rs")

    assert info["name"] == "rust"
    assert info["file_extension"] == ".rs"
    assert info["class"] == "RustGenerator"
    assert info["aliases"] == ["rs"]
    assert info["config"] == GeneratorConfig()


def test_unknown_language_raises() -> None:
    with pytest.raises(RegistryError, match="Available: rust"):
        get_generator("cobol")


def test_invalid_config_type_raises() -> None:
    registry = GeneratorRegistry()
    registry.register("rust", RustGenerator)

    with pytest.raises(RegistryError):
        registry.create("rust", config=42)


def test_register_rejects_non_generators() -> None:
    with pytest.raises(RegistryError):
        GeneratorRegistry().register("text", str)


def test_spellings_cannot_change_owner() -> None:
    registry = GeneratorRegistry()
    registry.register("rust", RustGenerator, aliases=["rs"])

    with pytest.raises(RegistryError):
        registry.register("other", RustGenerator, aliases=["rs"])
    with pytest.raises(RegistryError):
        registry.register("another", RustGenerator, aliases=["rust"])

    assert registry.languages() == ["rust"]


def test_generate_from_ir_uses_alias_and_config() -> None:
    document = [{"name": "Id", "docs": "An id.", "value": {"primitive": "i64"}}]

    result = generate_from_ir(document, language="rs", config={"add_comments": False})

    assert result.success is True
    assert result.code == "\npub type Id = i64;\n"


def test_render_raises_for_unrenderable_values(sample_declarations) -> None:
    assert "pub enum Shape" in render(sample_declarations)
    with pytest.raises(RenderError):
        render(Declarations((TypeDeclaration(name="V", value=TVec(TPrimitive.BOOL)),)))
