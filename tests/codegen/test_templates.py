"""Tests for the template engine wrapper."""

from __future__ import annotations

import pytest

from typeshape.codegen.core.templates import TemplateEngine, TemplateError


def test_templates_render_without_escaping() -> None:
    engine = TemplateEngine({"alias": "pub type {{ name }} = {{ target }};\n"})

    assert "alias" in engine
    assert "missing" not in engine
    assert (
        engine.render("alias", name="Pair", target="(Vec<u8>, &str)")
        == "pub type Pair = (Vec<u8>, &str);\n"
    )


def test_missing_template_raises() -> None:
    with pytest.raises(TemplateError):
        TemplateEngine({}).render("nope")


def test_broken_template_raises() -> None:
    with pytest.raises(TemplateError):
        TemplateEngine({"bad": "{% for x in %}"}).render("bad")
