from __future__ import annotations

import pytest

from typeshape.codegen.core.definitions import (
    Attribute,
    Declarations,
    Docs,
    EnumVariant,
    Reference,
    StructField,
    TEnum,
    TMap,
    TPrimitive,
    TSet,
    TStruct,
    TTuple,
    TypeDeclaration,
)
from typeshape.codegen.core.imports import ImportCollector
from typeshape.codegen.languages.rust import RustGenerator


@pytest.fixture
def rust_generator() -> RustGenerator:
    """Rust generator with default configuration."""
    return RustGenerator()


@pytest.fixture
def imports() -> ImportCollector:
    return ImportCollector()


@pytest.fixture
def sample_declarations() -> Declarations:
    """A small IR touching every declaration kind."""
    return Declarations(
        (
            TypeDeclaration(name="", value=Docs(), docs="Section: identifiers"),
            TypeDeclaration(name="UserId", value=TPrimitive.INT64),
            TypeDeclaration(
                name="Scores",
                value=TMap(TPrimitive.STRING, TPrimitive.FLOAT64),
                docs="Score per player.",
            ),
            TypeDeclaration(
                name="Pair", value=TTuple((TPrimitive.STRING, Reference("UserId")))
            ),
            TypeDeclaration(
                name="Profile",
                docs="Represents a user.",
                config=(Attribute('#[serde(rename_all = "camelCase")]'),),
                value=TStruct(
                    (
                        StructField("id", Reference("UserId"), docs="Unique id."),
                        StructField(
                            "tags",
                            TSet(TPrimitive.STRING),
                            config=(Attribute("#[serde(default)]"),),
                        ),
                    )
                ),
            ),
            TypeDeclaration(
                name="Shape",
                value=TEnum(
                    (
                        EnumVariant("Circle", TTuple((TPrimitive.FLOAT64,))),
                        EnumVariant("Empty", docs="Nothing at all."),
                        EnumVariant(
                            "Rect",
                            TStruct(
                                (
                                    StructField("w", TPrimitive.FLOAT64),
                                    StructField("h", TPrimitive.FLOAT64),
                                )
                            ),
                        ),
                    )
                ),
            ),
        )
    )
