"""
Rust code generator implementation.

Generates Rust type aliases, structs and enums from the Type IR.
"""

from typing import List, Optional, Sequence

from typeshape.logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.definitions import (
    Attribute,
    Declarations,
    Docs,
    TEnum,
    TMap,
    TPrimitive,
    TStruct,
    TTuple,
    TypeDeclaration,
    shape_kind,
)
from ...core.docs import CommentStyle
from ...core.generator import CodeGenerator, RenderError
from ...core.imports import ImportCollector
from .config import RUST_COMMENT_MARKERS, RustConfig, is_reserved_word
from .types import RustTypeMapper

logger = get_logger(__name__)


# Attribute lines, then the doc comment, then the item itself
DECLARATION_TEMPLATE = (
    "{% for line in attributes %}{{ line }}\n{% endfor %}"
    "{% if doc %}{{ doc }}\n{% endif %}"
    "{{ body }}"
)

ALIAS_TEMPLATE = "pub type {{ name }} = {{ target }};"
STRUCT_TEMPLATE = "pub struct {{ name }} {{ block }}"
ENUM_TEMPLATE = "pub enum {{ name }} {{ block }}"

# Fields sit at `inner`, the closing brace at `outer`
FIELDS_TEMPLATE = (
    "{{ '{' }}"
    "{% for field in fields %}"
    "{% for text in field['attributes'] %}\n{{ inner }}{{ text }}{% endfor %}"
    "{% if field['doc'] %}\n{{ field['doc'] }}{% endif %}"
    "\n{{ inner }}{{ field['name'] }}: {{ field['type'] }},"
    "{% endfor %}"
    "\n{{ outer }}{{ '}' }}"
)

VARIANTS_TEMPLATE = (
    "{{ '{' }}"
    "{% for variant in variants %}"
    "{% if variant['doc'] %}\n{{ variant['doc'] }}{% endif %}"
    "\n{{ step }}{{ variant['name'] }}{{ variant['payload'] }},"
    "{% endfor %}"
    "\n{{ '}' }}"
)


class RustGenerator(CodeGenerator):
    """Code generator for Rust type declarations."""

    templates = {
        "declaration": DECLARATION_TEMPLATE,
        "alias": ALIAS_TEMPLATE,
        "struct": STRUCT_TEMPLATE,
        "enum": ENUM_TEMPLATE,
        "fields": FIELDS_TEMPLATE,
        "variants": VARIANTS_TEMPLATE,
    }

    def __init__(self, config: Optional[GeneratorConfig] = None):
        super().__init__(config)

        self.rust_config = RustConfig(self.config)
        self.type_mapper = RustTypeMapper()

    @property
    def language_name(self) -> str:
        return "rust"

    @property
    def file_extension(self) -> str:
        return ".rs"

    @property
    def comment_markers(self):
        return RUST_COMMENT_MARKERS

    @property
    def step(self) -> str:
        return " " * self.rust_config.indent_size

    def render_declaration(
        self, declaration: TypeDeclaration, imports: ImportCollector
    ) -> str:
        """Render one declaration with its attributes and documentation."""
        value = declaration.value
        name = declaration.name
        mapper = self.type_mapper

        if isinstance(value, TPrimitive):
            body = self.render_template(
                "alias", name=name, target=mapper.map_primitive(value)
            )
        elif isinstance(value, TMap):
            body = self.render_template(
                "alias", name=name, target=mapper.map_map(value, imports)
            )
        elif isinstance(value, TTuple):
            body = self.render_template(
                "alias", name=name, target=mapper.map_tuple(value, imports)
            )
        elif isinstance(value, TStruct):
            body = self.render_template(
                "struct", name=name, block=self.render_struct(value, 0, imports)
            )
        elif isinstance(value, TEnum):
            body = self.render_template(
                "enum", name=name, block=self.render_enum(value, imports)
            )
        elif isinstance(value, Docs):
            body = ""
        else:
            raise RenderError(
                f"Declaration '{name}' has unsupported value: {shape_kind(value)}"
            )

        style = (
            CommentStyle.PLAIN_COMMENT
            if isinstance(value, Docs)
            else CommentStyle.DOC_COMMENT
        )

        # Declared attributes come before the backend's fixed decorations
        attributes = self._attribute_texts(declaration.config, name)
        attributes += self.rust_config.decorations_for(shape_kind(value))

        return self.render_template(
            "declaration",
            attributes=attributes,
            doc=self.format_docs(declaration.docs, style, 0),
            body=body,
        )

    def render_struct(
        self, struct: TStruct, indent_level: int, imports: ImportCollector
    ) -> str:
        """
        Render the braced field block of a struct.

        Args:
            struct: Struct shape
            indent_level: Column of the closing brace; fields sit one step deeper
            imports: Collector for the current rendering pass
        """
        fields = [
            {
                "attributes": self._attribute_texts(field.config, field.name),
                "doc": self.format_docs(
                    field.docs,
                    CommentStyle.DOC_COMMENT,
                    indent_level + self.rust_config.indent_size,
                ),
                "name": field.name,
                "type": self.type_mapper.map_type(field.field_type, imports),
            }
            for field in struct.fields
        ]

        outer = " " * indent_level
        return self.render_template(
            "fields", fields=fields, inner=outer + self.step, outer=outer
        )

    def render_enum(self, enum: TEnum, imports: ImportCollector) -> str:
        """Render the braced variant block of an enum."""
        indent_level = self.rust_config.indent_size
        variants = []

        for variant in enum.variants:
            payload = variant.variant_type
            if payload is None:
                rendered = ""
            elif isinstance(payload, TTuple):
                rendered = self.type_mapper.map_tuple(payload, imports)
            elif isinstance(payload, TStruct):
                rendered = f" {self.render_struct(payload, indent_level, imports)}"
            else:
                raise RenderError(
                    f"Variant '{variant.name}' has unsupported payload: "
                    f"{shape_kind(payload)}"
                )

            variants.append(
                {
                    "doc": self.format_docs(
                        variant.docs, CommentStyle.DOC_COMMENT, indent_level
                    ),
                    "name": variant.name,
                    "payload": rendered,
                }
            )

        return self.render_template("variants", variants=variants, step=self.step)

    def _attribute_texts(self, config: Sequence[Attribute], owner: str) -> List[str]:
        """Attribute texts addressed to this backend, in declared order."""
        texts = []
        for attribute in config:
            if attribute.backend == self.language_name:
                texts.append(attribute.text)
            else:
                logger.debug(
                    "Skipping %s attribute on %s", attribute.backend, owner or "docs"
                )
        return texts

    def validate_declarations(self, declarations: Declarations) -> List[str]:
        """Add Rust keyword collisions to the generic warnings."""
        warnings = super().validate_declarations(declarations)

        for declaration in declarations:
            if declaration.is_docs:
                continue

            if is_reserved_word(declaration.name):
                warnings.append(
                    f"Declaration '{declaration.name}' is a Rust keyword"
                )

            value = declaration.value
            if isinstance(value, TStruct):
                warnings.extend(self._field_warnings(declaration.name, value))
            elif isinstance(value, TEnum):
                for variant in value.variants:
                    if is_reserved_word(variant.name):
                        warnings.append(
                            f"Variant {declaration.name}::{variant.name} is a Rust keyword"
                        )
                    if isinstance(variant.variant_type, TStruct):
                        warnings.extend(
                            self._field_warnings(
                                f"{declaration.name}::{variant.name}",
                                variant.variant_type,
                            )
                        )

        return warnings

    def _field_warnings(self, owner: str, struct: TStruct) -> List[str]:
        return [
            f"Field {owner}.{field.name} is a Rust keyword"
            for field in struct.fields
            if is_reserved_word(field.name)
        ]
