"""
Conversion of serialized Type IR into definition objects.

The schema front end hands over its resolved declarations as JSON;
this module maps that document onto the dataclasses in definitions.py
and rejects shapes placed where the IR does not allow them.

Document layout::

    {"declarations": [
        {"name": "UserId", "docs": "...", "config": [{"rust_attribute": "#[x]"}],
         "value": {"primitive": "i64"}},
        {"name": "Profile", "value": {"struct": {"fields": [
            {"name": "tags", "type": {"set": "string"}}]}}},
        {"name": "Shape", "value": {"enum": {"variants": [
            {"name": "Circle", "type": {"tuple": ["f64"]}}, {"name": "Empty"}]}}},
        {"name": "", "docs": "Section", "value": "docs"}
    ]}

Primitives are "string", "bool", "i64" and "f64"; references are
{"reference": "Name"}; composites are map, vec, set, option and tuple.
"""

from typing import Any, Dict, List, Tuple, Union

from typeshape.logging_config import get_logger
from .definitions import (
    Attribute,
    Declarations,
    Docs,
    EnumVariant,
    Reference,
    StructField,
    TEnum,
    TMap,
    TOption,
    TPrimitive,
    TSet,
    TStruct,
    TTuple,
    TVec,
    TypeDeclaration,
)

logger = get_logger(__name__)


class IRError(Exception):
    """Exception raised for malformed Type IR documents."""

    pass


PRIMITIVE_NAMES = {primitive.value: primitive for primitive in TPrimitive}

# Which shape kinds may appear in each position
ITEM_KINDS = ("primitive", "reference")
OPTION_KINDS = ("primitive", "reference", "map", "vec", "set")
FIELD_KINDS = ("primitive", "reference", "map", "vec", "set", "option", "tuple")


def load_declarations(document: Union[Dict[str, Any], List[Any]]) -> Declarations:
    """
    Convert a Type IR document into Declarations.

    Args:
        document: Either ``{"declarations": [...]}`` or the bare list

    Returns:
        Declarations in document order

    Raises:
        IRError: If the document does not describe valid declarations
    """
    if isinstance(document, dict):
        if "declarations" not in document:
            raise IRError("Type IR document has no 'declarations' key")
        entries = document["declarations"]
    else:
        entries = document

    if not isinstance(entries, list):
        raise IRError("'declarations' must be a list")

    declarations = tuple(
        _convert_declaration(entry, index) for index, entry in enumerate(entries)
    )
    logger.debug("Loaded %d declarations", len(declarations))
    return Declarations(declarations)


def _convert_declaration(entry: Any, index: int) -> TypeDeclaration:
    if not isinstance(entry, dict):
        raise IRError(f"Declaration #{index} must be an object")

    raw_value = entry.get("value")
    if raw_value is None:
        raise IRError(f"Declaration #{index} has no value")

    if raw_value == "docs":
        value = Docs()
        name = entry.get("name", "")
    else:
        name = _require_name(entry, f"declaration #{index}")
        value = _convert_declaration_value(raw_value, name)

    return TypeDeclaration(
        name=name,
        value=value,
        docs=_optional_text(entry, "docs", name or f"declaration #{index}"),
        config=_convert_attributes(entry.get("config", []), name),
    )


def _convert_declaration_value(raw: Any, context: str):
    if isinstance(raw, dict) and len(raw) == 1:
        kind, body = next(iter(raw.items()))

        if kind == "primitive":
            return _convert_primitive(body, context)
        if kind == "map":
            return _convert_map(body, context)
        if kind == "tuple":
            return _convert_tuple(body, context)
        if kind == "struct":
            return _convert_struct(body, context)
        if kind == "enum":
            return _convert_enum(body, context)

    raise IRError(f"Unsupported declaration value in {context}: {raw!r}")


def _convert_shape(raw: Any, allowed: Tuple[str, ...], context: str):
    """Convert a value shape, restricted to the allowed kinds."""
    if isinstance(raw, str):
        kind = "primitive"
    elif isinstance(raw, dict) and len(raw) == 1:
        kind = next(iter(raw))
    else:
        raise IRError(f"Malformed shape in {context}: {raw!r}")

    if kind not in allowed:
        raise IRError(
            f"Shape '{kind}' is not allowed in {context} "
            f"(expected one of: {', '.join(allowed)})"
        )

    if kind == "primitive":
        return _convert_primitive(raw if isinstance(raw, str) else raw[kind], context)

    body = raw[kind]
    if kind == "reference":
        if not isinstance(body, str) or not body:
            raise IRError(f"Reference in {context} must be a non-empty name")
        return Reference(body)
    if kind == "map":
        return _convert_map(body, context)
    if kind == "vec":
        return TVec(_convert_shape(body, ITEM_KINDS, f"{context} vec"))
    if kind == "set":
        return TSet(_convert_shape(body, ITEM_KINDS, f"{context} set"))
    if kind == "option":
        return TOption(_convert_shape(body, OPTION_KINDS, f"{context} option"))
    if kind == "tuple":
        return _convert_tuple(body, context)

    raise IRError(f"Unknown shape '{kind}' in {context}")


def _convert_primitive(raw: Any, context: str) -> TPrimitive:
    try:
        return PRIMITIVE_NAMES[raw]
    except (KeyError, TypeError):
        raise IRError(
            f"Unknown primitive {raw!r} in {context} "
            f"(expected one of: {', '.join(PRIMITIVE_NAMES)})"
        )


def _convert_map(body: Any, context: str) -> TMap:
    if not isinstance(body, dict) or "key" not in body or "value" not in body:
        raise IRError(f"Map in {context} needs 'key' and 'value'")
    return TMap(
        key=_convert_shape(body["key"], ("primitive",), f"{context} map key"),
        value=_convert_shape(body["value"], ITEM_KINDS, f"{context} map value"),
    )


def _convert_tuple(body: Any, context: str) -> TTuple:
    if not isinstance(body, list):
        raise IRError(f"Tuple in {context} must be a list of items")
    return TTuple(
        tuple(_convert_shape(item, ITEM_KINDS, f"{context} tuple") for item in body)
    )


def _convert_struct(body: Any, context: str) -> TStruct:
    raw_fields = body.get("fields", []) if isinstance(body, dict) else None
    if not isinstance(raw_fields, list):
        raise IRError(f"Struct {context} needs a 'fields' list")

    fields = []
    for raw_field in raw_fields:
        if not isinstance(raw_field, dict):
            raise IRError(f"Field of {context} must be an object")
        name = _require_name(raw_field, f"field of {context}")
        field_context = f"{context}.{name}"
        if "type" not in raw_field:
            raise IRError(f"Field {field_context} has no type")
        fields.append(
            StructField(
                name=name,
                field_type=_convert_shape(raw_field["type"], FIELD_KINDS, field_context),
                docs=_optional_text(raw_field, "docs", field_context),
                config=_convert_attributes(raw_field.get("config", []), field_context),
            )
        )

    return TStruct(tuple(fields))


def _convert_enum(body: Any, context: str) -> TEnum:
    raw_variants = body.get("variants", []) if isinstance(body, dict) else None
    if not isinstance(raw_variants, list):
        raise IRError(f"Enum {context} needs a 'variants' list")

    variants = []
    for raw_variant in raw_variants:
        if not isinstance(raw_variant, dict):
            raise IRError(f"Variant of {context} must be an object")
        name = _require_name(raw_variant, f"variant of {context}")
        variant_context = f"{context}::{name}"
        variants.append(
            EnumVariant(
                name=name,
                variant_type=_convert_variant_type(
                    raw_variant.get("type"), variant_context
                ),
                docs=_optional_text(raw_variant, "docs", variant_context),
            )
        )

    return TEnum(tuple(variants))


def _convert_variant_type(raw: Any, context: str):
    if raw is None or raw == "empty":
        return None
    if isinstance(raw, dict) and len(raw) == 1:
        kind, body = next(iter(raw.items()))
        if kind == "tuple":
            return _convert_tuple(body, context)
        if kind == "struct":
            return _convert_struct(body, context)
    raise IRError(f"Variant payload of {context} must be empty, a tuple or a struct")


def _convert_attributes(raw: Any, context: str) -> Tuple[Attribute, ...]:
    if not isinstance(raw, list):
        raise IRError(f"Config of {context} must be a list")

    attributes = []
    for entry in raw:
        if isinstance(entry, dict) and "rust_attribute" in entry:
            attributes.append(Attribute(str(entry["rust_attribute"]), "rust"))
        elif isinstance(entry, dict) and "attribute" in entry:
            attributes.append(
                Attribute(str(entry["attribute"]), str(entry.get("backend", "rust")))
            )
        else:
            raise IRError(f"Unsupported config entry in {context}: {entry!r}")
    return tuple(attributes)


def _require_name(entry: Dict[str, Any], context: str) -> str:
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise IRError(f"Missing name for {context}")
    return name


def _optional_text(entry: Dict[str, Any], key: str, context: str):
    value = entry.get(key)
    if value is not None and not isinstance(value, str):
        raise IRError(f"'{key}' of {context} must be a string")
    return value
