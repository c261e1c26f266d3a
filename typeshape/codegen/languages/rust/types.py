"""
Rust type mapping for value shapes.

Converts primitive, reference and composite shapes into Rust type
syntax, registering the imports the produced spellings need.
"""

from ...core.definitions import (
    Reference,
    TMap,
    TOption,
    TPrimitive,
    TSet,
    TTuple,
    TVec,
    shape_kind,
)
from ...core.generator import RenderError
from ...core.imports import ImportCollector
from .config import MAP_IMPORT, RUST_PRIMITIVE_TYPES, SET_IMPORT


class RustTypeMapper:
    """
    Maps Type IR shapes to Rust type syntax.

    Every method receives the import collector of the current rendering
    pass; the mapper itself holds no per-pass state.
    """

    def __init__(self):
        self.primitive_types = dict(RUST_PRIMITIVE_TYPES)

    def map_type(self, shape, imports: ImportCollector) -> str:
        """
        Map any value shape to Rust syntax.

        Args:
            shape: Primitive, reference, map, vec, set, option or tuple
            imports: Collector for the current rendering pass

        Returns:
            Rust type expression

        Raises:
            RenderError: If the shape is not a value shape
        """
        if isinstance(shape, TPrimitive):
            return self.map_primitive(shape)
        if isinstance(shape, Reference):
            return shape.name
        if isinstance(shape, TMap):
            return self.map_map(shape, imports)
        if isinstance(shape, TVec):
            return self.map_vec(shape, imports)
        if isinstance(shape, TSet):
            return self.map_set(shape, imports)
        if isinstance(shape, TOption):
            return self.map_option(shape, imports)
        if isinstance(shape, TTuple):
            return self.map_tuple(shape, imports)

        raise RenderError(f"Cannot render {shape_kind(shape)} shape: {shape!r}")

    def map_primitive(self, primitive: TPrimitive) -> str:
        return self.primitive_types[primitive]

    def map_item(self, item, imports: ImportCollector) -> str:
        """Map a container item, which must be a primitive or a reference."""
        if not isinstance(item, (TPrimitive, Reference)):
            raise RenderError(
                f"Container items must be primitives or references, "
                f"got {shape_kind(item)}"
            )
        return self.map_type(item, imports)

    def map_map(self, shape: TMap, imports: ImportCollector) -> str:
        if not isinstance(shape.key, TPrimitive):
            raise RenderError(f"Map keys must be primitives, got {shape_kind(shape.key)}")

        key = self.map_primitive(shape.key)
        value = self.map_item(shape.value, imports)

        imports.register(MAP_IMPORT)
        return f"BTreeMap<{key}, {value}>"

    def map_vec(self, shape: TVec, imports: ImportCollector) -> str:
        return f"Vec<{self.map_item(shape.item, imports)}>"

    def map_set(self, shape: TSet, imports: ImportCollector) -> str:
        value = self.map_item(shape.item, imports)

        imports.register(SET_IMPORT)
        return f"BTreeSet<{value}>"

    def map_option(self, shape: TOption, imports: ImportCollector) -> str:
        if isinstance(shape.inner, (TOption, TTuple)):
            raise RenderError(f"Options cannot wrap {shape_kind(shape.inner)} shapes")
        return f"Option<{self.map_type(shape.inner, imports)}>"

    def map_tuple(self, shape: TTuple, imports: ImportCollector) -> str:
        items = [self.map_item(item, imports) for item in shape.items]
        return f"({', '.join(items)})"
