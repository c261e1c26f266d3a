"""
Type IR consumed by the code generators.

The schema front end produces these objects with every cross-reference
already resolved. Generators only read them.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union
from enum import Enum


class TPrimitive(Enum):
    """Primitive types shared by all target languages."""

    STRING = "string"
    BOOL = "bool"
    INT64 = "i64"
    FLOAT64 = "f64"


@dataclass(frozen=True)
class Reference:
    """Resolved handle to another declaration."""

    name: str


@dataclass(frozen=True)
class Attribute:
    """
    Backend-specific annotation attached to a declaration or field.

    The text is emitted verbatim by the backend named in ``backend``
    and ignored by every other backend.
    """

    text: str
    backend: str = "rust"


ItemType = Union[TPrimitive, Reference]


@dataclass(frozen=True)
class TMap:
    key: TPrimitive
    value: ItemType


@dataclass(frozen=True)
class TVec:
    item: ItemType


@dataclass(frozen=True)
class TSet:
    item: ItemType


@dataclass(frozen=True)
class TOption:
    """Optional wrapper. Options never wrap options or tuples."""

    inner: Union[TPrimitive, Reference, TMap, TVec, TSet]


@dataclass(frozen=True)
class TTuple:
    items: Tuple[ItemType, ...] = ()


FieldType = Union[TPrimitive, Reference, TMap, TVec, TSet, TOption, TTuple]


@dataclass(frozen=True)
class StructField:
    """Represents a single field of a struct."""

    name: str
    field_type: FieldType
    docs: Optional[str] = None
    config: Tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class TStruct:
    fields: Tuple[StructField, ...] = ()


@dataclass(frozen=True)
class EnumVariant:
    """
    Single enum variant.

    ``variant_type`` is None for a bare variant, a TTuple for a
    positional payload or a TStruct for named fields.
    """

    name: str
    variant_type: Optional[Union[TTuple, TStruct]] = None
    docs: Optional[str] = None


@dataclass(frozen=True)
class TEnum:
    variants: Tuple[EnumVariant, ...] = ()


@dataclass(frozen=True)
class Docs:
    """Documentation-only declaration value. Emits no type."""


DeclarationValue = Union[TPrimitive, TMap, TTuple, TStruct, TEnum, Docs]


@dataclass(frozen=True)
class TypeDeclaration:
    """One named top-level entry of the Type IR."""

    name: str
    value: DeclarationValue
    docs: Optional[str] = None
    config: Tuple[Attribute, ...] = ()

    @property
    def is_docs(self) -> bool:
        return isinstance(self.value, Docs)


@dataclass(frozen=True)
class Declarations:
    """Ordered sequence of type declarations."""

    declarations: Tuple[TypeDeclaration, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[TypeDeclaration]:
        return iter(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)

    def get(self, name: str) -> Optional[TypeDeclaration]:
        """Get declaration by name."""
        for declaration in self.declarations:
            if not declaration.is_docs and declaration.name == name:
                return declaration
        return None


def shape_kind(value: object) -> str:
    """Return the short kind name of a shape or declaration value."""
    kinds = {
        TPrimitive: "primitive",
        Reference: "reference",
        TMap: "map",
        TVec: "vec",
        TSet: "set",
        TOption: "option",
        TTuple: "tuple",
        TStruct: "struct",
        TEnum: "enum",
        Docs: "docs",
    }
    return kinds.get(type(value), "unknown")
