"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    RenderError,
    GenerationResult,
    generate_code,
)
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
from .loader import IRError, load_declarations
from .docs import CommentStyle, format_docstring
from .imports import ImportCollector
from .config import GeneratorConfig, ConfigError, load_config, read_config_file
from .templates import TemplateEngine, TemplateError

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "RenderError",
    "GenerationResult",
    "generate_code",
    # Type IR
    "Attribute",
    "Declarations",
    "Docs",
    "EnumVariant",
    "Reference",
    "StructField",
    "TEnum",
    "TMap",
    "TOption",
    "TPrimitive",
    "TSet",
    "TStruct",
    "TTuple",
    "TVec",
    "TypeDeclaration",
    "IRError",
    "load_declarations",
    # Rendering support
    "CommentStyle",
    "format_docstring",
    "ImportCollector",
    # Configuration system
    "GeneratorConfig",
    "ConfigError",
    "load_config",
    "read_config_file",
    # Template system
    "TemplateEngine",
    "TemplateError",
]
