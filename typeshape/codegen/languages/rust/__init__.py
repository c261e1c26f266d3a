"""
Rust code generator module.

Generates Rust aliases, structs and enums from the Type IR.
"""

from .generator import RustGenerator
from .types import RustTypeMapper
from .config import RustConfig, FIXED_DECORATIONS, is_reserved_word

__all__ = [
    "RustGenerator",
    "RustTypeMapper",
    "RustConfig",
    "FIXED_DECORATIONS",
    "is_reserved_word",
]
