"""
Tables the Rust generator consults.

Primitive spellings, collection imports, comment markers, decorations
per shape kind and reserved words.
"""

from typing import Any, Dict, List, Tuple

from ...core.config import ConfigError, GeneratorConfig
from ...core.definitions import TPrimitive
from ...core.docs import CommentStyle


RUST_PRIMITIVE_TYPES = {
    TPrimitive.STRING: "String",
    TPrimitive.BOOL: "bool",
    TPrimitive.INT64: "i64",
    TPrimitive.FLOAT64: "f64",
}

MAP_IMPORT = "use std::collections::BTreeMap;"
SET_IMPORT = "use std::collections::BTreeSet;"

RUST_COMMENT_MARKERS = {
    CommentStyle.DOC_COMMENT: "///",
    CommentStyle.PLAIN_COMMENT: "//",
}

# Emitted on every struct; settings can only add to these
FIXED_DECORATIONS: Dict[str, Tuple[str, ...]] = {
    "struct": ("#[derive(Debug, serde::Serialize, serde::Deserialize)]",),
}

# Shape kinds a top-level declaration can have, docs excluded
DECORATED_KINDS = ("primitive", "map", "tuple", "struct", "enum")

RUST_RESERVED_WORDS = {
    "as", "async", "await", "break", "const", "continue", "crate", "dyn",
    "else", "enum", "extern", "false", "fn", "for", "if", "impl", "in",
    "let", "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
    "self", "Self", "static", "struct", "super", "trait", "true", "type",
    "unsafe", "use", "where", "while", "abstract", "become", "box", "do",
    "final", "macro", "override", "priv", "try", "typeof", "unsized",
    "virtual", "yield",
}


def _extra_decorations(setting: Any) -> Dict[str, List[str]]:
    """Validate the ``decorations`` setting: shape kind -> extra lines."""
    if not isinstance(setting, dict):
        raise ConfigError("decorations must map shape kinds to lists of lines")

    extras = {}
    for kind, lines in setting.items():
        if kind not in DECORATED_KINDS:
            raise ConfigError(
                f"Cannot decorate '{kind}'; expected one of {', '.join(DECORATED_KINDS)}"
            )
        if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
            raise ConfigError(f"Decorations for '{kind}' must be a list of strings")
        fixed = FIXED_DECORATIONS.get(kind, ())
        extras[kind] = [line for line in lines if line not in fixed]
    return extras


class RustConfig:
    """Rust view of a GeneratorConfig."""

    def __init__(self, config: GeneratorConfig):
        self.indent_size = config.indent_size
        self.extra_decorations = _extra_decorations(config.custom.get("decorations", {}))

    def decorations_for(self, kind: str) -> List[str]:
        """Fixed lines for a shape kind followed by configured ones."""
        return [*FIXED_DECORATIONS.get(kind, ()), *self.extra_decorations.get(kind, [])]


def is_reserved_word(name: str) -> bool:
    """Check if a name collides with a Rust keyword."""
    return name in RUST_RESERVED_WORDS
