"""
typeshape Code Generation Module

Renders a resolved Type IR into source code for a target language.
"""

from .registry import GeneratorRegistry, RegistryError, get_generator, get_registry
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    RenderError,
    generate_code,
)
from .core.definitions import Declarations
from .core.loader import IRError, load_declarations
from .core.config import ConfigError, GeneratorConfig, load_config


def generate_from_ir(document, language="rust", config=None) -> GenerationResult:
    """
    Generate code from a serialized Type IR document.

    Args:
        document: Type IR as parsed JSON (dict or list)
        language: Target language name or alias
        config: GeneratorConfig, override dict or settings file path

    Raises:
        IRError: If the document is not valid Type IR
    """
    declarations = load_declarations(document)
    return generate_code(get_generator(language, config), declarations)


def render(declarations: Declarations, language="rust", config=None) -> str:
    """Render declarations directly, raising on failure."""
    return get_generator(language, config).generate(declarations)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "RenderError",
    "IRError",
    "ConfigError",
    "Declarations",
    "GeneratorConfig",
    "load_config",
    "load_declarations",
    "generate_code",
    "generate_from_ir",
    "render",
    "get_generator",
    "get_registry",
]
