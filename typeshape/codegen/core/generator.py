"""
Base generator interface for all code generation targets.

A generator renders every declaration of a Type IR document and lays
the results out as one source module. Import statements needed along
the way are gathered in an ImportCollector created for that pass only.
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Any, Dict, List, Optional

from typeshape.logging_config import get_logger
from .config import GeneratorConfig
from .definitions import Declarations, TEnum, TStruct, TypeDeclaration
from .docs import CommentStyle, format_docstring
from .imports import ImportCollector
from .templates import TemplateEngine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class RenderError(GeneratorError):
    """Raised when the Type IR violates the shapes a generator can render."""

    pass


# Header, import block, blank line, declarations separated by blank lines
MODULE_TEMPLATE = (
    "{% if header %}{{ header }}\n\n{% endif %}"
    "{% for statement in imports %}{{ statement }}\n{% endfor %}"
    "\n"
    "{% for declaration in declarations %}"
    "{% if not loop.first %}\n{% endif %}"
    "{{ declaration }}\n"
    "{% endfor %}"
)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    # Backend templates by name, rendered next to "module"
    templates: Dict[str, str] = {}

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.template_engine = TemplateEngine({"module": MODULE_TEMPLATE, **self.templates})

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'rust')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.rs')."""
        pass

    @property
    def comment_markers(self) -> Dict[CommentStyle, str]:
        """Comment marker for each comment style."""
        return {
            CommentStyle.DOC_COMMENT: "///",
            CommentStyle.PLAIN_COMMENT: "//",
        }

    def generate(self, declarations: Declarations) -> str:
        """
        Render all declarations into one source module.

        Args:
            declarations: Resolved Type IR

        Returns:
            Generated code as a string

        Raises:
            RenderError: If a declaration holds a shape this generator
                cannot render
        """
        imports = ImportCollector()

        rendered = []
        for declaration in declarations:
            logger.debug("Rendering declaration %r", declaration.name)
            rendered.append(self.render_declaration(declaration, imports))

        statements = imports.flush()
        logger.info(
            "Rendered %d declarations with %d imports for %s",
            len(rendered),
            len(statements),
            self.language_name,
        )

        # The header is not documentation: add_comments leaves it alone
        header = format_docstring(
            self.config.header, CommentStyle.PLAIN_COMMENT, 0, self.comment_markers
        )
        return self.render_template(
            "module", header=header, imports=statements, declarations=rendered
        )

    @abstractmethod
    def render_declaration(
        self, declaration: TypeDeclaration, imports: ImportCollector
    ) -> str:
        """
        Render a single top-level declaration.

        Args:
            declaration: Declaration to render
            imports: Collector receiving any import the declaration needs

        Returns:
            Declaration source, including its attributes and documentation
        """
        pass

    def render_template(self, name: str, /, **context: Any) -> str:
        return self.template_engine.render(name, **context)

    def format_docs(
        self, doc: Optional[str], style: CommentStyle, indent: int
    ) -> Optional[str]:
        """Format documentation, honoring the add_comments setting."""
        if not self.config.add_comments:
            return None
        return format_docstring(doc, style, indent, self.comment_markers)

    def validate_declarations(self, declarations: Declarations) -> List[str]:
        """
        Collect warnings about the declarations; never changes the output.

        Backends extend this with language-specific checks.
        """
        warnings = []

        names = Counter(d.name for d in declarations if not d.is_docs)
        for name, count in sorted(names.items()):
            if count > 1:
                warnings.append(f"Declaration '{name}' is defined {count} times")

        for declaration in declarations:
            value = declaration.value

            if isinstance(value, TStruct):
                if not value.fields:
                    warnings.append(f"Struct '{declaration.name}' has no fields")
                warnings.extend(
                    self._duplicate_warnings(
                        declaration.name, "field", [f.name for f in value.fields]
                    )
                )

            elif isinstance(value, TEnum):
                if not value.variants:
                    warnings.append(f"Enum '{declaration.name}' has no variants")
                warnings.extend(
                    self._duplicate_warnings(
                        declaration.name, "variant", [v.name for v in value.variants]
                    )
                )

            elif declaration.is_docs and not (declaration.docs or "").strip():
                warnings.append("Documentation block has no text")

        return warnings

    @staticmethod
    def _duplicate_warnings(owner: str, kind: str, names: List[str]) -> List[str]:
        counts = Counter(names)
        return [
            f"Duplicate {kind} '{name}' in {owner}"
            for name, count in counts.items()
            if count > 1
        ]


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, declarations: Declarations
) -> GenerationResult:
    """
    Validate and render declarations, reporting failures in the result.

    The code is exactly what ``generator.generate`` returns.

    Args:
        generator: Code generator instance
        declarations: Declarations to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_declarations(declarations)
        for warning in warnings:
            logger.warning(warning)

        code = generator.generate(declarations)

        kinds = Counter(type(d.value) for d in declarations)
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "declaration_count": len(declarations),
            "struct_count": kinds[TStruct],
            "enum_count": kinds[TEnum],
            "docs_count": sum(1 for d in declarations if d.is_docs),
        }

        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
