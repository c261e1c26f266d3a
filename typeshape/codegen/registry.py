"""
Lookup of language backends by name or alias.

The registry maps every accepted spelling of a language ("rust", "rs")
to one generator class and builds configured instances on demand.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type, Union

from typeshape.logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator

logger = get_logger(__name__)

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Raised for unknown languages and clashing registrations."""

    pass


class GeneratorRegistry:
    """Language name and alias -> generator class."""

    def __init__(self):
        self._classes: Dict[str, Type[CodeGenerator]] = {}
        # Every accepted spelling, the primary name included
        self._spellings: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Iterable[str] = (),
    ):
        """
        Make a backend available under a name and optional aliases.

        Raises:
            RegistryError: If the class is not a CodeGenerator or a
                spelling already belongs to another language
        """
        if not (
            isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)
        ):
            raise RegistryError(f"{generator_class!r} is not a CodeGenerator subclass")

        language = language.lower()
        spellings = [language, *(alias.lower() for alias in aliases)]
        for spelling in spellings:
            owner = self._spellings.get(spelling)
            if owner is not None and owner != language:
                raise RegistryError(f"'{spelling}' already names the {owner} backend")

        self._classes[language] = generator_class
        for spelling in spellings:
            self._spellings[spelling] = language
        logger.debug("Registered %s as %s", generator_class.__name__, spellings)

    def resolve(self, name: str) -> str:
        """Primary language name for a name or alias."""
        try:
            return self._spellings[name.lower()]
        except KeyError:
            raise RegistryError(
                f"Unsupported language '{name}'. Available: {', '.join(self.languages())}"
            ) from None

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._spellings

    def languages(self) -> List[str]:
        return sorted(self._classes)

    def aliases(self, language: str) -> List[str]:
        language = self.resolve(language)
        return sorted(
            spelling
            for spelling, owner in self._spellings.items()
            if owner == language and spelling != language
        )

    def create(self, name: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Build a generator for a language.

        Args:
            name: Language name or alias
            config: A GeneratorConfig, override dict, settings file path or None

        Raises:
            RegistryError: If the language or the config type is unknown
            ConfigError: If the settings are invalid
        """
        generator_class = self._classes[self.resolve(name)]

        if config is None:
            config = load_config()
        elif isinstance(config, dict):
            config = load_config(custom_config=config)
        elif isinstance(config, (str, Path)):
            config = load_config(config_file=config)
        elif not isinstance(config, GeneratorConfig):
            raise RegistryError(f"Unsupported config type: {type(config).__name__}")

        return generator_class(config)

    def describe(self, name: str) -> Dict[str, Any]:
        """Summary of a backend for listings."""
        language = self.resolve(name)
        generator = self.create(language)
        return {
            "name": language,
            "class": type(generator).__name__,
            "module": type(generator).__module__,
            "file_extension": generator.file_extension,
            "aliases": self.aliases(language),
            "config": generator.config,
        }


_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """The process-wide registry holding the bundled backends."""
    global _registry
    if _registry is None:
        from .languages.rust import RustGenerator

        _registry = GeneratorRegistry()
        _registry.register("rust", RustGenerator, aliases=["rs"])
    return _registry


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Build a generator from the process-wide registry."""
    return get_registry().create(language, config)
