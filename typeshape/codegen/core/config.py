"""
Generator settings and how they are resolved.

Settings come in layers, later ones winning: dataclass defaults, an
optional JSON file, then explicit overrides (usually CLI flags). Keys
that are not ``GeneratorConfig`` fields are collected in ``custom`` for
the backend to interpret.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from typeshape.logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when settings cannot be read or are invalid."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by every backend."""

    # Written by the CLI instead of printing to stdout
    output_file: Optional[str] = None

    indent_size: int = 4

    # False drops every doc comment and documentation block
    add_comments: bool = True

    # Plain comment above the import block
    header: Optional[str] = None

    custom: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if (
            not isinstance(self.indent_size, int)
            or isinstance(self.indent_size, bool)
            or self.indent_size < 0
        ):
            raise ConfigError(
                f"indent_size must be a non-negative integer, got {self.indent_size!r}"
            )
        if not isinstance(self.custom, dict):
            raise ConfigError("custom settings must be a JSON object")


_FIELD_NAMES = frozenset(f.name for f in fields(GeneratorConfig))


def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a JSON settings file.

    Raises:
        ConfigError: If the file is missing, unreadable or not a JSON object
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

    try:
        settings = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Configuration file {path} is not valid JSON: {e}") from e

    if not isinstance(settings, dict):
        raise ConfigError(f"Configuration file {path} must hold a JSON object")

    logger.info("Read settings from %s", path)
    return settings


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Resolve settings from a file and explicit overrides.

    Args:
        custom_config: Overrides applied last
        config_file: Optional JSON settings file

    Returns:
        Resolved configuration
    """
    layers = []
    if config_file:
        layers.append(read_config_file(config_file))
    if custom_config:
        layers.append(custom_config)

    known: Dict[str, Any] = {}
    custom: Dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            if key == "custom":
                if not isinstance(value, dict):
                    raise ConfigError("custom settings must be a JSON object")
                custom.update(value)
            elif key in _FIELD_NAMES:
                known[key] = value
            else:
                custom[key] = value

    logger.debug("Resolved settings %s with custom keys %s", known, sorted(custom))
    return GeneratorConfig(custom=custom, **known)
