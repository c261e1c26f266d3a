"""
Jinja2 environment used to lay out generated source.

Every backend ships its templates as strings; the engine holds them in
memory and renders them by name.
"""

from typing import Mapping

from jinja2 import DictLoader, Environment
from jinja2 import TemplateError as JinjaTemplateError


class TemplateError(Exception):
    """Raised when a template is missing or fails to render."""

    pass


class TemplateEngine:
    """Renders named in-memory templates into source text."""

    def __init__(self, templates: Mapping[str, str]):
        # Output is source code: no escaping, trailing newlines are significant
        self._env = Environment(
            loader=DictLoader(dict(templates)),
            autoescape=False,
            keep_trailing_newline=True,
        )

    def render(self, name: str, /, **context) -> str:
        try:
            return self._env.get_template(name).render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Cannot render template {name}: {e}") from e

    def __contains__(self, name: str) -> bool:
        return name in self._env.loader.list_templates()
