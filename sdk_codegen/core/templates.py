"""
Jinja2 rendering for generator templates.

Each language module keeps its templates as strings; a TemplateEngine
serves them from memory and exposes naming filters to template text.
"""

from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateNotFound
from jinja2.exceptions import TemplateError as JinjaTemplateError

from .errors import CodegenError
from .naming import NamingCase, convert_case, quote_literal


class TemplateError(CodegenError):
    """A template is missing or failed to render."""

    pass


class TemplateEngine:
    """In-memory Jinja2 environment tuned for source code output."""

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        self._loader = DictLoader(dict(templates or {}))
        # Block tags leave no blank lines behind; undefined names fail loudly
        self._env = Environment(
            loader=self._loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        self._env.filters.update(
            {
                "snake_case": _case_filter(NamingCase.SNAKE_CASE),
                "camel_case": _case_filter(NamingCase.CAMEL_CASE),
                "pascal_case": _case_filter(NamingCase.PASCAL_CASE),
                "quote": lambda value, quote='"': quote_literal(str(value), quote),
            }
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is unknown, refers to a name
                missing from context, or fails while rendering
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def add_template(self, name: str, content: str):
        """Register or replace a template."""
        self._loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        return template_name in self._loader.mapping


def _case_filter(case: NamingCase):
    return lambda value: convert_case(str(value), case)


def create_template_engine(templates: Optional[Dict[str, str]] = None) -> TemplateEngine:
    """Create a template engine preloaded with in-memory templates."""
    return TemplateEngine(templates)
