"""
Template Registry

Loads and caches the Jinja2 templates used to generate LaTeX documents.
"""

import os
import re
from pathlib import Path
from typing import Callable, Dict, Optional

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from jinja2 import TemplateSyntaxError

from tailor.contexts.templating.logger import _log_debug
from tailor.exceptions import TemplateNotFoundError, TemplateParsingError

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("TAILOR_TEMPLATES_PATH", Path(__file__).resolve().parent / "template")
)
DEFAULT_TEMPLATE = "modern"
TEMPLATE_SUFFIX = ".tex.jinja"

_TEMPLATE_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX generation.

    Templates are stored as {templates_path}/{name}.tex.jinja and use custom
    delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>

    Every template gets a `latex` filter that escapes user text and a
    `latex_url` filter for \\href targets.
    """

    def __init__(
        self,
        templates_path: Optional[Path] = None,
        escape_filter: Optional[Callable[[str], str]] = None,
    ):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding *.tex.jinja files. Defaults to
                            TAILOR_TEMPLATES_PATH or the bundled templates
            escape_filter: Function bound to the `latex` filter (default: escape_latex)
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH
        # Imported here to avoid circular dependency with latex_generator
        from tailor.contexts.templating.latex_generator import escape_latex, escape_latex_url

        if escape_filter is None:
            escape_filter = escape_latex

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self.env.filters["latex"] = escape_filter
        self.env.filters["latex_url"] = escape_latex_url

    def get_template(self, name: str = DEFAULT_TEMPLATE) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without suffix (e.g., "modern")

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFoundError: If no template file exists for the name
            TemplateParsingError: If the template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        if not _TEMPLATE_NAME.match(name):
            raise TemplateNotFoundError(f"invalid template name: {name!r}")

        try:
            template = self.env.get_template(f"{name}{TEMPLATE_SUFFIX}")
        except TemplateNotFound as e:
            raise TemplateNotFoundError(
                f"template '{name}' not found at {self.get_template_path(name)}"
            ) from e
        except TemplateSyntaxError as e:
            raise TemplateParsingError(
                "failed to parse template", template_name=name, original_error=e
            ) from e

        _log_debug(f"Loaded template {name} from {self.templates_path}")
        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        return self.templates_path / f"{name}{TEMPLATE_SUFFIX}"

    def available_templates(self) -> list:
        """Names of all templates in the templates directory."""
        return sorted(
            path.name[: -len(TEMPLATE_SUFFIX)]
            for path in self.templates_path.glob(f"*{TEMPLATE_SUFFIX}")
        )

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
