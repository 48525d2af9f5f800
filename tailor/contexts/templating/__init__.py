"""
Templating Context

Responsibilities:
- Maps a resume and selection onto template input
- Escapes user text for LaTeX
- Loads Jinja2 LaTeX templates (tailor/contexts/templating/template/)
- Renders LaTeX source documents

Owns: LaTeX template system, escaping, resume -> LaTeX generation
Never: Decides which items are selected or invokes the toolchain
"""

from tailor.contexts.templating.latex_generator import (
    LATEX_ESCAPES,
    escape_latex,
    escape_latex_url,
    generate_latex,
    prepare_template_data,
)
from tailor.contexts.templating.registries import DEFAULT_TEMPLATE, TemplateRegistry

__all__ = [
    "DEFAULT_TEMPLATE",
    "LATEX_ESCAPES",
    "TemplateRegistry",
    "escape_latex",
    "escape_latex_url",
    "generate_latex",
    "prepare_template_data",
]
