"""
LaTeX Generator

Maps a Resume plus a Selection onto a LaTeX template.
"""

from typing import Any, Dict, List, Optional

from jinja2 import TemplateError

from tailor.contexts.content import Resume, Selection
from tailor.contexts.templating.logger import _log_debug, log_generation_summary
from tailor.contexts.templating.registries import DEFAULT_TEMPLATE, TemplateRegistry
from tailor.exceptions import TemplateRenderError
from tailor.utils.text_processing import set_max_consecutive_blank_lines

# Order matters: the backslash comes first
LATEX_ESCAPES = [
    ("\\", r"\textbackslash{}"),
    ("&", r"\&"),
    ("%", r"\%"),
    ("$", r"\$"),
    ("#", r"\#"),
    ("_", r"\_"),
    ("{", r"\{"),
    ("}", r"\}"),
    ("~", r"\textasciitilde{}"),
    ("^", r"\textasciicircum{}"),
    ("<", r"\textless{}"),
    (">", r"\textgreater{}"),
    ("→", r"$\rightarrow$"),
]

# Single pass: text produced by one replacement is never re-escaped by a later one
_LATEX_TRANSLATION = str.maketrans({char: replacement for char, replacement in LATEX_ESCAPES})

# Characters that break an \href target passed through a macro argument
URL_ESCAPES = [
    ("%", r"\%"),
    ("#", r"\#"),
    ("&", r"\&"),
]

_URL_TRANSLATION = str.maketrans(dict(URL_ESCAPES))

_default_registry: Optional[TemplateRegistry] = None


def escape_latex(text: Any) -> str:
    """
    Escape LaTeX special characters in user text.

    Args:
        text: Plain text (None renders as "")

    Returns:
        LaTeX-safe string

    Example:
        >>> escape_latex("R&D: 50% → 75%")
        'R\\\\&D: 50\\\\% $\\\\rightarrow$ 75\\\\%'
        >>> escape_latex("\\\\&")
        '\\\\textbackslash{}\\\\&'
    """
    if text is None:
        return ""
    return str(text).translate(_LATEX_TRANSLATION)


def escape_latex_url(url: Any) -> str:
    """
    Escape a URL for use as an \\href target.

    Only the characters hyperref cannot take verbatim inside another macro
    argument are escaped; the rest of the URL is left intact.

    Example:
        >>> escape_latex_url("github.com/jo/repo#readme")
        'github.com/jo/repo\\\\#readme'
    """
    if url is None:
        return ""
    return str(url).translate(_URL_TRANSLATION)


def prepare_template_data(resume: Resume, selection: Selection) -> Dict[str, Any]:
    """
    Build the template input for a resume and selection.

    Skills are always included. Experience and project entries keep only their
    selected bullets and are dropped when none survive, even if the entry's own
    id was selected. Leadership entries are included individually.

    Args:
        resume: Loaded resume
        selection: Items to include

    Returns:
        Dict with contact, summary, education, skills, experience, projects,
        leadership and include_skills keys
    """
    experience: List[Dict[str, Any]] = []
    for exp in resume.experience:
        bullets = [bullet.text for bullet in exp.bullets if selection.includes(bullet.id)]
        if bullets:
            experience.append(
                {
                    "title": exp.title,
                    "company": exp.company,
                    "location": exp.location,
                    "start_date": exp.start_date,
                    "end_date": exp.end_date,
                    "bullets": bullets,
                }
            )

    projects: List[Dict[str, Any]] = []
    for proj in resume.projects:
        bullets = [bullet.text for bullet in proj.bullets if selection.includes(bullet.id)]
        if bullets:
            projects.append(
                {
                    "title": proj.title,
                    "technologies": proj.technologies,
                    "github": proj.github,
                    "bullets": bullets,
                }
            )

    leadership = [lead.text for lead in resume.leadership if selection.includes(lead.id)]

    return {
        "contact": resume.contact,
        "summary": resume.summary,
        "education": resume.education,
        "skills": resume.skills,
        "include_skills": True,
        "experience": experience,
        "projects": projects,
        "leadership": leadership,
    }


def _get_default_registry() -> TemplateRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def generate_latex(
    resume: Resume,
    selection: Optional[Selection] = None,
    template_name: str = DEFAULT_TEMPLATE,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Generate LaTeX source for a resume.

    Args:
        resume: Loaded resume
        selection: Items to include (default: unfiltered)
        template_name: Template to render (default: "modern")
        registry: Template registry (default: shared registry of bundled templates)

    Returns:
        Complete LaTeX document

    Raises:
        TemplateNotFoundError: Unknown template name
        TemplateParsingError: Template has syntax errors
        TemplateRenderError: Template failed while rendering
    """
    if selection is None:
        selection = Selection.unfiltered()
    registry = registry or _get_default_registry()

    template = registry.get_template(template_name)
    data = prepare_template_data(resume, selection)
    log_generation_summary(template_name, selection, data)

    try:
        rendered = template.render(**data)
    except (TemplateError, TypeError, ValueError, AttributeError) as e:
        raise TemplateRenderError(
            "failed to execute template", template_name=template_name, original_error=e
        ) from e

    _log_debug(f"Rendered {len(rendered)} characters of LaTeX")
    return set_max_consecutive_blank_lines(rendered, max_consecutive=1)
