"""
tailor - build tailored LaTeX resumes from a structured resume file

Selects resume content by identifier or tag, renders it through a LaTeX
template, compiles it to PDF, and scores content against job descriptions
with a remote language model.

Architecture:
- Content Context: Resume data model, selection, section ordering
- Templating Context: LaTeX template rendering and escaping
- Rendering Context: PDF compilation with xelatex
- Targeting Context: Job description matching via LLM
- API: HTTP JSON surface for the front-end
"""

__version__ = "0.1.0"
