"""
Rendering Context

Responsibilities:
- Locates the xelatex toolchain
- Compiles LaTeX to PDF (two passes)
- Surfaces toolchain diagnostics on failure

Owns: LaTeX compilation, PDF generation
Never: Modifies template content
"""

from tailor.contexts.rendering.compiler import (
    NUM_PASSES,
    CompilationResult,
    compile_document,
    compile_latex,
    find_xelatex,
)

__all__ = [
    "NUM_PASSES",
    "CompilationResult",
    "compile_document",
    "compile_latex",
    "find_xelatex",
]
