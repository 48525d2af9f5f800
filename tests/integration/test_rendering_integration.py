"""
Integration tests for rendering - tests real LaTeX compilation.
"""

import shutil

import pytest

from tailor.contexts.content import select_by_ids
from tailor.contexts.rendering import compile_document, compile_latex
from tailor.contexts.templating import generate_latex
from tailor.exceptions import CompilationError

# Check if xelatex is available
XELATEX_AVAILABLE = shutil.which("xelatex") is not None
skip_if_no_xelatex = pytest.mark.skipif(
    not XELATEX_AVAILABLE,
    reason="xelatex not installed - install TeX Live, MiKTeX, or MacTeX"
)


@pytest.mark.integration
@pytest.mark.latex
@skip_if_no_xelatex
def test_compile_sample_resume(resume, tmp_path):
    """Test that the bundled template compiles for the full sample resume."""
    tex_file = tmp_path / "resume.tex"
    tex_file.write_text(generate_latex(resume), encoding="utf-8")

    result = compile_latex(tex_file)

    assert result.success, f"Compilation failed with errors: {result.errors}"
    assert result.passes_run == 2
    assert result.pdf_path.exists()
    assert result.pdf_path.stat().st_size > 0
    assert not (tmp_path / "resume.aux").exists()


@pytest.mark.integration
@pytest.mark.latex
@skip_if_no_xelatex
def test_compile_document_filtered(resume):
    """Test in-memory compilation of a filtered resume."""
    latex = generate_latex(resume, select_by_ids(["acme-latency", "meetup"]))

    pdf_bytes = compile_document(latex)

    assert pdf_bytes.startswith(b"%PDF")


@pytest.mark.integration
@pytest.mark.latex
@skip_if_no_xelatex
def test_compile_with_intentional_error():
    """Test that compilation properly detects and reports errors."""
    broken = r"""
\documentclass{article}
\begin{document}
\undefinedcommand
\end{document}
"""
    with pytest.raises(CompilationError) as exc_info:
        compile_document(broken)

    assert "Undefined control sequence" in exc_info.value.output
