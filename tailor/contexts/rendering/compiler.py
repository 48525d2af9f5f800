"""
LaTeX Compilation Module

Handles compilation of LaTeX source to PDF using xelatex.
"""

import os
import re
import shutil
import subprocess
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from tailor.contexts.rendering.logger import (
    _log_debug,
    log_compilation_result,
    log_compilation_start,
)
from tailor.exceptions import CompilationError, ToolchainNotFoundError

load_dotenv()

LATEX_COMPILER = os.getenv("LATEX_COMPILER", "xelatex")
KEEP_LATEX_ARTIFACTS = os.getenv("KEEP_LATEX_ARTIFACTS", "false").lower() == "true"

# No timeout unless TAILOR_COMPILE_TIMEOUT (seconds) is set; a hung toolchain blocks the caller
_timeout_env = os.getenv("TAILOR_COMPILE_TIMEOUT")
COMPILE_TIMEOUT: Optional[float] = float(_timeout_env) if _timeout_env else None

# First pass lays out content, second resolves cross-references and pagination
NUM_PASSES = 2

# LaTeX intermediate files created during compilation
LATEX_ARTIFACTS = [".aux", ".log", ".out", ".toc"]

# Well-known installation locations, checked in order after PATH
XELATEX_PATHS = [
    Path("/Library/TeX/texbin/xelatex"),  # MacTeX on macOS
    Path("/usr/local/texlive/2025/bin/universal-darwin/xelatex"),
    Path("/usr/local/texlive/2024/bin/universal-darwin/xelatex"),
    Path("/usr/local/texlive/2023/bin/universal-darwin/xelatex"),
    Path("/usr/local/texlive/2025/bin/x86_64-linux/xelatex"),
    Path("/usr/local/texlive/2024/bin/x86_64-linux/xelatex"),
    Path("/usr/local/texlive/2023/bin/x86_64-linux/xelatex"),
    Path("/usr/bin/xelatex"),
]

INSTALL_HINT = (
    "xelatex not found. Install a TeX distribution "
    "(e.g., 'brew install --cask mactex' on macOS, 'apt install texlive-xetex' on Debian/Ubuntu)"
)


@dataclass
class CompilationResult:
    """
    Result of LaTeX compilation.

    Attributes:
        success: Whether compilation succeeded
        pdf_path: Path to generated PDF (None if failed)
        output: Combined stdout/stderr of every pass that ran
        passes_run: Number of toolchain invocations made
        errors: List of parsed LaTeX errors
        warnings: List of parsed LaTeX warnings
    """

    success: bool
    pdf_path: Optional[Path] = None
    output: str = ""
    passes_run: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def find_xelatex() -> Path:
    """
    Locate the xelatex executable.

    Checks PATH first, then XELATEX_PATHS in order.

    Raises:
        ToolchainNotFoundError: If no executable is found
    """
    on_path = shutil.which(LATEX_COMPILER)
    if on_path:
        return Path(on_path)

    for candidate in XELATEX_PATHS:
        if candidate.exists():
            return candidate

    raise ToolchainNotFoundError(INSTALL_HINT)


def _parse_latex_log(log_content: str) -> tuple[List[str], List[str]]:
    """
    Parse LaTeX log file for errors and warnings.

    Args:
        log_content: Content of the .log file

    Returns:
        Tuple of (errors, warnings)
    """
    errors = [match.group(1).strip() for match in re.finditer(r"^! (.+)$", log_content, re.MULTILINE)]

    warning_patterns = [
        r"LaTeX Warning: (.+)",
        r"Package \w+ Warning: (.+)",
        r"Overfull \\hbox \((.+)\)",
        r"Underfull \\hbox \((.+)\)",
    ]
    warnings = []
    for pattern in warning_patterns:
        for match in re.finditer(pattern, log_content, re.MULTILINE):
            warnings.append(match.group(1).strip())

    return errors, warnings


def _remove_artifacts(tex_path: Path, output_dir: Path) -> None:
    """Best-effort removal of intermediate LaTeX files."""
    for ext in LATEX_ARTIFACTS:
        artifact_path = output_dir / f"{tex_path.stem}{ext}"
        try:
            artifact_path.unlink(missing_ok=True)
        except OSError as e:
            _log_debug(f"Could not remove {artifact_path}: {e}")


def compile_latex(
    tex_file: Path,
    output_dir: Optional[Path] = None,
    keep_artifacts: bool = KEEP_LATEX_ARTIFACTS,
    timeout: Optional[float] = COMPILE_TIMEOUT,
    compiler: Optional[Path] = None,
) -> CompilationResult:
    """
    Compile a LaTeX file to PDF with xelatex.

    Runs exactly NUM_PASSES passes. A non-zero exit stops immediately; the
    remaining passes are never attempted.

    Args:
        tex_file: Path to the .tex file to compile
        output_dir: Directory for the PDF and artifacts (default: tex_file's directory)
        keep_artifacts: Keep .aux/.log/.out/.toc after a successful compile
        timeout: Seconds allowed per pass (None: wait indefinitely)
        compiler: xelatex executable (default: find_xelatex())

    Returns:
        CompilationResult with success status and diagnostic information

    Raises:
        ToolchainNotFoundError: If xelatex cannot be located
        CompilationError: If a pass exceeds the timeout
    """
    tex_file = Path(tex_file).resolve()
    output_dir = Path(output_dir).resolve() if output_dir else tex_file.parent
    compiler = compiler or find_xelatex()

    log_compilation_start(tex_file, compiler, output_dir)

    # Stale PDFs would make a failed run look successful
    pdf_path = output_dir / f"{tex_file.stem}.pdf"
    pdf_path.unlink(missing_ok=True)

    cmd = [
        str(compiler),
        "-interaction=nonstopmode",
        f"-output-directory={output_dir}",
        str(tex_file),
    ]

    outputs = []
    passes_run = 0
    success = True
    start_time = time.time()

    for _ in range(NUM_PASSES):
        try:
            result = subprocess.run(
                cmd,
                cwd=output_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",  # Replace invalid UTF-8 bytes instead of crashing
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            partial = e.output if isinstance(e.output, str) else ""
            raise CompilationError(
                f"xelatex timed out after {timeout}s", output="\n".join(outputs + [partial])
            ) from e

        passes_run += 1
        outputs.append(result.stdout or "")

        if result.returncode != 0:
            success = False
            break

    combined_output = "\n".join(outputs)

    errors: List[str] = []
    warnings: List[str] = []
    log_file = output_dir / f"{tex_file.stem}.log"
    if log_file.exists():
        # xelatex logs may contain non-UTF-8 font metadata
        errors, warnings = _parse_latex_log(log_file.read_text(encoding="latin-1"))

    if not success and not errors:
        errors.append(f"xelatex exited with status {result.returncode}")

    if success and not pdf_path.exists():
        success = False
        errors.append("PDF file was not generated")

    if success and not keep_artifacts:
        _remove_artifacts(tex_file, output_dir)

    compilation = CompilationResult(
        success=success,
        pdf_path=pdf_path if success else None,
        output=combined_output,
        passes_run=passes_run,
        errors=errors,
        warnings=warnings,
    )
    log_compilation_result(tex_file.stem, compilation, time.time() - start_time)
    return compilation


def compile_document(
    latex_source: str,
    timeout: Optional[float] = COMPILE_TIMEOUT,
) -> bytes:
    """
    Compile LaTeX source text to PDF bytes in a temporary directory.

    Args:
        latex_source: Complete LaTeX document
        timeout: Seconds allowed per pass (None: wait indefinitely)

    Returns:
        PDF file contents

    Raises:
        ToolchainNotFoundError: If xelatex cannot be located
        CompilationError: If xelatex fails, with its raw output attached
    """
    compiler = find_xelatex()

    with tempfile.TemporaryDirectory(prefix="resume-pdf-") as tmp:
        tex_file = Path(tmp) / "resume.tex"
        tex_file.write_text(latex_source, encoding="utf-8")

        result = compile_latex(tex_file, output_dir=Path(tmp), timeout=timeout, compiler=compiler)
        if not result.success:
            raise CompilationError(f"xelatex failed: {'; '.join(result.errors)}", output=result.output)

        try:
            return result.pdf_path.read_bytes()
        except OSError as e:
            raise CompilationError(f"failed to read PDF: {e}") from e
