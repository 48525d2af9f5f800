"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_compilation_start(tex_file: Path, compiler: Path, output_dir: Path) -> None:
    """Log start of compilation with context."""
    _log_info(f"Compiling {tex_file.name} with {compiler}")
    _log_debug(f"  Source: {tex_file}")
    _log_debug(f"  Output directory: {output_dir}")


def log_compilation_result(name: str, result, elapsed_time: float) -> None:
    """
    Log compilation result with diagnostics.

    Args:
        name: Document name (tex file stem)
        result: CompilationResult from compile_latex()
        elapsed_time: Time taken to compile
    """
    if result.success:
        _log_success(f"{name}: compiled in {result.passes_run} passes ({elapsed_time:.2f}s)")
        _log_debug(f"  PDF: {result.pdf_path}")
    else:
        _log_error(f"{name}: compilation failed after {result.passes_run} pass(es) ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors[:5], 1):
            _log_error(f"  Error {i}: {err}")
        if len(result.errors) > 5:
            _log_error(f"  ... and {len(result.errors) - 5} more errors")

    if result.warnings:
        _log_warning(f"{len(result.warnings)} warnings detected")
        for i, warn in enumerate(result.warnings[:3], 1):
            _log_debug(f"  Warning {i}: {warn}")

    # raw=True keeps loguru from prefixing every line of multi-line output
    if not result.success and result.output:
        logger.opt(raw=True).debug(
            f"\n{'=' * 80}\nXELATEX OUTPUT:\n{'=' * 80}\n{result.output}\n"
        )
