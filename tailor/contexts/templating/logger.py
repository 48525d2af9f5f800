"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_generation_summary(template_name: str, selection, data: dict) -> None:
    """Log which template is rendered and how many entries survived selection."""
    scope = "all items" if selection.is_unfiltered else f"{len(selection)} selected ids"
    _log_info(f"Generating LaTeX with template '{template_name}' ({scope})")
    _log_debug(
        f"  Experience: {len(data['experience'])}, Projects: {len(data['projects'])}, "
        f"Leadership: {len(data['leadership'])}"
    )
