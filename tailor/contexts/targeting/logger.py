"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[target]"


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [target] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_analysis_result(analysis, dropped_scores: int, dropped_suggestions: int) -> None:
    """Log the size of a job analysis and how many unknown ids were discarded."""
    _log_info(
        f"Analysis returned {len(analysis.keywords)} keywords, "
        f"{len(analysis.scores)} scores, {len(analysis.suggested_items)} suggested items"
    )
    if dropped_scores:
        _log_warning(f"Dropped {dropped_scores} scores for unknown item ids")
    if dropped_suggestions:
        _log_warning(f"Dropped {dropped_suggestions} suggested items with unknown ids")
