"""
API logger.

Provides logging interface for the HTTP layer with automatic [api] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[api]"


def _log_info(message: str) -> None:
    """Log info message with [api] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [api] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [api] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_request_error(method: str, path: str, status_code: int, error: Exception) -> None:
    """Log a request that ended in an error response."""
    _log_error(f"{method} {path} -> {status_code}: {error}")
