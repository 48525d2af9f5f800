"""
Shared utilities for tailor.

Common functionality used across contexts:
- Logging setup
- Text processing
- LLM provider and response parsing
"""

from tailor.utils.text_processing import slugify, truncate_display

__all__ = ["slugify", "truncate_display"]
