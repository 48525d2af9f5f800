"""Text processing utilities shared by templating, targeting and the CLI."""

import re
from typing import List


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def truncate_suffix(text: str, max_len: int) -> str:
    """
    Cut text at max_len characters and append "..." when anything was removed.

    Unlike truncate_display the ellipsis is not counted against max_len.

    Example:
        >>> truncate_suffix("abcdef", 3)
        'abc...'
    """
    return text if len(text) <= max_len else text[:max_len] + "..."


def slugify(name: str) -> str:
    """
    Lowercase a display name and replace spaces with hyphens.

    Example:
        >>> slugify("Google Cloud")
        'google-cloud'
    """
    return name.replace(" ", "-").lower()


def split_csv(values: List[str]) -> List[str]:
    """
    Flatten comma-separated option values into a list of non-empty items.

    Example:
        >>> split_csv(["a,b", "c"])
        ['a', 'b', 'c']
    """
    items = []
    for value in values:
        items.extend(part.strip() for part in value.split(",") if part.strip())
    return items


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Args:
        content: The text content to normalize
        max_consecutive: Maximum number of consecutive blank lines to allow.
                        Use 0 to remove all blank lines (default: 1)

    Returns:
        Content with normalized blank lines

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
    """
    if max_consecutive == 0:
        pattern = r"\n\s*\n(\s*\n)*"
    else:
        pattern = r"\n\s*\n(\s*\n)+"

    # max_consecutive=1 means "\n\n", i.e. one blank line
    replacement = "\n" * (max_consecutive + 1)

    return re.sub(pattern, replacement, content)
