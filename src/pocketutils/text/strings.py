"""
Pure text utilities - no external dependencies.

Functions for capitalization, visual width and mixed-width truncation.
"""

__all__ = [
    "first_upper_case",
    "visual_width",
    "truncate",
]

import re
from typing import Optional

from pocketutils.config import CONFIG

_WORD_START = re.compile(r"( |^)[a-z]")


def first_upper_case(text: str) -> str:
    """
    Lower-case text, then capitalize its first letter and every letter after a space.

    Args:
        text: Text to capitalize

    Returns:
        Capitalized text

    Example:
        >>> first_upper_case("hello WORLD")
        'Hello World'
        >>> first_upper_case("tab\\tseparated")
        'Tab\\tseparated'
    """
    return _WORD_START.sub(lambda m: m.group(0).upper(), text.lower())


def char_width(char: str) -> int:
    """Return 1 for ASCII characters and 2 for everything else."""
    return 1 if ord(char) <= CONFIG["narrow_max_codepoint"] else 2


def visual_width(text: str) -> int:
    """
    Approximate on-screen width of mixed CJK/latin text.

    Example:
        >>> visual_width("中文abc")
        7
    """
    return sum(char_width(c) for c in text)


def truncate(text: str, max_width: int, suffix: Optional[str] = None) -> str:
    """
    Truncate text at the first prefix that reaches a visual width, adding suffix.

    Wide (non-ASCII) characters count as two units. The scan starts at
    ``max_width // 2`` characters, since no prefix shorter than that can reach
    the budget, and stops at the first prefix whose width is at least
    ``max_width``. The suffix is appended after that prefix. Text that fits,
    or that has no such prefix before its last character, is returned as is.

    Args:
        text: Text to truncate
        max_width: Visual width the kept prefix must reach
        suffix: Suffix to add if truncated (default: CONFIG["ellipsis"])

    Returns:
        Truncated text with suffix, or original if narrow enough

    Example:
        >>> truncate("中文abc", 6)
        '中文ab...'
        >>> truncate("abc", 1)
        'a...'
        >>> truncate("short", 10)
        'short'
    """
    if suffix is None:
        suffix = CONFIG["ellipsis"]
    if visual_width(text) <= max_width:
        return text

    for end in range(max(max_width, 0) // 2, len(text)):
        prefix = text[:end]
        if visual_width(prefix) >= max_width:
            return prefix + suffix
    return text
