"""
Pure HTML tag utilities - no external dependencies.

Functions that clean HTML strings. No parser or framework dependencies.
"""

__all__ = [
    "strip_html",
]

import re
from collections.abc import Iterable

_INDENTED_BREAKS = re.compile(r"([\r\n]+ +)+", re.MULTILINE)


def strip_html(html: str, ignored_tags: Iterable[str] = ()) -> str:
    """
    Remove HTML tags, keeping the ones listed in ``ignored_tags``.

    - Tag names match whole words: ignoring "b" still strips "br" and "body".
    - Empty brackets ("<>") are not tags and are kept.
    - A "<" followed by a space is not a tag: "a < b and c > d" is kept.
    - Line breaks followed by indentation are removed afterwards.

    Args:
        html: HTML text
        ignored_tags: Tag names to keep (the iterable is not modified)

    Returns:
        Text without the stripped tags

    Example:
        >>> strip_html("<p>Hello <b>big</b><br/>world</p>", ["b"])
        'Hello <b>big</b>world'
        >>> strip_html("a < b and c > d")
        'a < b and c > d'
    """
    names = [re.escape(tag) for tag in ignored_tags] + [" "]
    tag_pattern = re.compile(
        r"<(?!/?(" + "|".join(names) + r")\b)[^<>]+>", re.MULTILINE
    )
    return _INDENTED_BREAKS.sub("", tag_pattern.sub("", html))
