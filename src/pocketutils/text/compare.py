"""
Locale-aware "natural" string comparison - requires PyICU.

Characters are ordered by tier first (symbols < digits < ASCII letters <
everything else), then within a tier by digit value, case-insensitive
letter order, Unicode collation, or code point.
"""

__all__ = [
    "CharTier",
    "char_tier",
    "collator_for",
    "locale_compare",
    "locale_sort_key",
    "sort_strings",
]

import re
from collections.abc import Callable, Iterable
from enum import IntEnum
from functools import cmp_to_key, lru_cache
from typing import Any, Optional, Protocol

from icu import Collator, Locale

from pocketutils.config import CONFIG, TIER_SYMBOLS

_TIER_PATTERNS = (
    re.compile(r"[\s" + re.escape(TIER_SYMBOLS) + r"]"),
    re.compile(r"[0-9]"),
    re.compile(r"[a-zA-Z]"),
)


class CharTier(IntEnum):
    """Ordered character classes used by :func:`locale_compare`."""

    SYMBOL = 0
    DIGIT = 1
    LETTER = 2
    OTHER = 3


class PairCollator(Protocol):
    def compare(self, a: str, b: str) -> int: ...


def char_tier(char: str) -> CharTier:
    """
    Classify a single character.

    Example:
        >>> char_tier("!"), char_tier("7"), char_tier("q"), char_tier("中")
        (<CharTier.SYMBOL: 0>, <CharTier.DIGIT: 1>, <CharTier.LETTER: 2>, <CharTier.OTHER: 3>)
    """
    for tier, pattern in zip(CharTier, _TIER_PATTERNS):
        if pattern.fullmatch(char):
            return tier
    return CharTier.OTHER


@lru_cache(maxsize=CONFIG["collator_cache_size"])
def collator_for(locale: str) -> PairCollator:
    """
    Return the ICU collator tailored for ``locale`` (e.g. pinyin order for "zh").

    Both ``zh_CN`` and ``zh-CN`` spellings are accepted. Unknown locales fall
    back to the root collation.
    """
    return Collator.createInstance(Locale(locale.replace("-", "_")))


def _collate(a: str, b: str, collator: PairCollator) -> int:
    result = collator.compare(a, b)
    return (result > 0) - (result < 0)


def locale_compare(
    a: str,
    b: str,
    locale: Optional[str] = None,
    collator: Optional[PairCollator] = None,
) -> int:
    """
    Compare two strings, returning a negative, zero or positive integer.

    Args:
        a: First string
        b: Second string
        locale: Locale name for the collation of non-ASCII characters
                (default: CONFIG["default_locale"])
        collator: Object with a ``compare(a, b)`` method; overrides ``locale``

    Returns:
        Negative if ``a`` sorts first, positive if ``b`` does, zero if equal

    Note:
        Two ASCII letters differing only in case compare as ``+1`` whichever
        side they are on, so ``locale_compare("A", "a")`` and
        ``locale_compare("a", "A")`` are both ``1``.

    Example:
        >>> locale_compare("a!", "a1") < 0
        True
        >>> locale_compare("file2", "file10")
        1
        >>> locale_compare("ab", "abc")
        -1
    """
    for a_char, b_char in zip(a, b):
        if a_char == b_char:
            continue

        a_tier = char_tier(a_char)
        b_tier = char_tier(b_char)

        if a_tier != b_tier:
            return a_tier - b_tier
        if a_tier is CharTier.DIGIT:
            return int(a_char) - int(b_char)
        if a_tier is CharTier.LETTER:
            return -1 if a_char.lower() < b_char.lower() else 1
        if a_tier is CharTier.OTHER:
            if collator is None:
                collator = collator_for(locale or CONFIG["default_locale"])
            return _collate(a_char, b_char, collator)
        return -1 if a_char < b_char else 1

    return len(a) - len(b)


def locale_sort_key(
    locale: Optional[str] = None,
    collator: Optional[PairCollator] = None,
) -> Callable[[str], Any]:
    """
    Build a ``key=`` function for ``sorted``/``list.sort`` from locale_compare.

    Example:
        >>> sorted(["b", "1", "!"], key=locale_sort_key())
        ['!', '1', 'b']
    """
    return cmp_to_key(lambda a, b: locale_compare(a, b, locale, collator))


def sort_strings(
    items: Iterable[str],
    locale: Optional[str] = None,
    reverse: bool = False,
) -> list[str]:
    """Return a new list of ``items`` ordered by locale_compare."""
    return sorted(items, key=locale_sort_key(locale), reverse=reverse)
