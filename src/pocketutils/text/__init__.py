"""
Text utilities subpackage.

Pure functions for comparison, truncation, capitalization and templating.
Only ``compare`` needs a third-party package (PyICU).
"""

from pocketutils.text.strings import (
    first_upper_case,
    visual_width,
    truncate,
)

from pocketutils.text.template import (
    format_string,
)

from pocketutils.text.compare import (
    CharTier,
    char_tier,
    collator_for,
    locale_compare,
    locale_sort_key,
    sort_strings,
)

__all__ = [
    # strings
    "first_upper_case",
    "visual_width",
    "truncate",
    # template
    "format_string",
    # compare
    "CharTier",
    "char_tier",
    "collator_for",
    "locale_compare",
    "locale_sort_key",
    "sort_strings",
]
