"""
pocketutils - Minimal, stateless utility functions.

This package is organized into focused subpackages:

- text/     Text utilities
            - compare: locale_compare, char_tier, locale_sort_key, sort_strings
                       (requires PyICU)
            - strings: truncate, visual_width, first_upper_case
            - template: format_string

- html/     HTML cleaning (no dependencies)
            - tags: strip_html

- fmt/      Formatting (no dependencies)
            - dates: format_date
            - durations: format_duration, format_seconds, parse_duration
            - sizes: format_bytes

- rand/     Randomness over an injectable byte source (no dependencies)
            - ids: nano_id
            - sampling: random_between, shuffle

- objects/  Dict and list helpers (no dependencies)
            - mappings: is_plain_object, merge_objects
            - arrays: merge_arrays, swap_array

Logging goes through loguru and is disabled until
``pocketutils.log.configure_logging`` is called.

Usage:
    from pocketutils import locale_compare, truncate, format_bytes
    from pocketutils.rand import nano_id
    from pocketutils.objects import merge_objects
"""

__version__ = "0.1.0"

from loguru import logger

logger.disable("pocketutils")

from pocketutils.text import (
    CharTier,
    char_tier,
    locale_compare,
    locale_sort_key,
    sort_strings,
    truncate,
    visual_width,
    first_upper_case,
    format_string,
)

from pocketutils.html import (
    strip_html,
)

from pocketutils.fmt import (
    format_date,
    format_duration,
    format_seconds,
    parse_duration,
    format_bytes,
)

from pocketutils.rand import (
    nano_id,
    random_between,
    shuffle,
)

from pocketutils.objects import (
    is_plain_object,
    merge_objects,
    merge_arrays,
    swap_array,
)

__all__ = [
    "__version__",
    # text.compare
    "CharTier",
    "char_tier",
    "locale_compare",
    "locale_sort_key",
    "sort_strings",
    # text.strings
    "truncate",
    "visual_width",
    "first_upper_case",
    # text.template
    "format_string",
    # html.tags
    "strip_html",
    # fmt.dates
    "format_date",
    # fmt.durations
    "format_duration",
    "format_seconds",
    "parse_duration",
    # fmt.sizes
    "format_bytes",
    # rand
    "nano_id",
    "random_between",
    "shuffle",
    # objects
    "is_plain_object",
    "merge_objects",
    "merge_arrays",
    "swap_array",
]
