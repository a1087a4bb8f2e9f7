"""
Formatting utilities subpackage.

Pure functions for dates, durations and byte sizes.
"""

from pocketutils.fmt.dates import (
    format_date,
)

from pocketutils.fmt.durations import (
    format_duration,
    format_seconds,
    parse_duration,
)

from pocketutils.fmt.sizes import (
    format_bytes,
)

__all__ = [
    # dates
    "format_date",
    # durations
    "format_duration",
    "format_seconds",
    "parse_duration",
    # sizes
    "format_bytes",
]
