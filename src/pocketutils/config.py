"""
Library configuration and defaults.

All default constants used by the utility functions are centralized here
for easy maintenance and tuning.
"""

__all__ = ["CONFIG", "TIER_SYMBOLS", "BYTE_UNITS", "NANO_ID_ALPHABET"]

import string
from typing import Any, Dict, Tuple

# ====================================================================
# CHARACTER SETS
# ====================================================================

# Symbols that sort before digits in locale_compare (whitespace is added by
# the comparator itself).
TIER_SYMBOLS: str = "~!@#$%^&*()-_+={}[]|<>,.?/\\"

# Digits first, then lowercase, then uppercase (62 characters, URL safe).
NANO_ID_ALPHABET: str = string.digits + string.ascii_lowercase + string.ascii_uppercase

BYTE_UNITS: Tuple[str, ...] = ("B", "K", "M", "G", "T", "P", "E", "Z")

# ====================================================================
# LIBRARY CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Identifiers
    "nano_id_size": 21,  # Same default length as the nanoid project
    # Comparison
    "default_locale": "zh",  # Locale used by locale_compare when none is given
    "collator_cache_size": 32,  # Max number of per-locale collators kept alive
    # Truncation
    "ellipsis": "...",  # Marker appended to truncated strings
    "narrow_max_codepoint": 0x7F,  # Highest code point counted as one width unit
    # Sizes & durations
    "byte_base": 1024,  # Binary multiples (K = 1024 B)
    "duration_field_max": 59,  # Largest valid HH, MM or SS field in parse_duration
    # Logging
    "log_level": "WARNING",  # Default CLI log level
    "log_format": "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
}
