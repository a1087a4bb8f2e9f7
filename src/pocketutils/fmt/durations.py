"""
Duration formatting and parsing - no external dependencies.

Functions converting between milliseconds/seconds and clock-style strings.
"""

__all__ = [
    "format_duration",
    "format_seconds",
    "parse_duration",
]

import math
import re

from loguru import logger

from pocketutils.config import CONFIG

_DURATION_PATTERN = re.compile(r"^(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,3}))?$", re.ASCII)


def _trunc_mod(value: float, modulus: int) -> int:
    """Truncating remainder (keeps the sign of value)."""
    return int(math.fmod(math.trunc(value), modulus))


def format_duration(
    milliseconds: float,
    leading: bool = False,
    ms: bool = False,
) -> str:
    """
    Format a duration in milliseconds as ``[h:]mm:ss[.SSS]``.

    Args:
        milliseconds: Duration in milliseconds
        leading: Zero-pad the first field (always on once hours are shown)
        ms: Append the milliseconds part

    Returns:
        Clock-style duration string

    Example:
        >>> format_duration(65000)
        '1:05'
        >>> format_duration(65000, leading=True)
        '01:05'
        >>> format_duration(3723004, ms=True)
        '1:02:03.004'
    """
    millis = _trunc_mod(milliseconds, 1000)
    seconds = _trunc_mod(milliseconds / 1000, 60)
    minutes = _trunc_mod(milliseconds / 60000, 60)
    hours = math.trunc(milliseconds / 3600000)

    result = ""
    if hours > 0:
        result = (f"{hours:02d}" if leading else str(hours)) + ":"
        leading = True
    result += (f"{minutes:02d}" if leading else str(minutes)) + f":{seconds:02d}"
    if ms:
        result += f".{millis:03d}"
    return result


def format_seconds(seconds: int) -> str:
    """
    Format seconds as a compact ``Xd Xh Xm Xs`` string, omitting zero units.

    Example:
        >>> format_seconds(90061)
        '1d 1h 1m 1s'
        >>> format_seconds(3600)
        '1h'
        >>> format_seconds(0)
        ''
    """
    days = seconds // 86400
    hours = seconds % 86400 // 3600
    minutes = seconds % 3600 // 60
    secs = seconds % 60
    parts = [
        f"{value}{unit}"
        for value, unit in ((days, "d"), (hours, "h"), (minutes, "m"), (secs, "s"))
        if value > 0
    ]
    return " ".join(parts)


def parse_duration(text: str) -> int:
    """
    Parse ``HH:MM:SS[.fff]`` into milliseconds.

    Args:
        text: Duration string; surrounding whitespace is ignored

    Returns:
        Milliseconds, or 0 if the text does not match or a field exceeds 59

    Example:
        >>> parse_duration("01:02:03.5")
        3723500
        >>> parse_duration("00:60:00")
        0
    """
    if not text:
        return 0
    match = _DURATION_PATTERN.match(text.strip())
    if not match:
        logger.debug("Unparseable duration {!r}", text)
        return 0

    hours, minutes, seconds = (int(g) for g in match.group(1, 2, 3))
    fraction = match.group(4) or ""
    limit = CONFIG["duration_field_max"]
    if hours > limit or minutes > limit or seconds > limit:
        logger.debug("Duration field out of range in {!r}", text)
        return 0

    millis = int(fraction.ljust(3, "0")) if fraction else 0
    return ((hours * 60 + minutes) * 60 + seconds) * 1000 + millis
