"""Date formatting with ``yyyy-MM-dd hh:mm:ss.SSS`` style patterns."""

__all__ = ["format_date"]

from datetime import datetime, timezone
from typing import Union

from loguru import logger

DateLike = Union[datetime, int, float, None]


def _to_datetime(date: DateLike, utc: bool) -> datetime:
    if isinstance(date, (int, float)):
        # Epoch milliseconds
        return datetime.fromtimestamp(date / 1000, tz=timezone.utc if utc else None)
    if utc:
        return date.astimezone(timezone.utc)
    if date.tzinfo is not None:
        return date.astimezone()
    return date


def format_date(date: DateLike, pattern: str, utc: bool = False) -> str:
    """
    Format a date with a token pattern.

    Tokens are replaced in this order, each one everywhere it occurs:
    ``yyyy yy MM M dd d hh h mm m ss s SSS S``. Two-letter tokens are zero
    padded; ``hh`` is the 24-hour clock. Other characters are kept.

    Args:
        date: datetime, or epoch milliseconds
        pattern: Token pattern
        utc: Render in UTC instead of local time (naive datetimes are
             taken as local time)

    Returns:
        Formatted string, or "" for a falsy date

    Example:
        >>> format_date(datetime(2024, 3, 5, 7, 8, 9, 45000), "yyyy-MM-dd hh:mm:ss.SSS")
        '2024-03-05 07:08:09.045'
        >>> format_date(None, "yyyy")
        ''
    """
    if not date:
        logger.debug("format_date called with falsy date {!r}", date)
        return ""

    dt = _to_datetime(date, utc)
    millis = dt.microsecond // 1000
    replacements = (
        ("yyyy", str(dt.year)),
        ("yy", str(dt.year)[-2:]),
        ("MM", f"{dt.month:02d}"),
        ("M", str(dt.month)),
        ("dd", f"{dt.day:02d}"),
        ("d", str(dt.day)),
        ("hh", f"{dt.hour:02d}"),
        ("h", str(dt.hour)),
        ("mm", f"{dt.minute:02d}"),
        ("m", str(dt.minute)),
        ("ss", f"{dt.second:02d}"),
        ("s", str(dt.second)),
        ("SSS", f"{millis:03d}"),
        ("S", str(millis)),
    )
    for token, value in replacements:
        pattern = pattern.replace(token, value)
    return pattern
