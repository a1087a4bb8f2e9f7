"""
Command line interface for pocketutils.

Exposes the formatting, comparison and id helpers as sub-commands:
    pocketutils nanoid --size=10
    pocketutils bytes 1536
    pocketutils sort b 10 2 --locale=zh
    pocketutils --log-level=DEBUG parse-duration 01:02:03
"""

__all__ = ["Commands", "main"]

import time
from datetime import datetime, timezone
from typing import Optional

import fire
from loguru import logger

from pocketutils.fmt import (
    format_bytes,
    format_date,
    format_duration,
    format_seconds,
    parse_duration,
)
from pocketutils.html import strip_html
from pocketutils.log import configure_logging
from pocketutils.rand import nano_id
from pocketutils.text import format_string, locale_compare, sort_strings, truncate


class Commands:
    """Small text, time and id utilities."""

    def __init__(self, log_level: Optional[str] = None):
        configure_logging(log_level)
        logger.debug("CLI started with log level {}", log_level)

    def nanoid(self, size: Optional[int] = None) -> str:
        """Print a random URL-safe identifier."""
        return nano_id(size)

    def bytes(self, size: float) -> str:
        """Print a byte count in human units (e.g. 1.5K)."""
        return format_bytes(size)

    def duration(self, milliseconds: float, leading: bool = False, ms: bool = False) -> str:
        """Print milliseconds as [h:]mm:ss[.SSS]."""
        return format_duration(milliseconds, leading=leading, ms=ms)

    def seconds(self, seconds: int) -> str:
        """Print seconds as 'Xd Xh Xm Xs'."""
        return format_seconds(int(seconds))

    def parse_duration(self, text: str) -> int:
        """Print the milliseconds of an HH:MM:SS[.fff] string."""
        return parse_duration(str(text))

    def date(
        self,
        pattern: str = "yyyy-MM-dd hh:mm:ss",
        timestamp: Optional[float] = None,
        utc: bool = False,
    ) -> str:
        """Print a date (epoch milliseconds, default now) with a token pattern."""
        if timestamp is None:
            timestamp = time.time() * 1000
        return format_date(
            datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc), pattern, utc=utc
        )

    def compare(self, a: str, b: str, locale: Optional[str] = None) -> int:
        """Print the three-way comparison of two strings."""
        return locale_compare(str(a), str(b), locale)

    def sort(self, *items: str, locale: Optional[str] = None, reverse: bool = False) -> list:
        """Print the arguments in natural, locale-aware order."""
        return sort_strings((str(item) for item in items), locale, reverse=reverse)

    def truncate(self, text: str, width: int, suffix: Optional[str] = None) -> str:
        """Print text truncated to a visual width (CJK counts double)."""
        return truncate(str(text), int(width), suffix)

    def strip_html(self, html: str, *keep: str) -> str:
        """Print html without tags, except the tag names given after it."""
        return strip_html(str(html), keep)

    def template(self, pattern: str, *values: str, **keyed: str) -> str:
        """Fill {0}/{1} placeholders from arguments, or {key} from --key flags."""
        return format_string(str(pattern), keyed if keyed else values)


def main() -> None:
    fire.Fire(Commands, name="pocketutils")
