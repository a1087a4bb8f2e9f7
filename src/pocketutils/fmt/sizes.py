"""Human readable byte sizes."""

__all__ = ["format_bytes"]

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from pocketutils.config import BYTE_UNITS, CONFIG


def format_bytes(size: Optional[Union[int, float]]) -> str:
    """
    Format a number of bytes with binary units (B, K, M, G, T, P, E, Z).

    K, M and G keep one decimal, each larger unit one more; trailing zeros
    are dropped. Values below one byte (and None) give "0".

    Example:
        >>> format_bytes(512)
        '512B'
        >>> format_bytes(1536)
        '1.5K'
        >>> format_bytes(1024 ** 3)
        '1G'
    """
    if not size or size < 1:
        return "0"

    base = CONFIG["byte_base"]
    exponent = 0
    while exponent < len(BYTE_UNITS) - 1 and size >= base ** (exponent + 1):
        exponent += 1

    places = max(1, exponent - 2) if exponent else 0
    value = (Decimal(size) / Decimal(base) ** exponent).quantize(
        Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP
    )
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text + BYTE_UNITS[exponent]
