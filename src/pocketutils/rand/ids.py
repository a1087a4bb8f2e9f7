"""URL-safe random identifiers."""

__all__ = ["nano_id"]

from typing import Optional

from pocketutils.config import CONFIG, NANO_ID_ALPHABET
from pocketutils.rand.source import ByteSource, default_byte_source

# Largest multiple of the alphabet size that fits in a byte (248 for 62 letters).
_ACCEPT_BELOW = 256 - 256 % len(NANO_ID_ALPHABET)


def nano_id(size: Optional[int] = None, source: Optional[ByteSource] = None) -> str:
    """
    Generate a nano id made of ``0-9a-zA-Z`` only (no "-" or "_").

    Each character consumes one random byte reduced modulo the 62-letter
    alphabet. Bytes of 248 and above are discarded and replaced with fresh
    ones so that every letter is equally likely.

    Args:
        size: Number of characters (default: CONFIG["nano_id_size"])
        source: Random byte source (default: secrets.token_bytes)

    Returns:
        Random identifier

    Example:
        >>> nano_id(4, source=lambda n: bytes([0, 10, 36, 61][:n]))
        '0aAZ'
    """
    if size is None:
        size = CONFIG["nano_id_size"]
    if size <= 0:
        return ""
    source = source or default_byte_source
    chars: list[str] = []
    while len(chars) < size:
        for byte in source(size - len(chars)):
            if byte < _ACCEPT_BELOW:
                chars.append(NANO_ID_ALPHABET[byte % len(NANO_ID_ALPHABET)])
    return "".join(chars)
