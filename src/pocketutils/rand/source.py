"""
Random byte sources.

Every random helper takes an optional ``source``: a callable returning ``n``
random bytes. The default is the OS CSPRNG; tests pass deterministic ones.
"""

__all__ = [
    "ByteSource",
    "default_byte_source",
    "random_float",
]

import secrets
from typing import Callable, Optional

ByteSource = Callable[[int], bytes]

default_byte_source: ByteSource = secrets.token_bytes


def random_float(source: Optional[ByteSource] = None) -> float:
    """Return a float in [0.0, 1.0) built from 53 random bits of ``source``."""
    raw = (source or default_byte_source)(7)
    return (int.from_bytes(raw, "big") >> 3) / (1 << 53)
