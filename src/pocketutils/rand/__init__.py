"""
Random utilities subpackage - no external dependencies.

Identifier generation, bounded integers and shuffling over an injectable
random byte source.
"""

from pocketutils.rand.source import (
    ByteSource,
    default_byte_source,
    random_float,
)

from pocketutils.rand.ids import (
    nano_id,
)

from pocketutils.rand.sampling import (
    random_between,
    shuffle,
)

__all__ = [
    # source
    "ByteSource",
    "default_byte_source",
    "random_float",
    # ids
    "nano_id",
    # sampling
    "random_between",
    "shuffle",
]
