"""Random integers and in-place shuffling."""

__all__ = [
    "random_between",
    "shuffle",
]

import math
from typing import MutableSequence, Optional, TypeVar

from pocketutils.rand.source import ByteSource, random_float

T = TypeVar("T")


def random_between(a: int, b: int, source: Optional[ByteSource] = None) -> int:
    """
    Return a random integer between ``a`` and ``b``, both inclusive.

    The bounds may be given in either order.

    Example:
        >>> random_between(3, 3)
        3
    """
    low, high = min(a, b), max(a, b)
    span = high - low + 1
    return low + min(math.floor(random_float(source) * span), span - 1)


def shuffle(
    items: MutableSequence[T], source: Optional[ByteSource] = None
) -> MutableSequence[T]:
    """
    Shuffle ``items`` in place by sorting them on random keys.

    Returns:
        The same sequence object, reordered
    """
    keys = [random_float(source) for _ in range(len(items))]
    order = sorted(range(len(items)), key=keys.__getitem__)
    items[:] = [items[i] for i in order]
    return items
