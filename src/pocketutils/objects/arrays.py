"""List helpers that work in place."""

__all__ = [
    "merge_arrays",
    "swap_array",
]

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, MutableSequence, Sequence, TypeVar

from loguru import logger

T = TypeVar("T")


def _fields(obj: Any):
    return obj.items() if isinstance(obj, Mapping) else vars(obj).items()


def _assign(target: Any, source: Any) -> None:
    """Copy the fields of source onto target (dict keys or attributes)."""
    if isinstance(target, MutableMapping):
        target.update(_fields(source))
        return
    for name, value in _fields(source):
        setattr(target, name, value)


def merge_arrays(
    first: Sequence[T],
    second: Sequence[Any],
    predicate: Callable[[T, Any], bool],
) -> list[T]:
    """
    Pair elements of two lists and merge each matched pair.

    For each element of ``first`` (in order) the first element of ``second``
    satisfying ``predicate(a, b)`` is taken out of a working copy of
    ``second`` and its fields are assigned onto the ``first`` element, which
    is modified in place. Elements of ``first`` without a match are left out.

    Args:
        first: Elements to update
        second: Elements providing new field values (not modified)
        predicate: Match function, e.g. ``lambda a, b: a["id"] == b["id"]``

    Returns:
        New list of the matched (and updated) elements of ``first``

    Example:
        >>> users = [{"id": 1}, {"id": 2}]
        >>> merge_arrays(users, [{"id": 2, "name": "b"}], lambda a, b: a["id"] == b["id"])
        [{'id': 2, 'name': 'b'}]
        >>> users
        [{'id': 1}, {'id': 2, 'name': 'b'}]
    """
    remaining = list(second)
    merged: list[T] = []
    for item in first:
        index = next((i for i, other in enumerate(remaining) if predicate(item, other)), -1)
        if index > -1:
            _assign(item, remaining.pop(index))
            merged.append(item)
    return merged


def swap_array(items: MutableSequence[T], index1: int, index2: int) -> MutableSequence[T]:
    """
    Swap two elements of a list in place.

    Indices outside ``0 <= i < len(items)`` leave the list unchanged.

    Example:
        >>> swap_array([1, 2, 3], 0, 2)
        [3, 2, 1]
    """
    size = len(items)
    if not (0 <= index1 < size and 0 <= index2 < size):
        logger.debug("swap_array indices {} and {} out of range for size {}", index1, index2, size)
        return items
    items[index1], items[index2] = items[index2], items[index1]
    return items
