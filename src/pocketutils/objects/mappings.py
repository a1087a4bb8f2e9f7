"""
Plain-dict detection and deep merging - no external dependencies.
"""

__all__ = [
    "is_plain_object",
    "merge_objects",
]

from collections.abc import Mapping
from typing import Any

from loguru import logger


def is_plain_object(value: Any) -> bool:
    """
    Check whether a value is a plain ``dict`` (not a subclass, not a mapping type).

    Example:
        >>> is_plain_object({"a": 1})
        True
        >>> from collections import OrderedDict
        >>> is_plain_object(OrderedDict())
        False
        >>> is_plain_object([])
        False
    """
    return type(value) is dict


def merge_objects(*objs: Any) -> dict[str, Any]:
    """
    Deep merge mappings from left to right into a new dict.

    When both the merged value and the incoming value for a key are plain
    dicts they are merged recursively; otherwise the incoming value wins.
    Arguments that are not mappings (e.g. None) are skipped. Values are not
    copied, so nested containers may be shared with the inputs.

    Args:
        *objs: Mappings to merge

    Returns:
        New merged dict

    Example:
        >>> merge_objects({"a": {"x": 1}, "b": 1}, {"a": {"y": 2}}, None)
        {'a': {'x': 1, 'y': 2}, 'b': 1}
        >>> merge_objects({"a": {"x": 1}}, {"a": [1]})
        {'a': [1]}
    """
    result: dict[str, Any] = {}
    for obj in objs:
        if not isinstance(obj, Mapping):
            if obj is not None:
                logger.debug("merge_objects skipped non-mapping {!r}", type(obj).__name__)
            continue
        for key, value in obj.items():
            if is_plain_object(result.get(key)) and is_plain_object(value):
                result[key] = merge_objects(result[key], value)
            else:
                result[key] = value
    return result
