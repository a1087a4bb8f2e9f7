"""Placeholder substitution for ``{0}`` / ``{key}`` templates."""

__all__ = ["format_string"]

from collections.abc import Mapping, Sequence
from typing import Any, Union


def format_string(
    pattern: str,
    args: Union[Sequence[Any], Mapping[str, Any]],
) -> str:
    """
    Replace ``{n}`` placeholders with positional values or ``{key}`` with keyed ones.

    Every occurrence is replaced. Placeholders with no value are left as-is,
    and braces are never interpreted otherwise (unlike ``str.format``).

    Example:
        >>> format_string("{0}-{1}-{0}", ["a", "b"])
        'a-b-a'
        >>> format_string("{k} {missing}", {"k": "v"})
        'v {missing}'
    """
    if isinstance(args, Mapping):
        items = args.items()
    else:
        items = enumerate(args)

    for key, value in items:
        pattern = pattern.replace("{" + str(key) + "}", str(value))
    return pattern
