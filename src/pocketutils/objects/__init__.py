"""
Object and list utilities subpackage - no heavy dependencies.

Structural helpers for dicts and lists. ``merge_objects`` returns a fresh
dict; ``merge_arrays`` updates matched elements of its first list and
``swap_array`` reorders its list in place.
"""

from pocketutils.objects.mappings import (
    is_plain_object,
    merge_objects,
)

from pocketutils.objects.arrays import (
    merge_arrays,
    swap_array,
)

__all__ = [
    # mappings
    "is_plain_object",
    "merge_objects",
    # arrays
    "merge_arrays",
    "swap_array",
]
