"""
HTML utilities subpackage - no external dependencies.

Pure functions for cleaning HTML strings.
"""

from pocketutils.html.tags import (
    strip_html,
)

__all__ = [
    # tags
    "strip_html",
]
