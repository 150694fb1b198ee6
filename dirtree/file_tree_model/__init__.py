"""Domain model for directory listings.

This package contains the non-rendering tree primitives:
- the directory entry datatype
- the filesystem listing provider and its ``ReadError``
- the file visibility predicate
"""

from __future__ import annotations

from .types import DirectoryEntry
from .fs import ReadError, filter_visible, list_directory

__all__ = [
    "DirectoryEntry",
    "ReadError",
    "list_directory",
    "filter_visible",
]
