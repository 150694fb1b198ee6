"""Domain datatypes for directory listing entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    """One direct child of a listed directory.

    ``size`` is the entry's own byte size as reported by ``lstat`` and only
    carries meaning for non-directory entries.
    """

    name: str
    is_dir: bool
    size: int = 0


__all__ = [
    "DirectoryEntry",
]
