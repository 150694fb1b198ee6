"""Filesystem listing provider for tree rendering."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .types import DirectoryEntry

logger = logging.getLogger(__name__)


class ReadError(Exception):
    """Raised when a directory cannot be listed.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read directory {path}: {reason}")
        self.path = path
        self.reason = reason


def _describe(exc: OSError) -> str:
    """Return the human part of an ``OSError`` without the repeated filename."""
    return exc.strerror or str(exc)


def list_directory(directory: Path) -> list[DirectoryEntry]:
    """Return direct children of ``directory`` sorted by name.

    Symlinks are not followed: a link to a directory is listed as a plain
    entry carrying the link's own size. Any failure to open, iterate, or stat
    raises ``ReadError``.
    """
    logger.debug("listing %s", directory)
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                is_dir = child.is_dir(follow_symlinks=False)
                size = 0 if is_dir else int(child.stat(follow_symlinks=False).st_size)
                entries.append(DirectoryEntry(name=child.name, is_dir=is_dir, size=size))
    except OSError as exc:
        logger.debug("listing %s failed: %s", directory, exc)
        raise ReadError(directory, _describe(exc)) from exc

    entries.sort(key=lambda entry: entry.name)
    return entries


def filter_visible(entries: Iterable[DirectoryEntry], show_files: bool) -> list[DirectoryEntry]:
    """Keep directories always and files only when ``show_files`` is set."""
    return [entry for entry in entries if entry.is_dir or show_files]


__all__ = [
    "ReadError",
    "list_directory",
    "filter_visible",
]
