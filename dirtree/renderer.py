"""Render a directory as connector-based tree text.

Each visible entry becomes one newline-terminated row made of the ancestor
prefix, a branch marker and the entry name. Files additionally carry a size
label. The walk keeps an explicit stack of open directories, so depth is
bounded by the filesystem rather than the interpreter recursion limit. Rows
accumulate in a list owned by a single ``render_tree`` call, so a ``ReadError``
anywhere in the walk unwinds past it and no partial text escapes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .file_tree_model import DirectoryEntry, filter_visible, list_directory

logger = logging.getLogger(__name__)

BRANCH_MIDDLE = "├───"
BRANCH_LAST = "└───"
PREFIX_CONTINUE = "│\t"
PREFIX_BLANK = "\t"
EMPTY_SIZE_LABEL = "(empty)"


def format_size_label(size: int) -> str:
    """Return ``(empty)`` for zero-byte files, else ``(<size>b)``."""
    if size == 0:
        return EMPTY_SIZE_LABEL
    return f"({size}b)"


def is_last(index: int, count: int) -> bool:
    return index + 1 == count


def branch_marker(index: int, count: int) -> str:
    """Return the connector for sibling ``index`` of ``count``."""
    return BRANCH_LAST if is_last(index, count) else BRANCH_MIDDLE


def child_prefix(prefix: str, index: int, count: int) -> str:
    """Extend ``prefix`` for the children of sibling ``index`` of ``count``.

    The vertical bar continues only while later siblings remain below.
    """
    return prefix + (PREFIX_BLANK if is_last(index, count) else PREFIX_CONTINUE)


@dataclass
class _WalkFrame:
    """One directory being emitted; ``idx`` is the next entry to write."""

    directory: Path
    prefix: str
    entries: list[DirectoryEntry]
    idx: int = 0


def render_tree(root: Path | str, show_files: bool) -> str:
    """Render the subtree under ``root`` and return the full text.

    Raises ``ReadError`` when any directory in the subtree cannot be listed.
    """
    root = Path(root)
    lines_out: list[str] = []

    def open_frame(directory: Path, prefix: str) -> _WalkFrame:
        return _WalkFrame(directory, prefix, filter_visible(list_directory(directory), show_files))

    logger.debug("rendering %s (show_files=%s)", root, show_files)
    stack = [open_frame(root, "")]
    while stack:
        frame = stack[-1]
        count = len(frame.entries)
        if frame.idx >= count:
            stack.pop()
            continue
        idx = frame.idx
        frame.idx += 1
        entry = frame.entries[idx]
        row = f"{frame.prefix}{branch_marker(idx, count)}{entry.name}"
        if entry.is_dir:
            lines_out.append(f"{row}\n")
            stack.append(open_frame(frame.directory / entry.name, child_prefix(frame.prefix, idx, count)))
        else:
            lines_out.append(f"{row} {format_size_label(entry.size)}\n")

    logger.debug("rendered %d rows for %s", len(lines_out), root)
    return "".join(lines_out)


__all__ = [
    "BRANCH_MIDDLE",
    "BRANCH_LAST",
    "format_size_label",
    "branch_marker",
    "child_prefix",
    "render_tree",
]
