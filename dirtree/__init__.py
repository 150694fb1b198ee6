"""Public package surface for dirtree.

Exports ``render_tree`` and ``ReadError`` for programmatic use and ``main``
for CLI invocation.
"""

from __future__ import annotations

from .file_tree_model import ReadError
from .renderer import render_tree


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "render_tree", "ReadError"]
