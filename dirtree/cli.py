"""Command-line front door for dirtree.

Parses CLI options, renders the tree for the target directory, and writes
the result to stdout. Any read failure aborts before anything is printed.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .file_tree_model import ReadError
from .logging_setup import configure_logging
from .renderer import render_tree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirtree",
        description="Print a directory as a tree, optionally with files and their sizes.",
    )
    parser.add_argument("path", help="Directory to render.")
    parser.add_argument(
        "extra",
        nargs="?",
        default=None,
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "-f",
        dest="show_files",
        action="store_true",
        help="Include files with their sizes.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for stderr diagnostics (default: $DIRTREE_LOG_LEVEL or WARNING).",
    )
    return parser


def write_output(text: str) -> None:
    """Write ``text`` to stdout as filesystem-encoded bytes.

    Names that are not valid in the filesystem encoding come back from the
    listing as surrogate escapes; ``os.fsencode`` restores their raw bytes.
    """
    sys.stdout.flush()
    sys.stdout.buffer.write(os.fsencode(text))
    sys.stdout.buffer.flush()


def main() -> None:
    """Parse CLI arguments and print the tree for the requested directory.

    Accepts the path plus at most one more argument; files are shown only
    when that argument is ``-f``. Usage errors exit through argparse before
    any traversal. A ``ReadError`` becomes ``SystemExit`` with the message on
    stderr and nothing on stdout.
    """
    parser = build_parser()
    args = parser.parse_args()
    if args.show_files and args.extra is not None:
        parser.error(f"unrecognized arguments: {args.extra}")
    configure_logging(args.log_level)
    if args.extra is not None:
        logger.debug("ignoring second argument %r; only -f enables files", args.extra)

    path = Path(args.path)
    try:
        text = render_tree(path, args.show_files)
    except ReadError as exc:
        logger.debug("render of %s aborted", path, exc_info=True)
        raise SystemExit(f"dirtree: {exc}") from exc

    write_output(text)


if __name__ == "__main__":
    main()
