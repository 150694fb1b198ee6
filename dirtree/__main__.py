"""Module entrypoint for ``python -m dirtree``.

All argument parsing and rendering happen in ``dirtree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
