"""Module entrypoint for ``python -m tuistarter``.

All argument parsing and runtime setup happen in ``tuistarter.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
