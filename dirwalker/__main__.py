"""Module entrypoint for ``python -m dirwalker``.

All argument parsing and runtime setup happen in ``dirwalker.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
