"""Module entrypoint for ``python -m lazycmp``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and report output happen in ``lazycmp.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
