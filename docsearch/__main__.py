"""Module entrypoint for ``python -m docsearch``.

Argument parsing and session setup happen in ``docsearch.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
