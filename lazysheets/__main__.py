"""Module entrypoint for ``python -m lazysheets``."""

from .cli import main


if __name__ == "__main__":
    main()
