"""Module entrypoint for ``python -m lazyrg``."""

from .cli import main


if __name__ == "__main__":
    main()
