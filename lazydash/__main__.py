"""Module entrypoint for ``python -m lazydash``."""

from .cli import main


if __name__ == "__main__":
    main()
