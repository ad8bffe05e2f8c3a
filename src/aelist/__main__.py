"""Entry point for ``python -m aelist``."""

from aelist.cli import main

if __name__ == "__main__":
    main()
