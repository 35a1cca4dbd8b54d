"""Entry point for ``python -m jsonencoder``."""

from jsonencoder.cli import main

if __name__ == "__main__":
    main()
