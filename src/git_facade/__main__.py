"""Allow ``python -m git_facade``."""

from .cli import main

if __name__ == "__main__":
    exit(main())
