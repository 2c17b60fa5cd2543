"""Allow ``python -m mochi``."""

from mochi.cli import main

if __name__ == "__main__":
    main()
