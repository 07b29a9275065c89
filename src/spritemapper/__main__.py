"""Allow ``python -m spritemapper``."""

from spritemapper.cli import main

if __name__ == "__main__":
    main()
