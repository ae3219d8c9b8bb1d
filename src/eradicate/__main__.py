"""Allow running as ``python -m eradicate``."""

from .cli import main

if __name__ == "__main__":
    main()
