"""Allow running as ``python -m loxpy``."""

from loxpy.cli import main

if __name__ == "__main__":
    main()
