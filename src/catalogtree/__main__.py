"""Entry point for ``python -m catalogtree``."""

import sys

from catalogtree.cli import main

if __name__ == "__main__":
    sys.exit(main())
