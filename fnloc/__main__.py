"""
Entry point for running fnloc as a module.

Usage:
    python -m fnloc ./src
    python -m fnloc --help
"""

import sys
from fnloc.cli import main

if __name__ == "__main__":
    sys.exit(main())
