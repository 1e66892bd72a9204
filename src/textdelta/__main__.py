#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/__main__.py
"""Allow ``python -m textdelta``."""

import sys

from textdelta.cli import main

if __name__ == "__main__":
    sys.exit(main())
