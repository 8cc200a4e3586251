#!/usr/bin/env python3
"""Main entry point for gitfuns when run as python -m gitfuns."""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
