#!/usr/bin/env python3
"""
Enable running graphdesigner as a module: python -m graphdesigner

Usage:
    python -m graphdesigner --help
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
