#!/usr/bin/env python3
"""
macroforth - launcher for a source checkout (same as python -m macroforth)
"""

import sys

from macroforth.cli import main

if __name__ == "__main__":
    sys.exit(main())
