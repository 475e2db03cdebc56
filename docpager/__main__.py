"""
Entry point for running docpager as a module.

Usage:
    python -m docpager paginate input.html --output pages.html
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
