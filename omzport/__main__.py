"""
Allow running omzport as ``python -m omzport``.
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
