"""CLI entry point for screenforge.

This module lets the repository be run as ``python . {command}``. Command
handling lives in ``screenforge.cli``.
"""

import sys

from screenforge.cli import main

if __name__ == "__main__":
    sys.exit(main())
