"""
Main entry point for the cssabbr CLI when run as a module.

This allows the CLI to be executed using:
    python -m cssabbr
"""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
