"""
Main entry point for Drone Log Parser when run as a module.

This allows running the parser with: python -m drone_log_parser
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
