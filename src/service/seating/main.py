"""
Seating Chart - console entry point
Allocates best-available seat blocks for a batch read from stdin.
"""

import sys

from src.service.seating.driving_adapter.seating_cli import main


if __name__ == '__main__':
    sys.exit(main())
