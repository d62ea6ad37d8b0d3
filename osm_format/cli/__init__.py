"""Command-line interface for osmformat.

Usage:
    # After pip install:
    osmformat --help
    osmformat convert map.osm -o map.geojson

    # Or via Python:
    python -m osm_format
"""

import sys
from osm_format.cli.main import main as _main, create_parser

__all__ = ['main', 'create_parser']


def main() -> int:
    """Entry point for the osmformat console script.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        return _main() or 0
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
