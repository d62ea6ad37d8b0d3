"""Allow running osm_format as a module.

Usage:
    python -m osm_format --help
    python -m osm_format convert map.osm -o map.geojson
"""

import sys
from osm_format.cli import main

if __name__ == "__main__":
    sys.exit(main())
