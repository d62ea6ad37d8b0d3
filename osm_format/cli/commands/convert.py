"""Convert command - OSM XML to GeoJSON, Shapefile or OSM XML."""
import sys
import time
from pathlib import Path

from loguru import logger

from osm_format.api import OSMFormat
from osm_format.cli.options import add_reader_arguments, build_config
from osm_format.export.base import summarize
from osm_format.export.json_exporter import GeoJSONExporter
from osm_format.export.shapefile_exporter import ShapefileExporter


def setup_parser(subparsers):
    """Setup the convert subcommand parser."""
    parser = subparsers.add_parser(
        'convert',
        help='Convert an OSM file to another format',
        description='Read an OSM XML file into entities and write them as '
                    'GeoJSON, Shapefile or OSM XML'
    )

    parser.add_argument('input', help='Input OSM file')
    parser.add_argument('-o', '--output', required=True,
                        help='Output file')
    parser.add_argument(
        '-f', '--format',
        choices=['geojson', 'shapefile', 'osm'],
        help='Output format (auto-detect from extension if not specified)'
    )
    parser.add_argument(
        '--all-tags',
        action='store_true',
        help='Write every tag as a DBF field (shapefile)'
    )
    add_reader_arguments(parser)

    parser.set_defaults(func=run)
    return parser


def detect_format(filepath):
    """Detect format from file extension."""
    ext = Path(filepath).suffix.lower()
    format_map = {
        '.geojson': 'geojson',
        '.json': 'geojson',
        '.shp': 'shapefile',
        '.osm': 'osm',
        '.xml': 'osm'
    }
    return format_map.get(ext, 'geojson')


def run(args):
    """Execute the convert command."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    start_time = time.time()
    osm_format = OSMFormat(build_config(args))
    entities = osm_format.read_file(str(input_path))

    out_format = args.format or detect_format(args.output)
    if out_format == 'osm':
        osm_format.write_file(entities, args.output)
    elif out_format == 'shapefile':
        exporter = ShapefileExporter(
            include_all_tags=args.all_tags,
            write_prj=not args.projection,
        )
        result = exporter.export(entities, args.output)
        for created in result['metadata']['files_created']:
            logger.info("Wrote {}", created)
    else:
        GeoJSONExporter().export(entities, args.output)

    elapsed = time.time() - start_time
    counts = summarize(entities)
    print(f"Converted to {out_format}: {args.output}")
    print(f"  Entities: {counts['total']} "
          f"({', '.join(f'{k}: {v}' for k, v in sorted(counts['kinds'].items()))})")
    print(f"  Time: {elapsed:.3f}s")
    return 0
