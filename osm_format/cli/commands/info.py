"""Info command - entity summary of an OSM file."""
import json
import sys
from pathlib import Path

from osm_format.api import OSMFormat
from osm_format.cli.options import add_reader_arguments, build_config
from osm_format.export.base import summarize


def setup_parser(subparsers):
    """Setup the info subcommand parser."""
    parser = subparsers.add_parser(
        'info',
        help='Summarize the entities read from an OSM file',
        description='Count the entities of an OSM file by kind and geometry type'
    )

    parser.add_argument('input', help='Input OSM file')
    parser.add_argument(
        '--json',
        action='store_true',
        help='Output as JSON'
    )
    add_reader_arguments(parser)

    parser.set_defaults(func=run)
    return parser


def run(args):
    """Execute the info command."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    entities = OSMFormat(build_config(args)).read_file(str(input_path))
    summary = {'file': input_path.name, **summarize(entities)}

    if args.json:
        print(json.dumps(summary, indent=2))
        return 0

    print(f"File: {summary['file']}")
    print(f"Entities: {summary['total']}")
    print("By kind:")
    for kind, count in sorted(summary['kinds'].items()):
        print(f"  {kind:<10} {count}")
    print("By geometry:")
    for geom_type, count in sorted(summary['geometry_types'].items()):
        print(f"  {geom_type:<18} {count}")
    return 0
