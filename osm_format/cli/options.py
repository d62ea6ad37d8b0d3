"""Reader options shared by the CLI subcommands."""
import json
from dataclasses import replace
from pathlib import Path

from osm_format.config import FormatConfig
from osm_format.errors import ConfigError
from osm_format.extraction.relations import STANDARD_RELATION_BUILDERS


def add_reader_arguments(parser):
    """Add the OSMFormat configuration flags to a subcommand parser."""
    group = parser.add_argument_group('reader options')
    group.add_argument(
        '--config',
        metavar='FILE',
        help='JSON file with FormatConfig settings (flags override it)'
    )
    group.add_argument(
        '--check-tags',
        action='store_true',
        help='Use tags to decide areas and which nodes are output'
    )
    group.add_argument(
        '--share-nodes',
        action='store_true',
        help='Share node vertices between ways'
    )
    group.add_argument(
        '--relations',
        action='store_true',
        help='Assemble multipolygon, boundary and route relations'
    )
    group.add_argument(
        '--projection',
        metavar='CRS',
        help='Output CRS, e.g. EPSG:3857 (default: keep lon/lat)'
    )


def build_config(args) -> FormatConfig:
    """Build a FormatConfig from a config file and command-line flags."""
    data = {}
    if getattr(args, 'config', None):
        path = Path(args.config)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {args.config}")
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid config file {args.config}: {e}") from e

    config = FormatConfig.from_dict(data)
    overrides = {}
    if args.check_tags:
        overrides['check_tags'] = True
    if args.share_nodes:
        overrides['share_nodes'] = True
    if args.relations:
        overrides['relation_builders'] = {
            **STANDARD_RELATION_BUILDERS, **config.relation_builders
        }
    if args.projection:
        overrides['internal_projection'] = args.projection

    if not overrides:
        return config
    return replace(config, **overrides)
