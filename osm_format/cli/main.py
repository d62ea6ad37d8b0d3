"""CLI main entry point with subcommand structure."""
import argparse
import sys
from typing import Optional

from loguru import logger

from osm_format import __version__
from osm_format.errors import OSMFormatError


def setup_logging(verbose: int = 0, quiet: bool = False) -> None:
    """Configure the loguru sink for CLI use."""
    logger.remove()
    if quiet:
        level = "ERROR"
    elif verbose:
        level = "DEBUG"
    else:
        level = "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='osmformat',
        description='osmformat - OSM XML to geometry converter',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  osmformat convert map.osm -o map.geojson
  osmformat convert --relations --check-tags map.osm -o map.shp
  osmformat convert --projection EPSG:3857 map.osm -o map.geojson
  osmformat convert map.osm -o roundtrip.osm
  osmformat info --relations map.osm
'''
    )

    parser.add_argument('--version', '-V', action='version',
                        version=f'osmformat {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Suppress non-error output')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Increase verbosity')

    subparsers = parser.add_subparsers(dest='command', title='commands',
                                       description='Available commands')

    from osm_format.cli.commands.convert import setup_parser as setup_convert
    setup_convert(subparsers)

    from osm_format.cli.commands.info import setup_parser as setup_info
    setup_info(subparsers)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    setup_logging(parsed_args.verbose, parsed_args.quiet)

    if not parsed_args.command:
        parser.print_help()
        return 0

    try:
        return parsed_args.func(parsed_args)
    except FileNotFoundError as e:
        print(f"osmformat: error: File not found: {e}", file=sys.stderr)
        return 3
    except PermissionError as e:
        print(f"osmformat: error: Permission denied: {e}", file=sys.stderr)
        return 4
    except OSMFormatError as e:
        print(f"osmformat: error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"osmformat: error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
