"""
Command-line interface for Drone Log Parser.

Reads flight log files from disk, runs them through the parser and prints the
results as JSON.
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ParserConfig
from .pipeline import FlightLogParser, get_supported_formats


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog='drone-log-parser',
        description="Parse drone flight logs into a normalized flight summary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse an Airdata CSV export
  drone-log-parser flight.csv

  # Parse several files and pretty-print the results
  drone-log-parser dji.csv autel.json --pretty

  # Use configuration file and keep at most 100 path points
  drone-log-parser flight.csv --config config.json --max-points 100

  # Show supported export formats
  drone-log-parser --list-formats

Supported sources: DJI (Airdata CSV), Autel Sky, Skydio, generic GPS CSV/JSON
        """
    )

    parser.add_argument(
        'files',
        nargs='*',
        help='Flight log files to parse'
    )

    # Configuration arguments
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Configuration file path (JSON format)'
    )

    parser.add_argument(
        '--save-config',
        type=str,
        help='Save current configuration to file'
    )

    parser.add_argument(
        '--max-points',
        type=int,
        help='Maximum number of flight path points to keep (default: 500)'
    )

    # Output control
    parser.add_argument(
        '--pretty',
        action='store_true',
        help='Indent JSON output'
    )

    parser.add_argument(
        '--list-formats',
        action='store_true',
        help='List supported export formats and exit'
    )

    # Logging and debugging
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except errors'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def setup_logging(verbose: bool = False, debug: bool = False, quiet: bool = False) -> int:
    """Configure logging based on command line arguments."""
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return level


def validate_files(files: List[str]) -> List[str]:
    """Validate that input files exist and are readable."""
    valid_files = []

    for file_path in files:
        path = Path(file_path)
        if not path.exists():
            print(f"Warning: File not found: {file_path}", file=sys.stderr)
            continue

        if not path.is_file():
            print(f"Warning: Not a file: {file_path}", file=sys.stderr)
            continue

        valid_files.append(str(path))

    return valid_files


def create_config_from_args(args: argparse.Namespace) -> ParserConfig:
    """Create ParserConfig from command line arguments."""
    if args.config:
        try:
            config = ParserConfig.from_file(args.config)
        except (OSError, ValueError, TypeError) as e:
            print(f"Error loading config file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        config = ParserConfig()

    overrides = {}
    if args.max_points is not None:
        overrides['max_path_points'] = args.max_points

    if args.verbose or args.debug:
        overrides['verbose'] = True

    try:
        # replace() re-runs validation
        return dataclasses.replace(config, **overrides)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)


def read_log_file(file_path: str) -> str:
    """Read a flight log as text, replacing undecodable bytes."""
    return Path(file_path).read_bytes().decode('utf-8', errors='replace')


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    indent = 2 if args.pretty else None

    if args.list_formats:
        print(json.dumps(get_supported_formats(), indent=indent))
        return 0

    if not args.files:
        parser.print_help()
        return 1

    setup_logging(args.verbose, args.debug, args.quiet)
    logger = logging.getLogger('drone_log_parser.cli')

    valid_files = validate_files(args.files)
    if not valid_files:
        print("No valid flight log files to parse", file=sys.stderr)
        return 1

    config = create_config_from_args(args)

    if args.save_config:
        config.to_file(args.save_config)
        logger.info(f"Configuration saved to: {args.save_config}")

    flight_parser = FlightLogParser(config)

    results = []
    try:
        for file_path in valid_files:
            logger.info(f"Parsing {file_path}")
            result = flight_parser.parse(read_log_file(file_path), Path(file_path).name)
            if not result.success:
                logger.error(f"{file_path}: {result.error}")
            results.append(result)
    except KeyboardInterrupt:
        print("\nParsing interrupted by user", file=sys.stderr)
        return 130
    except OSError as e:
        logger.error(f"Could not read flight log: {e}")
        return 1

    output = [result.to_dict() for result in results]
    print(json.dumps(output[0] if len(output) == 1 else output, indent=indent))

    all_succeeded = len(valid_files) == len(args.files) and all(r.success for r in results)
    return 0 if all_succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
