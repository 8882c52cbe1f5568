#!/usr/bin/env python3

"""
Command-line interface for the Rosalind toolkit.

Runs a single Rosalind problem on an input file and prints the answer.
"""

import argparse
import sys
import logging
from typing import List, Optional

from rosalind_toolkit.core.config import load_config
from rosalind_toolkit.core.exceptions import RosalindError
from rosalind_toolkit.core.parsers import TRACE
from rosalind_toolkit.core.pipeline import RosalindPipeline
from rosalind_toolkit.core.problems import list_problems


def setup_logging(log_level: str = "WARNING", show_timestamps: bool = False) -> None:
    """Set up logging configuration."""
    logging.addLevelName(TRACE, "TRACE")

    if show_timestamps:
        log_format = '%(asctime)s - %(levelname)s - %(message)s'
    else:
        log_format = '%(levelname)s - %(message)s'

    logging.basicConfig(
        level=logging.getLevelName(log_level.upper()),
        format=log_format,
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="rosalind",
        description="Run a Rosalind problem on an input file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Count nucleotides
  rosalind -p counting_dna_nucleotides rosalind_dna.txt

  # Reverse complement, using an alias and trace output
  rosalind -t -p revc rosalind_revc.txt

  # List known problems
  rosalind -l
        """
    )

    parser.add_argument(
        'input_file',
        nargs='?',
        help='Problem input file'
    )
    parser.add_argument(
        '-p', '--problem',
        help='Problem to solve (canonical name or alias)'
    )
    parser.add_argument(
        '-l', '--list-problems',
        action='store_true',
        help='List problems implemented'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Increase verbosity level to info'
    )
    parser.add_argument(
        '-t', '--trace',
        action='store_true',
        help='Increase verbosity level to trace (overrides -v)'
    )
    parser.add_argument(
        '--log-level',
        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )
    parser.add_argument(
        '--config',
        help='Configuration file (JSON or YAML)'
    )

    return parser


def print_problems() -> None:
    """Print the known problems and their aliases."""
    print("Problems known:")
    for line in list_problems():
        print(f"    {line}")
    print()
    print("To execute a problem, provide the --problem switch with one of the above options. "
          "Aliases are provided for convenience.")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.list_problems:
        print_problems()
        return 0

    try:
        config = load_config(config_path=args.config, use_env=True)
    except RosalindError as e:
        setup_logging()
        logging.getLogger(__name__).error(f"Configuration error: {e}")
        return 1

    # --trace overrides --verbose; both override --log-level and config
    if args.trace:
        config.log_level = 'TRACE'
    elif args.verbose:
        config.log_level = 'INFO'
    elif args.log_level:
        config.log_level = args.log_level

    setup_logging(config.log_level, config.show_timestamps)
    logger = logging.getLogger(__name__)
    logger.debug(f"Configuration: {config}")

    if not args.problem:
        logger.error("Must provide -p|--problem")
        parser.print_usage(sys.stderr)
        return 2

    if not args.input_file:
        logger.error("Must provide an input file")
        parser.print_usage(sys.stderr)
        return 2

    pipeline = RosalindPipeline(config)
    if pipeline.run(args.problem, args.input_file):
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
