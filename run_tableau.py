#!/usr/bin/env python3
# run_tableau.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Command-line interface for interactive truth tree construction

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from tableau import Tableau, TableauSession, collect_premises
from utils.premise_reader import read_premises, PremiseFormatError
from utils.logger import configure_logging, get_logger
from parser.exceptions import ParseError


def gather_premises(args: argparse.Namespace) -> List[str]:
    """Collect premises from the command line, a premise file, or the keyboard.

    Args:
        args: Parsed command-line arguments

    Returns:
        Premise strings in entry order
    """
    premises: List[str] = []

    if args.premises_file is not None:
        premises.extend(read_premises(args.premises_file))

    premises.extend(args.premises)

    if not premises:
        premises = collect_premises(strict=args.strict)

    return premises


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Arbor interactive truth tree builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tableau.py "(if P Q)" "(not Q)" "P"
  python run_tableau.py -f premises.txt --strict
  python run_tableau.py --debug

Premise syntax (fully parenthesized prefix notation):
  (not (if (and P Q) (iff (or A B) R)))

Premise file format:
  One premise per line; blank lines and lines starting with '#' are ignored.
        """,
    )

    parser.add_argument(
        "premises", nargs="*", help="Premises in prefix notation (quote each one)"
    )

    parser.add_argument(
        "-f", "--premises-file", type=Path, help="Path to a file with one premise per line"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Validate premises and normalize their whitespace before use",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--render-format",
        default="png",
        help="Image format for the render command (default: png)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth tree builder.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        print("Truth Tree Interface\n")

        premises = gather_premises(args)
        tableau = Tableau.from_strings(premises, strict=args.strict)
        logger.info(f"📋 Loaded {len(premises)} premise(s)")

        session = TableauSession(tableau, render_format=args.render_format)
        session.run()

        return 0

    except ParseError as e:
        logger.error(f"Premise parsing error: {e}")
        return 2

    except (PremiseFormatError, OSError) as e:
        logger.error(f"Premise file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Session interrupted by user")
        return 4

    except EOFError:
        logger.error("Input ended before any premise was entered")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
