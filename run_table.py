#!/usr/bin/env python3
# run_table.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Command-line interface for truth-table generation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from core.truth_table import TruthTableEngine
from parser import LexError, ParseError, TokenType, compile_program, scan
from utils.logger import configure_logging, get_logger
from utils.table_format import format_errors, format_table


def read_formula_file(filepath: Path) -> str:
    """Read formula text from file.

    Args:
        filepath: Path to the formula file

    Returns:
        File contents, one formula per line

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file cannot be decoded
    """
    try:
        with open(filepath, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except UnicodeDecodeError as e:
        raise ValueError(f"Error reading formula file: {e}")


def collect_source(args: argparse.Namespace) -> str:
    """Pick the formula text from -e, -f or standard input."""
    if args.expr:
        return "\n".join(args.expr)
    if args.file is not None:
        return read_formula_file(args.file)
    return sys.stdin.read()


def parse_marks(value: str) -> str:
    """argparse type for --marks: exactly two distinct characters."""
    if len(value) != 2 or value[0] == value[1]:
        raise argparse.ArgumentTypeError(
            "marks must be two different characters, e.g. TF or 10"
        )
    return value


def print_token_stream(source: str) -> None:
    """Print the scanned tokens, one source line per output line."""
    result = scan(source)
    if not result.success:
        raise LexError(result.errors)

    line: List[str] = []
    for token in result.value:
        line.append(str(token))
        if token.kind in (TokenType.NEW_LINE, TokenType.END_OF_FILE):
            print(" ".join(line))
            line = []


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula propositional truth-table generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_table.py -e "p -> q"
  python run_table.py -e "p AND q" -e "!p OR r"
  python run_table.py -f formulas.txt --marks 10
  echo "a <-> !b" | python run_table.py --debug

Formula syntax (one formula per line):
  variables   single lowercase letters: p, q, r
  constants   T, F
  operators   !   AND   OR   -> (or =>)   <-> (or <=>)   ( )
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-e",
        "--expr",
        action="append",
        metavar="FORMULA",
        help="Formula text; repeat for several lines",
    )
    source.add_argument(
        "-f", "--file", type=Path, help="Path to a file with one formula per line"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--tokens", action="store_true", help="Print the token stream and exit"
    )

    parser.add_argument(
        "--check", action="store_true", help="Only check that the formulas are well-formed"
    )

    parser.add_argument(
        "--marks",
        type=parse_marks,
        default="TF",
        help="Characters used for true and false cells (default: TF)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth-table generator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        source = collect_source(args)

        if args.tokens:
            print_token_stream(source)
            return 0

        program = compile_program(source)

        if args.check:
            logger.validation_result(
                True, f"{len(program)} formula(s) over {len(program.variables)} variable(s)"
            )
            return 0

        table = TruthTableEngine(program).run()
        logger.info(f"📋 {len(table)} row(s), {len(table.header)} column(s)")
        print(format_table(table, true_mark=args.marks[0], false_mark=args.marks[1]))
        return 0

    except LexError as e:
        logger.error(format_errors(e.errors))
        return 1

    except ParseError as e:
        logger.error(format_errors(e.errors))
        return 2

    except (OSError, ValueError) as e:
        logger.error(f"Input error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
