#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Command-line interface for formula tabulation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Optional, TextIO

from parser import parse_expression, parse_program
from parser.exceptions import ParseError
from logic import (
    EvaluationError,
    check_variable_limit,
    program_truth_table,
    truth_table,
    variable_universe,
)
from logic.exceptions import VariableLimitError
from utils.logger import configure_logging, get_logger
from utils.table_format import format_program_table, format_truth_table

DEFAULT_MAX_VARIABLES = 16


def read_program_file(filepath: Path) -> str:
    """Read a program of named formulas from file.

    Args:
        filepath: Path to the program file

    Returns:
        File contents

    Raises:
        FileNotFoundError: If the program file doesn't exist
        ValueError: If the file cannot be read or decoded
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()

    except FileNotFoundError:
        raise FileNotFoundError(f"Program file not found: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Error reading program file: {e}") from e


def tabulate_formula(
    text: str, max_variables: int, binary: bool = False, out: Optional[TextIO] = None
) -> None:
    """Parse one formula and print its grouped tree and truth table.

    Raises:
        ParseError: Formula is malformed
        VariableLimitError: Formula has more than ``max_variables`` variables
    """
    logger = get_logger()

    expr = parse_expression(text)
    print(f"Parsed: {expr}", file=out)

    check_variable_limit(variable_universe([expr]), max_variables)
    table = truth_table(expr)

    print(format_truth_table(table, label=text.strip(), binary=binary), file=out)
    logger.classification(str(expr), str(table.classification))


def tabulate_program(
    source: str, max_variables: int, binary: bool = False, out: Optional[TextIO] = None
) -> None:
    """Parse a program and print the shared truth table of its formulas.

    Raises:
        ParseError: Program is malformed
        EvaluationError: Duplicate names or too many variables
    """
    logger = get_logger()

    formulas = parse_program(source)
    if not formulas:
        logger.warning("Program contains no statements")
        return

    for formula in formulas:
        print(f"Parsed: {formula}", file=out)

    check_variable_limit(variable_universe(f.expr for f in formulas), max_variables)
    table = program_truth_table(formulas)

    print(format_program_table(table, binary=binary), file=out)


def run_read_loop(
    stream: TextIO, max_variables: int, binary: bool = False, out: Optional[TextIO] = None
) -> int:
    """Tabulate one formula per input line until end of input.

    Errors are reported and the loop moves on to the next line.

    Returns:
        Number of lines that failed
    """
    logger = get_logger()
    failures = 0

    for lineno, line in enumerate(stream, start=1):
        if not line.strip():
            continue

        try:
            tabulate_formula(line, max_variables, binary=binary, out=out)
        except ParseError as e:
            failures += 1
            logger.error(f"Line {lineno}: formula parsing error: {e}")
        except VariableLimitError as e:
            failures += 1
            logger.limit_exceeded(e.count, e.limit)
        except EvaluationError as e:
            failures += 1
            logger.error(f"Line {lineno}: evaluation error: {e}")

        print(file=out)

    return failures


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Veritas propositional truth table generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py                      # one formula per stdin line
  python run_truth_table.py -e "a & b => c"
  python run_truth_table.py -p formulas.prop --binary

Formula syntax:
  variables a..z/A..Z, true, false, !, &, |, =>, <=>, ( )
  all binary connectives share one precedence and group left to right

Program file format:
  x = a & b;
  y = !(!a | !b);
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("-e", "--expression", help="Tabulate a single formula")
    source.add_argument(
        "-p", "--program", type=Path, help="Path to a file of 'name = formula;' statements"
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Refuse formulas with more variables (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "--binary", action="store_true", help="Print 1/0 instead of T/F"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the truth table generator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.program is not None:
            source = read_program_file(args.program)
            tabulate_program(source, args.max_variables, binary=args.binary)
        elif args.expression is not None:
            tabulate_formula(args.expression, args.max_variables, binary=args.binary)
        else:
            failures = run_read_loop(sys.stdin, args.max_variables, binary=args.binary)
            return 1 if failures else 0

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Program file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except VariableLimitError as e:
        logger.limit_exceeded(e.count, e.limit)
        return 5

    except EvaluationError as e:
        logger.error(f"Evaluation error: {e}")
        return 5


if __name__ == "__main__":
    sys.exit(main())
