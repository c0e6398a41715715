# parser/__init__.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Formula and program parsing entry points

"""Propositional formula parsing for truth table generation.

This module turns text into abstract syntax trees. Two input forms are
supported: a single formula such as ``a & b => c``, and a program made of
``name = formula;`` statements that are later evaluated over one shared
truth table.

Core Functions:
    parse_expression: Converts a formula string into an AST
    parse_program: Converts a program string into named formulas
    parse: Alias of parse_expression

Grammar Features:
    - Connectives ``&``, ``|``, ``=>``, ``<=>`` on one flat precedence level,
      folded left to right
    - Prefix negation ``!`` binding to the operand right after it
    - Constants ``true`` and ``false``
    - Parenthetical grouping
    - Whitespace allowed, never required, between tokens

Example:
    >>> from parser import parse_expression
    >>> str(parse_expression("a & b | c"))
    '((a & b) | c)'
"""

from typing import List

from .ast_nodes import Expr, NamedFormula
from .exceptions import ParseError
from .grammar import _FormulaParser
from utils.logger import get_logger


def parse_expression(source: str) -> Expr:
    """Parse a single formula into its Abstract Syntax Tree.

    Uses a fresh parser instance for each invocation so no state carries
    over between calls. The whole input must be consumed; leading and
    trailing whitespace is allowed.

    Args:
        source: Formula text

    Returns:
        Root AST node representing the parsed formula

    Raises:
        ParseError: Formula is empty, malformed, nested too deeply, or is a
            program instead

    Example:
        >>> parse_expression("!a <=> b")
        Equivalent(left=Not(operand=Variable(name='a')), right=Variable(name='b'))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    if not source.strip():
        raise ParseError("Input formula is empty.", position=0, remainder=source)

    result = _FormulaParser().parse(source)

    if not isinstance(result, Expr):
        raise ParseError(
            "Expected a single formula but found named statements",
            position=0,
            remainder=source,
        )

    logger.formula_parsed(source, result)
    return result


def parse_program(source: str) -> List[NamedFormula]:
    """Parse a program of ``name = formula;`` statements.

    Statements are returned in source order. Names are not checked for
    uniqueness here; that is left to program evaluation.

    Args:
        source: Program text, possibly spanning several lines

    Returns:
        Named formulas in source order, empty for blank input

    Raises:
        ParseError: Program is malformed or is a bare formula

    Example:
        >>> [f.name for f in parse_program("x = a & b; y = a | b;")]
        ['x', 'y']
    """
    logger = get_logger()
    logger.debug(f"Parsing program of {len(source)} characters")

    if not source.strip():
        logger.debug("Program is blank, no statements")
        return []

    result = _FormulaParser().parse(source)

    if not isinstance(result, list):
        raise ParseError(
            "Expected '<name> = <formula>;' statements but found a bare formula",
            position=0,
            remainder=source,
        )

    logger.debug(f"Program parsed into {len(result)} statement(s)")
    return result


parse = parse_expression


__all__ = ["parse", "parse_expression", "parse_program", "ParseError"]

__version__ = "1.0.0"
__description__ = "Propositional formula and program parsing components"
