# parser/exceptions.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Custom exceptions for formula and program parsing

"""Domain-specific exceptions for propositional formula parsing.

This module defines the single error raised by the parsing pipeline. The
lexer and the grammar both raise it, and any unexpected failure inside the
parser generator is wrapped into it, so callers only ever need to handle
one exception type for malformed input.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when formula or program parsing fails.

    Indicates that the input text does not conform to the formula grammar,
    either because of an unknown character, a missing operand, unbalanced
    parentheses or text left over after a complete parse. No partial tree
    is ever produced alongside this error.

    Attributes:
        position: Character offset where parsing stopped, if known
        remainder: Unconsumed input starting at ``position``
        line: 1-based line number of ``position``, if known
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        remainder: Optional[str] = None,
        line: Optional[int] = None,
    ):
        super().__init__(message)
        self.position = position
        self.remainder = remainder
        self.line = line
