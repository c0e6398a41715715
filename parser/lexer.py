# parser/lexer.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks formula and program text into tokens for the grammar.
Operators are matched longest-first so that ``<=>`` is never split into
``<`` followed by ``=>``, and ``=>`` is never read as an assignment ``=``.

Supported Tokens:
- Connectives: ``&`` (or ``&&``), ``|`` (or ``||``), ``=>``, ``<=>``
- Negation and grouping: ``!``, ``(``, ``)``
- Program punctuation: ``=``, ``;``
- Identifiers: ASCII letters only; ``true``/``false`` are resolved later
- Whitespace: space, tab, carriage return and newline, ignored
"""

from sly import Lexer

from .exceptions import ParseError
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas and programs.

    Token patterns are tried in definition order, which is what gives the
    connectives their longest-first behaviour.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ID",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "EQUIV",
        "ASSIGN",
        "SEMI",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r"

    # Order matters: longer spellings first
    EQUIV = r"<=>"
    IMPLIES = r"=>"
    ASSIGN = r"="
    NOT = r"!"
    SEMI = r";"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[a-zA-Z]+"

    @_(r"&&?")
    def AND(self, t):
        t.value = "&"
        return t

    @_(r"\|\|?")
    def OR(self, t):
        t.value = "|"
        return t

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token whose value holds the rest of the input

        Raises:
            ParseError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = t.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        raise ParseError(
            f"Illegal character '{illegal_char}' at line {self.lineno}, "
            f"position {error_pos}",
            position=error_pos,
            remainder=t.value,
            line=self.lineno,
        )
