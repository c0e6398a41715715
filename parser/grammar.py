# parser/grammar.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implementation using SLY parser generator.

This module defines the grammar rules for single formulas and for programs
made of ``name = formula;`` statements. Both share one grammar; the entry
points in ``parser/__init__.py`` check which of the two a given text produced.

Grammar:

    operand    := ID | "!" operand | "(" expr ")"
    expr       := operand (connective operand)*
    connective := "&" | "|" | "=>" | "<=>"
    statement  := ID "=" expr ";"
    program    := statement+

Operator Precedence:
- ``!`` binds to the single operand right after it
- ``&``, ``|``, ``=>`` and ``<=>`` share ONE level and fold left to right,
  so ``a & b | c`` is ``(a & b) | c`` and ``a | b & c`` is ``(a | b) & c``
- parentheses are the only way to regroup a chain
"""

from typing import List, Union

from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import (
    Expr,
    Literal,
    Variable,
    Not,
    NamedFormula,
    fold_connectives,
    tree_depth,
)
from .exceptions import ParseError
from utils.logger import get_logger


KEYWORDS = {"true": True, "false": False}

# Trees deeper than this are refused; evaluation, variable collection and
# rendering all recurse once or twice per level.
MAX_DEPTH = 250


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for formulas and programs.

    Connective chains are collected as ``(symbol, operand)`` pairs and folded
    left to right once the chain is complete, instead of relying on a
    precedence table.

    Attributes:
        tokens: Token types from FormulaLexer
    """

    tokens = FormulaLexer.tokens

    def __init__(self):
        self._text = ""

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: a single formula."""
        return p.expr

    @_("program")
    def start(self, p) -> List[NamedFormula]:
        """Start rule: one or more named statements."""
        return p.program

    # Program grammar rules
    @_("statement")
    def program(self, p):
        return [p.statement]

    @_("program statement")
    def program(self, p):
        p.program.append(p.statement)
        return p.program

    @_("ID ASSIGN expr SEMI")
    def statement(self, p) -> NamedFormula:
        """Named formula statement."""
        return NamedFormula(p.ID, p.expr)

    # Expression grammar rules
    @_("operand")
    def expr(self, p) -> Expr:
        return p.operand

    @_("operand chain")
    def expr(self, p) -> Expr:
        """Operand followed by connectives, folded left to right."""
        return fold_connectives(p.operand, p.chain)

    @_("connective operand")
    def chain(self, p):
        return [(p.connective, p.operand)]

    @_("chain connective operand")
    def chain(self, p):
        p.chain.append((p.connective, p.operand))
        return p.chain

    @_("AND", "OR", "IMPLIES", "EQUIV")
    def connective(self, p) -> str:
        return p[0]

    # Operand grammar rules
    @_("ID")
    def operand(self, p) -> Expr:
        """Identifier: boolean keyword or propositional variable."""
        if p.ID in KEYWORDS:
            return Literal(KEYWORDS[p.ID])
        return Variable(p.ID)

    @_("NOT operand")
    def operand(self, p) -> Expr:
        """Negation of the operand immediately following it."""
        return Not(p.operand)

    @_("LPAREN expr RPAREN")
    def operand(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    def parse(self, text: str) -> Union[Expr, List[NamedFormula]]:
        """Parse formula or program text.

        Args:
            text: Non-blank source text

        Returns:
            Root AST node for a formula, or the list of named formulas
            for a program

        Raises:
            ParseError: If the text contains syntax errors or a formula is
                nested more than MAX_DEPTH levels deep
        """
        logger = get_logger()
        logger.debug(f"Parsing text: {text!r}")

        self._text = text
        try:
            result = super().parse(FormulaLexer().tokenize(text))

            if result is None:
                raise ParseError(
                    "Failed to parse input (syntax error).",
                    position=0,
                    remainder=text,
                )

            self._check_depth(result)

            logger.debug(f"Successfully parsed text into {type(result).__name__}")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def _check_depth(self, result) -> None:
        exprs = [f.expr for f in result] if isinstance(result, list) else [result]
        for expr in exprs:
            depth = tree_depth(expr)
            if depth > MAX_DEPTH:
                raise ParseError(
                    f"Formula nested too deeply ({depth} levels, limit {MAX_DEPTH})",
                    position=0,
                    remainder=self._text,
                )

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering a token that doesn't
        match any grammar rule.

        Args:
            token: Problematic token or None for end of input

        Raises:
            ParseError: Always raised with position and remaining input
        """
        if token:
            raise ParseError(
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}",
                position=token.index,
                remainder=self._text[token.index:],
                line=token.lineno,
            )

        raise ParseError(
            "Syntax error: Unexpected end of input",
            position=len(self._text),
            remainder="",
            line=self._text.count("\n") + 1,
        )
