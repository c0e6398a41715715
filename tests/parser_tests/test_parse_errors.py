# tests/parser_tests/test_parse_errors.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Test suite for formula parser syntax validation and error handling

"""Test suite for parser syntax validation and error handling.

This module tests that malformed input is always rejected with a ParseError
carrying the position where parsing stopped and the unconsumed input, and
that no partial tree is ever returned.
"""

import pytest
from parser import parse, parse_expression, parse_program, ParseError
from parser.grammar import MAX_DEPTH
from logic import evaluate
from utils.logger import get_logger


class TestFormulaParserErrors:
    """Test cases for parser error detection."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    INVALID_FORMULAS = [
        # Empty input
        "",
        "   ",
        "\n\t",
        # Unbalanced parentheses
        "(a & b",
        "a & b)",
        "((a)",
        "()",
        # Missing operands
        "a &",
        "& a",
        "a & & b",
        "!",
        "a !",
        "a b",
        # Unknown characters and malformed operators
        "a < b",
        "a = b",
        "a =>> b",
        "a <= b",
        "a ^ b",
        "a1",
        "a_b",
        # Statements where a formula is expected
        "x = a;",
        "a;",
    ]

    @pytest.mark.parametrize("formula", INVALID_FORMULAS)
    def test_invalid_formulas_raise_parse_error(self, formula):
        """Test that malformed formulas raise ParseError.

        Args:
            formula: Invalid formula string
        """
        self.logger.debug(f"Testing invalid formula: {formula!r}")

        with pytest.raises(ParseError):
            parse(formula)

    def test_unmatched_parenthesis_reports_end_of_input(self):
        """Test the missing closing parenthesis scenario."""
        with pytest.raises(ParseError, match="end of input") as exc_info:
            parse_expression("(a & b")

        assert exc_info.value.position == len("(a & b")
        assert exc_info.value.remainder == ""

    def test_trailing_garbage_reports_position_and_remainder(self):
        """Test that the error points at the first unconsumed token."""
        with pytest.raises(ParseError) as exc_info:
            parse_expression("a & b) | c")

        error = exc_info.value
        assert error.position == 5
        assert error.remainder == ") | c"
        assert error.line == 1

    def test_missing_operand_reports_offending_token(self):
        """Test that a doubled connective is reported where it occurs."""
        with pytest.raises(ParseError, match="Syntax error near '&'") as exc_info:
            parse_expression("a & & b")

        assert exc_info.value.position == 4
        assert exc_info.value.remainder == "& b"

    def test_empty_formula_message(self):
        """Test the dedicated message for blank input."""
        with pytest.raises(ParseError, match="empty"):
            parse_expression("  ")

    def test_program_rejected_as_formula(self):
        """Test that a well-formed program is not accepted as a formula."""
        with pytest.raises(ParseError, match="single formula"):
            parse_expression("x = a & b;")

    def test_formula_rejected_as_program(self):
        """Test that a bare formula is not accepted as a program."""
        with pytest.raises(ParseError, match="statements"):
            parse_program("a & b")

    def test_parse_error_is_runtime_error(self):
        """Test that ParseError fits the RuntimeError hierarchy."""
        assert issubclass(ParseError, RuntimeError)


class TestNestingLimit:
    """Deep trees are refused with ParseError instead of overflowing the stack."""

    def test_deep_negation_is_rejected(self):
        with pytest.raises(ParseError, match="nested too deeply") as exc_info:
            parse_expression("!" * 3000 + "a")

        assert exc_info.value.position == 0

    def test_long_connective_chain_is_rejected(self):
        with pytest.raises(ParseError, match="nested too deeply"):
            parse_expression(" & ".join(["a"] * 3000))

    def test_deep_statement_is_rejected_in_programs(self):
        with pytest.raises(ParseError, match="nested too deeply"):
            parse_program("x = a; y = " + "!" * 3000 + "b;")

    def test_redundant_parentheses_do_not_count(self):
        assert parse_expression("(" * 1000 + "a" + ")" * 1000) == parse("a")

    def test_nesting_below_limit_is_usable(self):
        formula = "!" * (MAX_DEPTH - 1) + "a"
        ast = parse_expression(formula)

        assert parse_expression(str(ast)) == ast
        assert evaluate(ast, {"a": True}) is (MAX_DEPTH % 2 == 1)
