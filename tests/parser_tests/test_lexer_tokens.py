# tests/parser_tests/test_lexer_tokens.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Test suite for formula lexer tokenization and error handling

"""Test suite for formula lexer functionality.

This module tests the lexical analysis phase of formula parsing, verifying
longest-first operator matching, identifier recognition and error handling
for invalid characters.
"""

import pytest
from parser.lexer import FormulaLexer
from parser.exceptions import ParseError
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for formula lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = FormulaLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text.

        Args:
            text: Input string to tokenize

        Returns:
            List of token type strings
        """
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in self.lexer.tokenize(text)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        # Identifiers, keywords are plain identifiers at this stage
        ("a", ["ID"]),
        ("true", ["ID"]),
        ("False", ["ID"]),
        ("someLongName", ["ID"]),
        # Connectives
        ("a & b", ["ID", "AND", "ID"]),
        ("a | b", ["ID", "OR", "ID"]),
        ("a => b", ["ID", "IMPLIES", "ID"]),
        ("a <=> b", ["ID", "EQUIV", "ID"]),
        ("a && b || c", ["ID", "AND", "ID", "OR", "ID"]),
        # Longest match first
        ("a<=>b", ["ID", "EQUIV", "ID"]),
        ("a=>b", ["ID", "IMPLIES", "ID"]),
        ("x=a=>b;", ["ID", "ASSIGN", "ID", "IMPLIES", "ID", "SEMI"]),
        # Negation and grouping
        ("!(a)", ["NOT", "LPAREN", "ID", "RPAREN"]),
        ("!!a", ["NOT", "NOT", "ID"]),
        # Whitespace handling
        ("  a \t&\r\n b  ", ["ID", "AND", "ID"]),
        ("", []),
        (" \n\t ", []),
    ]

    @pytest.mark.parametrize("text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, text, expected_types):
        """Test that valid input produces the expected token types."""
        assert self._tokenize_to_types(text) == expected_types

    def test_doubled_connectives_are_normalized(self):
        """Test that && and || carry the single-character spelling."""
        values = [t.value for t in self.lexer.tokenize("a && b || c")]
        assert values == ["a", "&", "b", "|", "c"]

    def test_identifiers_stop_at_non_letters(self):
        """Test that identifiers are letters only, so a digit is rejected."""
        with pytest.raises(ParseError) as exc_info:
            list(self.lexer.tokenize("ab1"))

        assert exc_info.value.position == 2
        assert exc_info.value.remainder == "1"

    INVALID_CHARACTER_CASES = [
        ("a @ b", "@", 2),
        ("a_b", "_", 1),
        ("a < b", "<", 2),
        ("a # b", "#", 2),
        ("a ~ b", "~", 2),
    ]

    @pytest.mark.parametrize("text, char, position", INVALID_CHARACTER_CASES)
    def test_invalid_characters_raise_parse_error(self, text, char, position):
        """Test that illegal characters report their position and the rest of the input."""
        with pytest.raises(ParseError, match="Illegal character") as exc_info:
            list(self.lexer.tokenize(text))

        error = exc_info.value
        assert char in str(error)
        assert error.position == position
        assert error.remainder == text[position:]

    def test_newlines_advance_line_number(self):
        """Test that line numbers count newlines for error reporting."""
        with pytest.raises(ParseError) as exc_info:
            list(self.lexer.tokenize("x = a;\n\ny = $;"))

        assert exc_info.value.line == 3
