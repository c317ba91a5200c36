# tests/parser_tests/test_lexer_tokens.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Test suite for prefix lexer tokenization and error handling

"""Test suite for the strict front-end lexer.

Verifies tokenization of valid prefix syntax, keyword/atom boundaries and
error handling for characters that cannot appear in a premise.
"""

import pytest
from parser.lexer import PrefixLexer
from utils.logger import get_logger


class TestPrefixLexer:
    """Test cases for prefix lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = PrefixLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text."""
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in self.lexer.tokenize(text)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        ("P", ["ATOM"]),
        ("(not P)", ["LPAREN", "NOT", "ATOM", "RPAREN"]),
        ("(and P Q)", ["LPAREN", "AND", "ATOM", "ATOM", "RPAREN"]),
        ("(or P Q)", ["LPAREN", "OR", "ATOM", "ATOM", "RPAREN"]),
        ("(if P Q)", ["LPAREN", "IF", "ATOM", "ATOM", "RPAREN"]),
        ("(iff P Q)", ["LPAREN", "IFF", "ATOM", "ATOM", "RPAREN"]),
        # Keywords are case sensitive and whole-token only
        ("IF", ["ATOM"]),
        ("Not", ["ATOM"]),
        ("iffy", ["ATOM"]),
        ("notary", ["ATOM"]),
        ("or_else", ["ATOM"]),
        # Parentheses need no surrounding whitespace
        (
            "(not(if P Q))",
            ["LPAREN", "NOT", "LPAREN", "IF", "ATOM", "ATOM", "RPAREN", "RPAREN"],
        ),
        # Whitespace handling
        (" \t(and\nP\r\nQ ) ", ["LPAREN", "AND", "ATOM", "ATOM", "RPAREN"]),
        # Atom shapes
        ("rain_today", ["ATOM"]),
        ("P1", ["ATOM"]),
        ("A'", ["ATOM"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Lexer produces the expected token types for valid syntax."""
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_atom_values_are_preserved(self):
        """Atom tokens carry their exact spelling."""
        values = [token.value for token in self.lexer.tokenize("(and Rain wet_2)")]
        assert values == ["(", "and", "Rain", "wet_2", ")"]

    # Characters from infix notation and other stray symbols
    ILLEGAL_CHARACTERS = ["~", "^", "&", "|", "-", ">", "<", "@", "#", ",", ";", "[", "{"]

    @pytest.mark.parametrize("illegal_char", ILLEGAL_CHARACTERS)
    def test_illegal_character_handling(self, illegal_char):
        """Lexer raises ValueError for characters outside the premise alphabet."""
        test_input = f"(and P {illegal_char})"

        with pytest.raises(ValueError) as exc_info:
            self._tokenize_to_types(test_input)

        error_message = str(exc_info.value)
        assert "Illegal character" in error_message
        assert illegal_char in error_message
