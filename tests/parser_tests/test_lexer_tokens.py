# tests/parser_tests/test_lexer_tokens.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Test suite for formula lexer tokenization

"""Test suite for formula lexer functionality.

Verifies that atoms, operators and parentheses are split correctly, that
whitespace is ignored and that stray characters pass through as single
character tokens instead of failing.
"""

import pytest
from logic_parser.lexer import FormulaLexer, tokenize
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for formula lexer tokenization."""

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
        ("p", ["ATOM"]),
        ("x1", ["ATOM"]),
        ("ready_2", ["ATOM"]),
        ("_hidden", ["ATOM"]),
        ("42", ["ATOM"]),
        ("~ * + > ( )", ["NOT", "AND", "OR", "IMPLIES", "LPAREN", "RPAREN"]),
        ("p>q", ["ATOM", "IMPLIES", "ATOM"]),
        ("~(p*q)", ["NOT", "LPAREN", "ATOM", "AND", "ATOM", "RPAREN"]),
        (" \t p \n + \r q ", ["ATOM", "OR", "ATOM"]),
        ("p & q", ["ATOM", "SYMBOL", "ATOM"]),
        ("p->q", ["ATOM", "SYMBOL", "IMPLIES", "ATOM"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_token_types(self, input_text, expected_types):
        """Test lexer assigns the expected token types.

        Args:
            input_text: Formula text
            expected_types: Expected sequence of token types
        """
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    TOKEN_VALUE_CASES = [
        ("p > q", ["p", ">", "q"]),
        ("~(p1 * q_2)", ["~", "(", "p1", "*", "q_2", ")"]),
        ("(x1 + ~x2) * (x2)", ["(", "x1", "+", "~", "x2", ")", "*", "(", "x2", ")"]),
        ("abc123def", ["abc123def"]),
        ("p @ q", ["p", "@", "q"]),
        ("p;;q", ["p", ";", ";", "q"]),
    ]

    @pytest.mark.parametrize("input_text, expected_tokens", TOKEN_VALUE_CASES)
    def test_token_values(self, input_text, expected_tokens):
        """Test tokenize returns the token strings in input order."""
        assert tokenize(input_text) == expected_tokens

    def test_atoms_are_maximal_runs(self):
        """Adjacent word characters always form a single atom."""
        assert tokenize("pq") == ["pq"]
        assert tokenize("p q") == ["p", "q"]
        assert tokenize("a_b_c+d") == ["a_b_c", "+", "d"]

    def test_whitespace_only_input(self):
        """Whitespace only text produces no tokens."""
        for text in ["", "   ", "\t\n", " \r\n\f\v "]:
            assert tokenize(text) == []

    def test_tokenize_never_raises_on_stray_symbols(self):
        """Stray characters are passed through as one-character tokens."""
        tokens = tokenize("p # q ! r")
        assert tokens == ["p", "#", "q", "!", "r"]
