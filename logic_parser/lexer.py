# logic_parser/lexer.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks formula text into tokens for the infix-to-prefix
converter. Tokenization never fails: anything that is not an atom,
operator or parenthesis comes through as a single-character ``SYMBOL``
token and is left for later stages to reject.

Supported Tokens:
- Atoms: maximal runs of letters, digits and underscores
- Operators: ~ (NOT), * (AND), + (OR), > (IMPLIES)
- Parentheses: ( )
- Whitespace: ignored during tokenization
"""

from typing import List

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ATOM",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "LPAREN",
        "RPAREN",
        "SYMBOL",
    }

    ignore = " \t\r\n\f\v"

    ATOM = r"[A-Za-z0-9_]+"

    NOT = r"~"
    AND = r"\*"
    OR = r"\+"
    IMPLIES = r">"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Any other single non-whitespace character
    SYMBOL = r"[^\sA-Za-z0-9_]"

    def error(self, t):
        """Skip characters no rule matches (only non-ASCII whitespace)."""
        logger = get_logger()
        logger.debug(f"Skipping unmatched character {t.value[0]!r} at position {self.index}")
        self.index += 1


def tokenize(text: str) -> List[str]:
    """Split formula text into token strings.

    Args:
        text: Raw infix formula

    Returns:
        Token strings in input order

    Example:
        >>> tokenize("~(p1 * q)")
        ['~', '(', 'p1', '*', 'q', ')']
    """
    return [token.value for token in FormulaLexer().tokenize(text)]
