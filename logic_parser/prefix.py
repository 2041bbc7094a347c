# logic_parser/prefix.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Infix to prefix (Polish notation) conversion

"""Infix to prefix conversion for propositional formulas.

The converter reverses the token sequence, swaps the parentheses and runs
a shunting-yard pass as if producing postfix, then reverses the output.

Operator Precedence (highest to lowest):
- ~ (NOT): 3
- * (AND): 2
- + (OR): 1
- > (IMPLIES): 0

The operator stack pops only on strictly greater precedence, so every
binary connective groups to the left: ``p > q > r`` reads as
``(p > q) > r``.
"""

import re
from typing import Iterable, List, Union

from .ast_nodes import is_operator
from .lexer import tokenize
from utils.logger import get_logger


PRECEDENCE = {
    "~": 3,
    "*": 2,
    "+": 1,
    ">": 0,
}

_ATOM_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def is_atom(token: str) -> bool:
    """Return True if the token is a well-formed atom name."""
    return _ATOM_PATTERN.fullmatch(token) is not None


def precedence(token: str) -> int:
    """Precedence level of an operator, -1 for anything else."""
    return PRECEDENCE.get(token, -1)


def infix_to_prefix(expression: Union[str, Iterable[str]]) -> List[str]:
    """Convert an infix formula to prefix token order.

    Unbalanced parentheses are tolerated: a closing parenthesis with no
    match is ignored and unmatched opening ones are dropped at the end.
    Stray symbols are dropped as well.

    Args:
        expression: Formula text, or an already tokenized sequence

    Returns:
        Tokens in prefix order

    Example:
        >>> infix_to_prefix("p > q")
        ['>', 'p', 'q']
    """
    logger = get_logger()

    tokens = tokenize(expression) if isinstance(expression, str) else list(expression)
    logger.debug(f"Converting {len(tokens)} infix tokens to prefix")

    swapped = {"(": ")", ")": "("}
    reversed_tokens = [swapped.get(token, token) for token in reversed(tokens)]

    ops: List[str] = []
    output: List[str] = []

    for token in reversed_tokens:
        if is_atom(token):
            output.append(token)
        elif token == "(":
            ops.append(token)
        elif token == ")":
            while ops and ops[-1] != "(":
                output.append(ops.pop())
            if ops:
                ops.pop()
        elif is_operator(token):
            while ops and precedence(ops[-1]) > precedence(token):
                output.append(ops.pop())
            ops.append(token)
        else:
            logger.debug(f"Dropping stray token {token!r}")

    while ops:
        token = ops.pop()
        if token != "(":
            output.append(token)

    output.reverse()
    logger.debug(f"Prefix tokens: {format_prefix(output)}")
    return output


def format_prefix(tokens: Iterable[str]) -> str:
    """Join prefix tokens with single spaces, e.g. ``> p q``."""
    return " ".join(tokens)
