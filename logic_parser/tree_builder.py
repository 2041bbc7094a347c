# logic_parser/tree_builder.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Expression tree construction from prefix tokens

"""Builds expression trees from prefix token sequences.

Tokens are consumed from last to first with a stack of subtrees. An atom
pushes a leaf, ``~`` wraps the top subtree and a binary operator combines
the two top subtrees, the first one popped becoming the left child.
"""

from typing import List, Sequence

from .ast_nodes import BINARY_NODES, NOT_SYMBOL, Atom, Expr, Not
from .exceptions import TreeBuildError
from .prefix import is_atom
from utils.logger import get_logger


def build_tree(prefix: Sequence[str]) -> Expr:
    """Construct the expression tree described by prefix tokens.

    Args:
        prefix: Tokens in prefix order

    Returns:
        Root node of the tree

    Raises:
        TreeBuildError: An operator lacks operands, a token is neither
            atom nor operator, or the tokens do not reduce to one tree
    """
    logger = get_logger()
    stack: List[Expr] = []

    for token in reversed(prefix):
        if token == NOT_SYMBOL:
            if not stack:
                raise TreeBuildError("'~' has no operand")
            stack.append(Not(stack.pop()))
        elif token in BINARY_NODES:
            if len(stack) < 2:
                raise TreeBuildError(f"'{token}' needs two operands")
            left = stack.pop()
            right = stack.pop()
            stack.append(BINARY_NODES[token](left, right))
        elif is_atom(token):
            stack.append(Atom(token))
        else:
            raise TreeBuildError(f"unexpected token {token!r}")

    if len(stack) != 1:
        raise TreeBuildError(f"{len(stack)} subtrees remain instead of one")

    logger.debug(f"Built tree with root {type(stack[0]).__name__}")
    return stack[0]
