# logic_parser/__init__.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Formula parsing and transformation components for propositional logic

"""Propositional formula parsing and CNF conversion.

This package turns infix formula text into expression trees and rewrites
those trees into Conjunctive Normal Form. The parsing pipeline runs in
strictly forward stages:

    text -> tokens -> prefix tokens -> expression tree

Core Functions:
    tokenize: Split formula text into tokens
    infix_to_prefix: Reorder tokens into prefix (Polish) notation
    build_tree: Construct an expression tree from prefix tokens
    to_infix: Render a tree as fully parenthesized infix text
    parse: Complete text to tree pipeline
    parse_and_cnf: Parse and convert to CNF in one call

Supported Logic:
    - Atoms made of letters, digits and underscores
    - ~ (NOT), * (AND), + (OR), > (IMPLIES)
    - Parenthetical grouping

Example:
    >>> from logic_parser import parse_and_cnf, to_infix
    >>> to_infix(parse_and_cnf("~(p * q)"))
    '((~p) + (~q))'
"""

from .exceptions import ParseError, TreeBuildError, CNFStructureError
from .ast_nodes import Expr, tree_height
from .lexer import tokenize
from .prefix import infix_to_prefix, format_prefix
from .tree_builder import build_tree
from .cnf_transformer import CNFTransformer, to_cnf
from utils.logger import get_logger


def to_infix(node: Expr) -> str:
    """Render a tree as fully parenthesized infix text.

    Atoms render as their name, negations as ``(~X)`` and binary nodes as
    ``(L op R)``. The output reparses to an equal tree.
    """
    return str(node)


def parse(source: str) -> Expr:
    """Parse formula text into an expression tree.

    Args:
        source: Infix formula string

    Returns:
        Root node of the expression tree

    Raises:
        ParseError: The formula does not describe exactly one expression

    Example:
        >>> parse("p > q")
        Implies(left=Atom(name='p'), right=Atom(name='q'))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    try:
        result = build_tree(infix_to_prefix(source))
        logger.debug(
            f"Formula parsed successfully into tree with root: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_and_cnf(source: str) -> Expr:
    """Parse formula text and convert the tree to CNF.

    Args:
        source: Infix formula string

    Returns:
        Root node of the CNF tree

    Raises:
        ParseError: Formula parsing fails
    """
    logger = get_logger()
    logger.debug(f"Parsing and transforming formula to CNF: {source}")

    tree = parse(source)
    cnf = CNFTransformer().transform(tree)

    logger.debug(f"CNF transformation completed, result type: {type(cnf).__name__}")
    return cnf


__all__ = [
    "tokenize",
    "infix_to_prefix",
    "format_prefix",
    "build_tree",
    "to_infix",
    "to_cnf",
    "tree_height",
    "parse",
    "parse_and_cnf",
    "ParseError",
    "TreeBuildError",
    "CNFStructureError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and CNF transformation components"
