# evaluation/evaluator.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Truth evaluation of expression trees under an assignment

"""Evaluates expression trees under a truth assignment.

The evaluator is a visitor over the closed node set. Both operands of a
binary node are always evaluated, so a missing atom is reported even when
the other operand alone would decide the result.
"""

from typing import Mapping

from logic_parser import ast_nodes as ast
from .exceptions import UndefinedAtomError


class Evaluator(ast.Visitor):
    """Computes the truth value of a tree for one assignment.

    Attributes:
        assignment: Truth value for every atom of the tree
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self.assignment = assignment

    def visit_atom(self, n: ast.Atom) -> bool:
        try:
            return bool(self.assignment[n.name])
        except KeyError:
            raise UndefinedAtomError(n.name) from None

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left or right

    def visit_implies(self, n: ast.Implies) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return (not left) or right


def evaluate(root: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Evaluate a tree under a complete assignment.

    Args:
        root: Root node of the expression tree
        assignment: Mapping from atom name to truth value

    Returns:
        Truth value of the formula

    Raises:
        UndefinedAtomError: An atom of the tree has no value in the assignment
    """
    return root.accept(Evaluator(assignment))
