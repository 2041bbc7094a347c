# logic_parser/cnf_transformer.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Expression tree transformer for Conjunctive Normal Form conversion

"""Transforms expression trees into Conjunctive Normal Form (CNF).

The conversion is three structural rewrite passes applied in order:

1. Implication elimination: ``A > B`` becomes ``(~A) + B``, bottom-up
2. Negation normal form: negations are pushed down to the atoms using
   double negation elimination and De Morgan's laws, top-down
3. Distribution: OR is distributed over AND, bottom-up, so the result is a
   conjunction of disjunctions of literals

Each pass is a visitor that returns a new tree. Nodes are immutable, so a
subtree that needs no rewriting is returned as is.
"""

from __future__ import annotations

from . import ast_nodes as ast
from utils.logger import get_logger


def _rebuild(n: ast.BinaryOp, left: ast.Expr, right: ast.Expr) -> ast.Expr:
    """Rebuild a binary node only when one of its children changed."""
    if left is n.left and right is n.right:
        return n
    return type(n)(left, right)


class ImplicationEliminator(ast.Visitor):
    """Pass 1: rewrite every ``A > B`` into ``(~A) + B``."""

    def transform(self, root: ast.Expr) -> ast.Expr:
        return root.accept(self)

    def visit_atom(self, n: ast.Atom) -> ast.Expr:
        return n

    def visit_not(self, n: ast.Not) -> ast.Expr:
        operand = n.operand.accept(self)
        return n if operand is n.operand else ast.Not(operand)

    def visit_and(self, n: ast.And) -> ast.Expr:
        return _rebuild(n, n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        return _rebuild(n, n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Expr:
        # Children first so nested implications disappear as well
        left = n.left.accept(self)
        right = n.right.accept(self)
        return ast.Or(ast.Not(left), right)


class NegationNormalizer(ast.Visitor):
    """Pass 2: push negations inward until they sit directly on atoms.

    Rules:
        ~~A     -> A
        ~(A+B)  -> (~A)*(~B)
        ~(A*B)  -> (~A)+(~B)

    A negation over an atom, or over an implication when pass 1 was
    skipped, is left in place.
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        return root.accept(self)

    def visit_atom(self, n: ast.Atom) -> ast.Expr:
        return n

    def visit_not(self, n: ast.Not) -> ast.Expr:
        child = n.operand

        if isinstance(child, ast.Not):
            return child.operand.accept(self)

        if isinstance(child, ast.Or):
            return ast.And(
                ast.Not(child.left).accept(self),
                ast.Not(child.right).accept(self),
            )

        if isinstance(child, ast.And):
            return ast.Or(
                ast.Not(child.left).accept(self),
                ast.Not(child.right).accept(self),
            )

        return n

    def visit_and(self, n: ast.And) -> ast.Expr:
        return _rebuild(n, n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        return _rebuild(n, n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Expr:
        return _rebuild(n, n.left.accept(self), n.right.accept(self))


class OrDistributor(ast.Visitor):
    """Pass 3: distribute OR over AND.

    ``(A1*A2) + B`` becomes ``(A1+B) * (A2+B)``; otherwise
    ``A + (B1*B2)`` becomes ``(A+B1) * (A+B2)``. The left-hand rule wins
    when both sides are conjunctions.
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        return root.accept(self)

    def visit_atom(self, n: ast.Atom) -> ast.Expr:
        return n

    def visit_not(self, n: ast.Not) -> ast.Expr:
        operand = n.operand.accept(self)
        return n if operand is n.operand else ast.Not(operand)

    def visit_and(self, n: ast.And) -> ast.Expr:
        return _rebuild(n, n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        left = n.left.accept(self)
        right = n.right.accept(self)
        if not isinstance(left, ast.And) and not isinstance(right, ast.And):
            return _rebuild(n, left, right)
        return _distribute(left, right)

    def visit_implies(self, n: ast.Implies) -> ast.Expr:
        return _rebuild(n, n.left.accept(self), n.right.accept(self))


def _distribute(left: ast.Expr, right: ast.Expr) -> ast.Expr:
    """Build the CNF of ``left + right`` when both operands are already CNF."""
    if isinstance(left, ast.And):
        return ast.And(_distribute(left.left, right), _distribute(left.right, right))
    if isinstance(right, ast.And):
        return ast.And(_distribute(left, right.left), _distribute(left, right.right))
    return ast.Or(left, right)


class CNFTransformer:
    """Runs the three CNF passes in sequence.

    Example:
        >>> str(CNFTransformer().transform(parse("p > q")))
        '((~p) + q)'
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        """Convert a tree to CNF.

        Args:
            root: Root node of any well-formed expression tree

        Returns:
            Equivalent tree shaped as an AND of ORs of literals
        """
        logger = get_logger()
        logger.debug(f"Starting CNF transformation of {type(root).__name__}")

        result = eliminate_implications(root)
        logger.debug(f"After implication elimination: {result}")

        result = push_negations_inward(result)
        logger.debug(f"After negation normal form: {result}")

        result = distribute_or_over_and(result)
        logger.debug(f"CNF transformation complete: {result}")
        return result


def eliminate_implications(root: ast.Expr) -> ast.Expr:
    """Pass 1 of the CNF conversion."""
    return ImplicationEliminator().transform(root)


def push_negations_inward(root: ast.Expr) -> ast.Expr:
    """Pass 2 of the CNF conversion (negation normal form)."""
    return NegationNormalizer().transform(root)


def distribute_or_over_and(root: ast.Expr) -> ast.Expr:
    """Pass 3 of the CNF conversion."""
    return OrDistributor().transform(root)


def to_cnf(root: ast.Expr) -> ast.Expr:
    """Convert a tree to Conjunctive Normal Form."""
    return CNFTransformer().transform(root)
