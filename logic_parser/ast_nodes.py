# logic_parser/ast_nodes.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Expression tree node classes for propositional formula representation

"""Expression tree nodes for parsed propositional formulas.

This module defines immutable and hashable node classes used to build tree
representations of propositional formulas. The node set is closed: atoms
are leaves, negation is unary and conjunction, disjunction and implication
are binary.

Node Types:
    Atom: Propositional variable (leaf)
    Not: Negation, one operand
    And, Or, Implies: Binary connectives with ordered left/right children

Rendering via ``str()`` produces fully parenthesized infix text using the
input operator symbols (``~``, ``*``, ``+``, ``>``). All nodes support the
visitor design pattern for traversal and transformation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Dict, Protocol, Type


NOT_SYMBOL = "~"
AND_SYMBOL = "*"
OR_SYMBOL = "+"
IMPLIES_SYMBOL = ">"


class Visitor(Protocol):
    """Interface for tree visitors implementing the visitor design pattern.

    Concrete visitors must implement a visit method for each node type so
    that every pass over the tree handles the whole closed node set.
    """

    def visit_atom(self, n: Atom): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all expression tree nodes.

    Provides the foundation for immutable expression trees with visitor
    support. Concrete node types implement ``accept`` for visitor dispatch
    and ``__str__`` for infix rendering.
    """

    symbol: ClassVar[str] = ""

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    @property
    def is_leaf(self) -> bool:
        """True for atoms, False for operator nodes."""
        return False

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Atom(Expr):
    """Propositional variable such as ``p`` or ``x1``.

    Attributes:
        name: The identifier string for this atom
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    @property
    def is_leaf(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    symbol: ClassVar[str] = NOT_SYMBOL

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"({NOT_SYMBOL}{self.operand})"


@dataclass(frozen=True, slots=True)
class BinaryOp(Expr):
    """Common shape of the binary connectives.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Expr
    right: Expr

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


@dataclass(frozen=True, slots=True)
class And(BinaryOp):
    """Logical conjunction, true when both operands are true."""

    symbol: ClassVar[str] = AND_SYMBOL

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryOp):
    """Logical disjunction, true when at least one operand is true."""

    symbol: ClassVar[str] = OR_SYMBOL

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryOp):
    """Material implication, false only when left is true and right is false."""

    symbol: ClassVar[str] = IMPLIES_SYMBOL

    def accept(self, v: Visitor):
        return v.visit_implies(self)


# Binary node class for each binary operator symbol
BINARY_NODES: Dict[str, Type[BinaryOp]] = {
    AND_SYMBOL: And,
    OR_SYMBOL: Or,
    IMPLIES_SYMBOL: Implies,
}

OPERATOR_SYMBOLS = frozenset({NOT_SYMBOL, *BINARY_NODES})


def is_operator(token: str) -> bool:
    """Return True if the token is one of the four connectives."""
    return token in OPERATOR_SYMBOLS


def tree_height(node: Expr) -> int:
    """Length of the longest root-to-leaf path, counting nodes (atom = 1)."""
    if isinstance(node, Atom):
        return 1
    if isinstance(node, Not):
        return 1 + tree_height(node.operand)
    return 1 + max(tree_height(node.left), tree_height(node.right))
