# evaluation/clause_analysis.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Clause extraction and per-clause tautology analysis of CNF trees

"""Clause extraction and tautology analysis for CNF trees.

A CNF tree is an AND of clauses and each clause is an OR of literals. A
literal is written ``p`` for an atom and ``~p`` for its negation.

A clause is tautological when it contains some literal together with its
complement. The formula counts as a tautology only when every clause is
tautological; an empty clause list is vacuously one.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from logic_parser import ast_nodes as ast
from logic_parser.exceptions import CNFStructureError
from utils.logger import get_logger

Clause = List[str]


@dataclass(frozen=True)
class ClauseAnalysis:
    """Tautology verdicts of the clauses of a CNF formula.

    Attributes:
        clause_tautologies: Verdict per clause, in clause order
        valid_count: Number of tautological clauses
        invalid_count: Number of non-tautological clauses
        is_tautology: True when every clause is tautological
    """

    clause_tautologies: Tuple[bool, ...]
    valid_count: int
    invalid_count: int
    is_tautology: bool


def negate_literal(literal: str) -> str:
    """Return the complement of a literal (``p`` <-> ``~p``)."""
    if literal.startswith(ast.NOT_SYMBOL):
        return literal[1:]
    return ast.NOT_SYMBOL + literal


def clause_literals(node: ast.Expr) -> Clause:
    """Flatten an OR-chain into its literals, left to right.

    Raises:
        CNFStructureError: The subtree holds something other than ORs of
            atoms and negated atoms
    """
    literals: Clause = []
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, ast.Or):
            # Right first so the left side is emitted first
            stack.append(current.right)
            stack.append(current.left)
        elif isinstance(current, ast.Atom):
            literals.append(current.name)
        elif isinstance(current, ast.Not) and isinstance(current.operand, ast.Atom):
            literals.append(ast.NOT_SYMBOL + current.operand.name)
        else:
            raise CNFStructureError(f"Not a CNF literal: {current}")
    return literals


def collect_clauses(cnf_root: ast.Expr) -> List[Clause]:
    """Split a CNF tree into clauses.

    Every AND node is descended into; any other node is one clause.

    Args:
        cnf_root: Root of a tree in CNF

    Returns:
        Clauses in left-to-right order

    Raises:
        CNFStructureError: The tree is not in CNF
    """
    clauses: List[Clause] = []
    stack = [cnf_root]
    while stack:
        node = stack.pop()
        if isinstance(node, ast.And):
            stack.append(node.right)
            stack.append(node.left)
        else:
            clauses.append(clause_literals(node))

    get_logger().debug(f"Collected {len(clauses)} clauses from CNF tree")
    return clauses


def is_tautological_clause(clause: Sequence[str]) -> bool:
    """True if the clause holds a literal and its complement.

    Duplicate literals alone do not make a clause tautological.
    """
    seen = set()
    for literal in clause:
        if negate_literal(literal) in seen:
            return True
        seen.add(literal)
    return False


def analyze_cnf_validity(clauses: Sequence[Sequence[str]]) -> ClauseAnalysis:
    """Classify every clause and derive the formula-level verdict.

    Args:
        clauses: Clauses as produced by ``collect_clauses``

    Returns:
        ClauseAnalysis with per-clause verdicts and counts
    """
    logger = get_logger()

    verdicts = tuple(is_tautological_clause(clause) for clause in clauses)
    valid_count = sum(verdicts)
    invalid_count = len(verdicts) - valid_count

    logger.debug(
        f"Clause analysis: {valid_count} tautological, {invalid_count} non-tautological"
    )

    return ClauseAnalysis(
        clause_tautologies=verdicts,
        valid_count=valid_count,
        invalid_count=invalid_count,
        is_tautology=invalid_count == 0,
    )
