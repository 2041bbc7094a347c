# evaluation/__init__.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Evaluation, truth tables and CNF validity analysis

"""Semantic analysis of expression trees.

Core Functions:
    evaluate: Truth value of a tree under one assignment
    generate_truth_table: Truth value under every assignment of its atoms
    collect_clauses: Clause lists of a CNF tree
    analyze_cnf_validity: Per-clause tautology verdicts and counts
    cnf_validity_report: CNF conversion and clause analysis in one call

Example:
    >>> from logic_parser import parse
    >>> report = cnf_validity_report(parse("p + ~p"))
    >>> report.analysis.is_tautology
    True
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from logic_parser import ast_nodes as ast
from logic_parser.cnf_transformer import CNFTransformer
from .exceptions import EvaluationError, UndefinedAtomError
from .evaluator import Evaluator, evaluate
from .truth_table import TruthTable, TruthTableRow, collect_atoms, generate_truth_table
from .clause_analysis import (
    ClauseAnalysis,
    analyze_cnf_validity,
    clause_literals,
    collect_clauses,
    is_tautological_clause,
    negate_literal,
)
from utils.logger import get_logger


@dataclass(frozen=True)
class ValidityReport:
    """CNF form of a formula together with its clause analysis.

    Attributes:
        cnf: Root of the CNF tree
        cnf_infix: Rendered CNF text
        clauses: Literal lists, one per clause
        analysis: Tautology verdicts and counts
    """

    cnf: ast.Expr
    cnf_infix: str
    clauses: List[List[str]]
    analysis: ClauseAnalysis

    @property
    def valid_count(self) -> int:
        return self.analysis.valid_count

    @property
    def invalid_count(self) -> int:
        return self.analysis.invalid_count

    @property
    def is_tautology(self) -> bool:
        return self.analysis.is_tautology


def cnf_validity_report(root: ast.Expr) -> ValidityReport:
    """Convert a tree to CNF and analyze its clauses.

    Args:
        root: Root node of any well-formed expression tree

    Returns:
        ValidityReport for the formula
    """
    logger = get_logger()

    cnf = CNFTransformer().transform(root)
    clauses = collect_clauses(cnf)
    analysis = analyze_cnf_validity(clauses)

    logger.debug(
        f"CNF validity: {len(clauses)} clauses, tautology={analysis.is_tautology}"
    )
    return ValidityReport(
        cnf=cnf, cnf_infix=str(cnf), clauses=clauses, analysis=analysis
    )


__all__ = [
    "evaluate",
    "Evaluator",
    "EvaluationError",
    "UndefinedAtomError",
    "TruthTable",
    "TruthTableRow",
    "collect_atoms",
    "generate_truth_table",
    "ClauseAnalysis",
    "ValidityReport",
    "analyze_cnf_validity",
    "clause_literals",
    "collect_clauses",
    "is_tautological_clause",
    "negate_literal",
    "cnf_validity_report",
]
