# utils/__init__.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Utility module exports

from .dimacs_reader import (
    DimacsFormula,
    DimacsFormatError,
    parse_dimacs,
    read_dimacs,
    dimacs_to_formula,
    clauses_to_formula,
)

__all__ = [
    "DimacsFormula",
    "DimacsFormatError",
    "parse_dimacs",
    "read_dimacs",
    "dimacs_to_formula",
    "clauses_to_formula",
]
