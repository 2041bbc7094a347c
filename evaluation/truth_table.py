# evaluation/truth_table.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Truth table generation over all assignments of a formula's atoms

"""Truth table generation for expression trees.

For ``n`` distinct atoms the table has ``2^n`` rows. Row ``i`` assigns the
``j``-th atom (sorted by name) bit ``n-1-j`` of ``i``, so the first atom is
the most significant bit and the rows count up from all-false to all-true.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from logic_parser import ast_nodes as ast
from .evaluator import evaluate
from utils.logger import get_logger


@dataclass(frozen=True)
class TruthTableRow:
    """One assignment and the formula's value under it.

    Attributes:
        values: Truth value per atom, in the table's atom order
        result: Value of the formula
    """

    values: Tuple[bool, ...]
    result: bool


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of a formula.

    Attributes:
        atoms: Sorted distinct atom names (column headers)
        rows: One row per assignment, ordered by row index
    """

    atoms: Tuple[str, ...]
    rows: Tuple[TruthTableRow, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def assignments(self) -> Iterator[Dict[str, bool]]:
        """Yield the assignment of every row as an atom -> value dict."""
        for row in self.rows:
            yield dict(zip(self.atoms, row.values))

    def render(self) -> str:
        """Format the table with fixed-width columns and 0/1 values."""
        if not self.atoms:
            return "No propositional atoms found."

        lines = [
            "".join(f"{atom:>6}" for atom in self.atoms) + f"{'Result':>9}",
            "-" * (6 * len(self.atoms) + 10),
        ]
        for row in self.rows:
            cells = "".join(f"{int(value):>6}" for value in row.values)
            lines.append(cells + f"{int(row.result):>10}")
        return "\n".join(lines)


def collect_atoms(root: ast.Expr) -> List[str]:
    """Return the sorted distinct atom names occurring in a tree."""
    atoms = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, ast.Atom):
            atoms.add(node.name)
        elif isinstance(node, ast.Not):
            stack.append(node.operand)
        else:
            stack.append(node.left)
            stack.append(node.right)
    return sorted(atoms)


def generate_truth_table(root: ast.Expr) -> TruthTable:
    """Evaluate a tree under every assignment of its atoms.

    Args:
        root: Root node of the expression tree

    Returns:
        TruthTable with ``2^n`` rows, or no rows when the tree has no atoms
    """
    logger = get_logger()

    atoms = collect_atoms(root)
    n = len(atoms)
    if n == 0:
        logger.debug("No propositional atoms found, truth table is empty")
        return TruthTable(atoms=(), rows=())

    logger.debug(f"Generating truth table over {n} atoms ({1 << n} rows)")

    rows = []
    for i in range(1 << n):
        values = tuple(bool((i >> (n - j - 1)) & 1) for j in range(n))
        result = evaluate(root, dict(zip(atoms, values)))
        rows.append(TruthTableRow(values=values, result=result))

    return TruthTable(atoms=tuple(atoms), rows=tuple(rows))
