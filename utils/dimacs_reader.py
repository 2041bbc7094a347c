# utils/dimacs_reader.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# DIMACS CNF file reader producing infix formula text

"""Reader for CNF formulas in DIMACS format.

Each non-header line is one clause of space-separated integers ended by
``0``. A positive integer ``k`` stands for atom ``xk`` and ``-k`` for
``~xk``. The formula is rendered as infix text the parser accepts:

    c comment
    p cnf 2 2
    1 -2 0          ->   (x1 + ~x2) * (x2)
    2 0
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence
from utils.logger import get_logger


class DimacsFormatError(Exception):
    """Exception raised when DIMACS files are missing or contain invalid data."""

    pass


@dataclass
class DimacsFormula:
    """Clauses read from a DIMACS source.

    Attributes:
        clauses: One list of signed variable numbers per clause
        num_variables: Variable count declared by the ``p cnf`` header
        num_clauses: Clause count declared by the ``p cnf`` header
    """

    clauses: List[List[int]] = field(default_factory=list)
    num_variables: Optional[int] = None
    num_clauses: Optional[int] = None

    def to_formula(self) -> str:
        """Render the clauses as infix text."""
        return clauses_to_formula(self.clauses)


def parse_dimacs(lines: Iterable[str]) -> DimacsFormula:
    """Parse DIMACS text lines into clauses.

    Lines starting with ``c`` or ``p`` are headers and comments, a line
    starting with ``%`` ends the formula and lines without literals are
    skipped.

    Args:
        lines: DIMACS text, one line per item

    Returns:
        DimacsFormula with the clauses in file order

    Raises:
        DimacsFormatError: A clause line holds something other than integers
    """
    logger = get_logger()
    formula = DimacsFormula()

    for line_num, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line[0] == "c":
            continue

        if line[0] == "p":
            _parse_header(line, formula)
            continue

        if line[0] == "%":
            logger.debug(f"End-of-formula marker at line {line_num}")
            break

        clause = _parse_clause(line, line_num)
        if not clause:
            logger.debug(f"Skipping empty clause at line {line_num}")
            continue

        formula.clauses.append(clause)

    if formula.num_clauses is not None and formula.num_clauses != len(formula.clauses):
        logger.warning(
            f"DIMACS header declares {formula.num_clauses} clauses, "
            f"found {len(formula.clauses)}"
        )

    logger.debug(f"Parsed {len(formula.clauses)} DIMACS clauses")
    return formula


def read_dimacs(filepath: str) -> DimacsFormula:
    """Read and parse a DIMACS CNF file.

    Args:
        filepath: Path to the DIMACS file

    Returns:
        DimacsFormula with the file's clauses

    Raises:
        DimacsFormatError: File is missing, unreadable, malformed or empty
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise DimacsFormatError(f"DIMACS file not found: {filepath}")

    logger.debug(f"Reading DIMACS file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            formula = parse_dimacs(file)
    except OSError as e:
        raise DimacsFormatError(f"Cannot open DIMACS file: {filepath}: {e}")

    if not formula.clauses:
        raise DimacsFormatError(f"No clauses found in DIMACS file: {filepath}")

    return formula


def dimacs_to_formula(filepath: str) -> str:
    """Read a DIMACS file and render it as infix formula text."""
    logger = get_logger()
    formula = read_dimacs(filepath).to_formula()
    logger.debug("Successfully converted the DIMACS file to formula string.")
    return formula


def clauses_to_formula(clauses: Sequence[Sequence[int]]) -> str:
    """Render signed-integer clauses as ``(lit + lit) * (lit)`` text."""
    return " * ".join(
        "(" + " + ".join(_literal(lit) for lit in clause) + ")" for clause in clauses
    )


def _literal(lit: int) -> str:
    return f"~x{-lit}" if lit < 0 else f"x{lit}"


def _parse_header(line: str, formula: DimacsFormula) -> None:
    """Record the declared counts of a ``p cnf V C`` line when well formed."""
    parts = line.split()
    if len(parts) == 4 and parts[1] == "cnf":
        try:
            formula.num_variables = int(parts[2])
            formula.num_clauses = int(parts[3])
        except ValueError:
            get_logger().debug(f"Ignoring malformed DIMACS header: {line}")


def _parse_clause(line: str, line_num: int) -> List[int]:
    """Parse one clause line up to its terminating 0.

    Raises:
        DimacsFormatError: A field is not an integer
    """
    clause = []
    for field_str in line.split():
        try:
            lit = int(field_str)
        except ValueError:
            raise DimacsFormatError(
                f"Invalid literal '{field_str}' on line {line_num}"
            )
        if lit == 0:
            break
        clause.append(lit)
    return clause
