# tests/conftest.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for LogicParser tests.

This module makes the project packages importable from the test tree and
provides formulas shared by several test modules.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Import the project packages before any test runs.

    An import failure errors the whole session instead of skipping it.

    Yields:
        None: Control to test execution
    """
    import logic_parser  # noqa: F401
    import evaluation  # noqa: F401
    import utils  # noqa: F401

    yield


@pytest.fixture
def sample_formulas():
    """Formulas covering every connective, nesting and precedence.

    Returns:
        List[str]: Well-formed infix formulas
    """
    return [
        "p",
        "~p",
        "p * q",
        "p + q",
        "p > q",
        "p > q > r",
        "~(p * q)",
        "~(p + q)",
        "~~p",
        "~(p > q)",
        "p + q * r",
        "(p + q) * r",
        "(a * b) + (c * d)",
        "~(p * (q + ~r))",
        "(p > q) * (q > r) > (p > r)",
        "x1 + ~x2 > x3 * ~(x1 + x3)",
    ]


@pytest.fixture
def dimacs_lines():
    """Small DIMACS document with a header and a comment.

    Returns:
        List[str]: DIMACS lines
    """
    return [
        "c example formula",
        "p cnf 2 2",
        "1 -2 0",
        "2 0",
    ]
