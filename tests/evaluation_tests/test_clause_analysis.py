# tests/evaluation_tests/test_clause_analysis.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Test suite for clause extraction and tautology analysis

"""Test suite for clause extraction and per-clause tautology analysis."""

import pytest
from logic_parser import CNFStructureError, parse, parse_and_cnf
from evaluation import (
    analyze_cnf_validity,
    clause_literals,
    cnf_validity_report,
    collect_clauses,
    is_tautological_clause,
    negate_literal,
)
from utils.logger import get_logger


class TestClauseExtraction:
    """Test cases for collect_clauses()."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    CLAUSE_CASES = [
        ("p", [["p"]]),
        ("~p", [["~p"]]),
        ("p > q", [["~p", "q"]]),
        ("~(p * q)", [["~p", "~q"]]),
        ("p + ~p", [["p", "~p"]]),
        ("~(p + q)", [["~p"], ["~q"]]),
        ("(x1 + ~x2) * (x2)", [["x1", "~x2"], ["x2"]]),
        ("(p + q) * (r + s) * t", [["p", "q"], ["r", "s"], ["t"]]),
        ("p + (q + r)", [["p", "q", "r"]]),
        ("p + p", [["p", "p"]]),
        ("p + (q * r)", [["p", "q"], ["p", "r"]]),
    ]

    @pytest.mark.parametrize("formula, expected", CLAUSE_CASES)
    def test_collect_clauses(self, formula, expected):
        """Test clauses and literals come out in traversal order."""
        self.logger.debug(f"Collecting clauses of: {formula}")
        assert collect_clauses(parse_and_cnf(formula)) == expected

    def test_clause_literals_of_single_clause(self):
        assert clause_literals(parse("~a + b + ~c")) == ["~a", "b", "~c"]

    NON_CNF_CASES = [
        "p + (q * r)",
        "~(p + q)",
        "~~p",
        "p > q",
    ]

    @pytest.mark.parametrize("formula", NON_CNF_CASES)
    def test_non_cnf_tree_is_rejected(self, formula):
        with pytest.raises(CNFStructureError):
            collect_clauses(parse(formula))


class TestTautologyAnalysis:
    """Test cases for the clause tautology verdicts."""

    def test_negate_literal(self):
        assert negate_literal("p") == "~p"
        assert negate_literal("~p") == "p"

    TAUTOLOGY_CASES = [
        (["p", "~p"], True),
        (["~q", "q"], True),
        (["p", "q", "~p"], True),
        (["p", "p"], False),
        (["~p", "~p", "q"], False),
        (["p", "~q"], False),
        (["x1", "~x10"], False),
        ([], False),
    ]

    @pytest.mark.parametrize("clause, expected", TAUTOLOGY_CASES)
    def test_is_tautological_clause(self, clause, expected):
        assert is_tautological_clause(clause) is expected

    def test_counts_and_verdict(self):
        analysis = analyze_cnf_validity([["p", "~p"], ["q"], ["r", "~r", "s"]])

        assert analysis.clause_tautologies == (True, False, True)
        assert analysis.valid_count == 2
        assert analysis.invalid_count == 1
        assert analysis.is_tautology is False

    def test_all_tautological_clauses(self):
        analysis = analyze_cnf_validity([["p", "~p"], ["~q", "q"]])
        assert analysis.is_tautology is True
        assert (analysis.valid_count, analysis.invalid_count) == (2, 0)

    def test_empty_clause_list_is_vacuous_tautology(self):
        analysis = analyze_cnf_validity([])
        assert analysis.is_tautology is True
        assert (analysis.valid_count, analysis.invalid_count) == (0, 0)


class TestValidityReport:
    """Test cases for cnf_validity_report()."""

    def test_excluded_middle(self):
        report = cnf_validity_report(parse("p + ~p"))

        assert report.clauses == [["p", "~p"]]
        assert report.is_tautology is True
        assert report.valid_count == 1
        assert report.invalid_count == 0

    def test_implication(self):
        report = cnf_validity_report(parse("p > q"))

        assert report.cnf_infix == "((~p) + q)"
        assert report.clauses == [["~p", "q"]]
        assert report.is_tautology is False

    def test_distributed_tautology(self):
        """p > (q > p) is valid and every CNF clause shows it."""
        report = cnf_validity_report(parse("p > (q > p)"))
        assert report.is_tautology is True
        assert report.invalid_count == 0
