#!/usr/bin/env python3
# run_logic.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Command-line interface for formula parsing, evaluation and CNF analysis

import sys
import argparse
from pathlib import Path
from typing import Callable, Dict, List, Optional

from logic_parser import (
    build_tree,
    format_prefix,
    infix_to_prefix,
    to_infix,
    tree_height,
)
from logic_parser.ast_nodes import Expr
from logic_parser.exceptions import ParseError
from evaluation import (
    UndefinedAtomError,
    cnf_validity_report,
    evaluate,
    generate_truth_table,
)
from utils.dimacs_reader import DimacsFormatError, dimacs_to_formula
from utils.logger import configure_logging, get_logger

InputFn = Callable[[str], str]

STOP_WORD = "STOP"


def parse_assignment_option(option: str) -> tuple:
    """Parse a ``NAME=VALUE`` assignment flag.

    Accepted values are 0/1, true/false, t/f, yes/no (case insensitive).

    Raises:
        ValueError: The option is not of the form NAME=VALUE
    """
    name, sep, raw_value = option.partition("=")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"Assignment must look like NAME=0 or NAME=1: {option!r}")
    return name, _parse_truth_value(raw_value)


def _parse_truth_value(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "t", "yes", "y"):
        return True
    if value in ("0", "false", "f", "no", "n"):
        return False
    raise ValueError(f"Invalid truth value {raw!r}; use 0 for FALSE or 1 for TRUE")


def read_expression(
    args: argparse.Namespace, input_fn: Optional[InputFn]
) -> str:
    """Obtain the formula text from flags, a prompt or the DIMACS file.

    Raises:
        DimacsFormatError: The DIMACS fallback cannot be loaded
        ValueError: No expression is available at all
    """
    logger = get_logger()

    expression = args.expression
    if expression is None and input_fn is not None and args.dimacs is None:
        expression = input_fn(
            "Enter the infix logical expression (or leave blank to use CNF file): "
        )

    if expression and expression.strip():
        logger.task_header("Using User-Entered Expression")
        logger.result("Expression", expression)
        return expression

    if args.dimacs is None:
        raise ValueError("No expression entered and no DIMACS file given (--dimacs)")

    logger.info("\nNo custom expression entered. Reading from CNF file...")
    formula = dimacs_to_formula(str(args.dimacs))
    logger.info("Successfully converted the DIMACS file to formula string.")
    logger.task_header("DIMACS Conversion")
    logger.result("Formula from CNF", formula)
    return formula


def prompt_assignment(input_fn: InputFn) -> Dict[str, bool]:
    """Collect atom values interactively until the user types STOP."""
    logger = get_logger()
    assignment: Dict[str, bool] = {}

    while True:
        atom = input_fn(
            f"Enter atom name (e.g., x1, p, y22) or {STOP_WORD} to end: "
        ).strip()
        if atom == STOP_WORD:
            break
        if not atom:
            continue

        raw_value = input_fn(
            f"Enter truth value for {atom} (0 for FALSE, 1 for TRUE): "
        )
        if raw_value.strip() not in ("0", "1"):
            logger.error("Invalid input. Please enter 0 or 1.")
            continue

        assignment[atom] = raw_value.strip() == "1"

    return assignment


def run_evaluation(root: Expr, assignment: Dict[str, bool]) -> Optional[bool]:
    """Evaluate the tree and log the outcome; None when it cannot be evaluated."""
    logger = get_logger()

    if not assignment:
        logger.info("No variables assigned. Skipping evaluation.")
        return None

    try:
        result = evaluate(root, assignment)
    except UndefinedAtomError as e:
        logger.error(f"Evaluation failed: {e}")
        return None

    logger.info("\nEvaluation Result:")
    logger.info(f"The formula evaluates to {'TRUE' if result else 'FALSE'}.")
    return result


def wants_truth_table(args: argparse.Namespace, input_fn: Optional[InputFn]) -> bool:
    """Decide from the flags, or by asking, whether to print the truth table."""
    if args.truth_table is not None:
        return args.truth_table
    if input_fn is None:
        return False
    choice = input_fn(
        "Do you want to generate a full truth table for this formula? (y/n): "
    )
    return choice.strip().lower().startswith("y")


def process_formula(
    expression: str,
    args: argparse.Namespace,
    input_fn: Optional[InputFn],
) -> Expr:
    """Run every task of the session on one formula.

    Returns:
        The parsed expression tree

    Raises:
        ParseError: The tree could not be built
    """
    logger = get_logger()

    # Task 1: infix -> prefix
    prefix_tokens = infix_to_prefix(expression)
    logger.task_header("Task 1: Prefix Conversion")
    logger.result("Infix", expression)
    logger.result("Prefix", format_prefix(prefix_tokens))

    # Task 2: prefix -> tree
    logger.task_header("Task 2: Parse Tree Building")
    root = build_tree(prefix_tokens)
    logger.info("Parse Tree built successfully!")

    # Task 3: tree -> infix
    logger.task_header("Task 3: Tree to Infix Conversion")
    logger.result("In-order (Infix form)", to_infix(root))

    # Task 4: height
    logger.task_header("Task 4: Tree Height")
    logger.result("Tree Height", tree_height(root))

    # Task 5: evaluation
    logger.task_header("Task 5: Formula Evaluation")
    assignment = dict(args.assign or [])
    if not assignment and input_fn is not None:
        assignment = prompt_assignment(input_fn)
    run_evaluation(root, assignment)

    # Truth table
    logger.task_header("Truth Table Generation")
    if wants_truth_table(args, input_fn):
        logger.task_header("Truth Table")
        logger.info(generate_truth_table(root).render())

    # Task 6 & 7: CNF conversion and clause validity
    logger.task_header("Task 6 & 7: CNF Conversion and Clause Validity")
    report = cnf_validity_report(root)
    logger.result("\nCNF Form of Formula", report.cnf_infix)
    logger.validity_summary(
        report.valid_count, report.invalid_count, report.is_tautology
    )

    return root


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Propositional logic parser, evaluator and CNF converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_logic.py
  python run_logic.py -e "p > q" -a p=1 -a q=0 --truth-table
  python run_logic.py -d formula.cnf --non-interactive
  python run_logic.py -e "~(p * q)" --non-interactive --debug

Formula syntax:
  atoms    letters, digits and underscores (p, x1, ready_2)
  ~        NOT
  *        AND
  +        OR
  >        IMPLIES (groups to the left, like * and +)
        """,
    )

    parser.add_argument(
        "-e", "--expression", help="Infix formula to process (prompted for if omitted)"
    )

    parser.add_argument(
        "-d", "--dimacs", type=Path, help="DIMACS CNF file used when no expression is given"
    )

    parser.add_argument(
        "-a",
        "--assign",
        action="append",
        type=parse_assignment_option,
        metavar="NAME=VALUE",
        help="Truth value for an atom (repeatable), e.g. -a p=1 -a q=0",
    )

    table_group = parser.add_mutually_exclusive_group()
    table_group.add_argument(
        "--truth-table",
        dest="truth_table",
        action="store_true",
        default=None,
        help="Print the full truth table",
    )
    table_group.add_argument(
        "--no-truth-table",
        dest="truth_table",
        action="store_false",
        help="Do not print the truth table",
    )

    parser.add_argument(
        "--non-interactive",
        action="store_true",
        help="Never prompt; use only the command line options",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=20000,
        help="Interpreter recursion limit for deeply nested formulas (default: 20000)",
    )

    return parser


def main(argv: Optional[List[str]] = None, input_fn: Optional[InputFn] = input) -> int:
    """Main entry point for the logic session.

    Args:
        argv: Command line arguments (defaults to sys.argv)
        input_fn: Prompt function; ignored with --non-interactive

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.non_interactive:
        input_fn = None

    logger = get_logger()

    try:
        configure_logging(debug=args.debug)

        if args.recursion_limit > sys.getrecursionlimit():
            sys.setrecursionlimit(args.recursion_limit)

        expression = read_expression(args, input_fn)
        process_formula(expression, args, input_fn)
        return 0

    except DimacsFormatError as e:
        logger.error(f"Error: CNF file could not be loaded. {e}")
        return 1

    except ParseError as e:
        logger.error(str(e))
        return 2

    except (ValueError, EOFError) as e:
        logger.error(f"Input error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Session interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
