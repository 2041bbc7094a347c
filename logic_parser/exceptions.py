# logic_parser/exceptions.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Custom exceptions for formula parsing and transformation

"""Domain-specific exceptions for propositional formula processing.

This module defines exceptions that can be raised while turning formula
text into expression trees and while walking trees that are expected to
be in Conjunctive Normal Form.
"""


class ParseError(RuntimeError):
    """Exception raised when a formula cannot be turned into a tree.

    Base class for every failure of the parsing pipeline so callers can
    guard the whole text -> tokens -> prefix -> tree chain with one handler.
    """

    pass


class TreeBuildError(ParseError):
    """Raised when prefix tokens do not describe exactly one expression.

    Covers operators without enough operands, leftover operands and tokens
    that are neither atoms nor operators.
    """

    def __init__(self, reason: str = ""):
        message = "Tree could not be built! Check the input expression."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.reason = reason


class CNFStructureError(ParseError):
    """Raised when clause extraction meets a tree that is not in CNF."""

    pass
