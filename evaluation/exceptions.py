# evaluation/exceptions.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Exceptions raised while evaluating expression trees


class EvaluationError(RuntimeError):
    """Exception raised when a tree cannot be evaluated."""

    pass


class UndefinedAtomError(EvaluationError, KeyError):
    """Raised when the assignment has no truth value for an atom.

    Attributes:
        atom: Name of the atom missing from the assignment
    """

    def __init__(self, atom: str):
        super().__init__(f"Undefined atom '{atom}': no truth value assigned")
        self.atom = atom

    def __str__(self) -> str:
        return self.args[0]
