# logic/exceptions.py

"""
Errors raised while evaluating formulas and tabulating programs.
All of them derive from EvaluationError so a front end can report any
evaluation failure with a single handler.
"""

from typing import Iterable


class EvaluationError(RuntimeError):
    """Base class for evaluation failures."""
    pass


class UnboundVariableError(EvaluationError):
    """A formula mentions variables the assignment does not bind.

    Attributes:
        missing: Sorted names of the unbound variables
    """

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(sorted(missing))
        super().__init__(f"No value bound for variable(s): {', '.join(self.missing)}")


class DuplicateFormulaError(EvaluationError):
    """Two statements in one program share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Formula name '{name}' is defined more than once")


class VariableLimitError(EvaluationError):
    """A variable set is too large to tabulate under the configured limit."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"{count} variables exceed the limit of {limit} "
            f"(a full table would have {2 ** count} rows)"
        )
