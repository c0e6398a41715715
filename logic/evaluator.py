# logic/evaluator.py

"""
Evaluation of formula trees under a variable assignment.

Both operands of every binary connective are always evaluated; there is
no short circuit. Unbound variables are detected up front, before any
part of the tree is evaluated.
"""

from typing import Mapping

from parser.ast_nodes import (
    Expr,
    Literal,
    Variable,
    Not,
    And,
    Or,
    Implies,
    Equivalent,
)
from .exceptions import UnboundVariableError
from .variables import free_variables

Assignment = Mapping[str, bool]


class Evaluator:
    """Visitor computing the truth value of a tree for one assignment."""

    def __init__(self, assignment: Assignment):
        self.assignment = assignment

    def visit_literal(self, n: Literal) -> bool:
        return n.value

    def visit_variable(self, n: Variable) -> bool:
        try:
            return self.assignment[n.name]
        except KeyError:
            raise UnboundVariableError([n.name]) from None

    def visit_not(self, n: Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: And) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left and right

    def visit_or(self, n: Or) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left or right

    def visit_implies(self, n: Implies) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return (not left) or right

    def visit_equivalent(self, n: Equivalent) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left == right


def check_bound(expr: Expr, assignment: Assignment) -> None:
    """Raise UnboundVariableError unless every free variable of ``expr`` is bound.

    Args:
        expr: Formula about to be evaluated
        assignment: Candidate variable values

    Raises:
        UnboundVariableError: Listing every missing name
    """
    missing = [name for name in free_variables(expr) if name not in assignment]
    if missing:
        raise UnboundVariableError(missing)


def evaluate(expr: Expr, assignment: Assignment) -> bool:
    """Compute the truth value of ``expr`` under ``assignment``.

    Extra names in the assignment are ignored.

    Args:
        expr: Formula tree
        assignment: Mapping from variable name to truth value

    Returns:
        The formula's truth value

    Raises:
        UnboundVariableError: A free variable of ``expr`` has no value
    """
    check_bound(expr, assignment)
    return bool(expr.accept(Evaluator(assignment)))
