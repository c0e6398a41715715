# logic/variables.py

"""
Free-variable collection over formula trees.
"""

from typing import FrozenSet, Iterable, Set, Tuple

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


class FreeVariableCollector:
    """Visitor accumulating every variable name reached from a root node."""

    def __init__(self):
        self.names: Set[str] = set()

    def visit_literal(self, n: Literal):
        pass

    def visit_variable(self, n: Variable):
        self.names.add(n.name)

    def visit_not(self, n: Not):
        n.operand.accept(self)

    def _visit_binary(self, n):
        n.left.accept(self)
        n.right.accept(self)

    def visit_and(self, n: And):
        self._visit_binary(n)

    def visit_or(self, n: Or):
        self._visit_binary(n)

    def visit_implies(self, n: Implies):
        self._visit_binary(n)

    def visit_equivalent(self, n: Equivalent):
        self._visit_binary(n)


def free_variables(expr: Expr) -> FrozenSet[str]:
    """Return the distinct variable names referenced by ``expr``."""
    collector = FreeVariableCollector()
    expr.accept(collector)
    return frozenset(collector.names)


def variable_universe(exprs: Iterable[Expr]) -> Tuple[str, ...]:
    """Return the sorted union of the free variables of several formulas.

    The sorted order is the column order used for truth tables.
    """
    collector = FreeVariableCollector()
    for expr in exprs:
        expr.accept(collector)
    return tuple(sorted(collector.names))
