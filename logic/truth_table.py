# logic/truth_table.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Exhaustive assignment enumeration and truth table construction

"""Truth table enumeration over a formula's free variables.

Variables are always taken in sorted order, which fixes both the column
order and the row order: the first variable is the most significant column
and ``False`` comes before ``True``. For ``{a, b}`` the rows are
``FF, FT, TF, TT``.

Tables grow as 2^n in the number of variables. Nothing here refuses large
inputs; front ends call ``check_variable_limit`` before tabulating.
"""

from dataclasses import dataclass
from enum import Enum, auto
from itertools import product
from types import MappingProxyType
from typing import Collection, Dict, Iterator, List, Tuple

from parser.ast_nodes import Expr
from .evaluator import Assignment, evaluate
from .exceptions import VariableLimitError
from .variables import free_variables
from utils.logger import get_logger


class Classification(Enum):
    """Semantic status of a formula across all of its assignments."""

    TAUTOLOGY = auto()
    CONTRADICTION = auto()
    CONTINGENT = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class TruthTableRow:
    """One assignment and the formula's value under it.

    The assignment is a read-only view, so rows cannot be altered after the
    table is built.
    """

    assignment: Assignment
    value: bool


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of one formula.

    Attributes:
        variables: Column order (sorted variable names)
        rows: One row per assignment, in enumeration order
    """

    variables: Tuple[str, ...]
    rows: Tuple[TruthTableRow, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    @property
    def classification(self) -> Classification:
        return _classify_values(row.value for row in self.rows)


def all_assignments(variables: Collection[str]) -> List[Dict[str, bool]]:
    """Build every total assignment over ``variables`` by iterative doubling.

    Starting from a single empty assignment, each variable (in sorted order)
    replaces every assignment with two extended copies, one binding the
    variable to ``False`` and one to ``True``, keeping relative order.

    Args:
        variables: Distinct variable names

    Returns:
        Exactly ``2 ** len(variables)`` distinct assignments; a single empty
        assignment when ``variables`` is empty
    """
    rows: List[Dict[str, bool]] = [{}]
    for name in sorted(variables):
        doubled = []
        for row in rows:
            for value in (False, True):
                extended = dict(row)
                extended[name] = value
                doubled.append(extended)
        rows = doubled
    return rows


def iter_assignments(variables: Collection[str]) -> Iterator[Dict[str, bool]]:
    """Lazily yield the same assignments as ``all_assignments``, same order.

    Only one row exists at a time, which suits summaries that may stop early.
    """
    names = sorted(variables)
    for values in product((False, True), repeat=len(names)):
        yield dict(zip(names, values))


def check_variable_limit(variables: Collection[str], limit: int) -> None:
    """Refuse variable sets whose table would exceed ``2 ** limit`` rows.

    Raises:
        VariableLimitError: When ``len(variables) > limit``
    """
    if len(variables) > limit:
        raise VariableLimitError(len(variables), limit)


def truth_table(expr: Expr) -> TruthTable:
    """Tabulate ``expr`` over all assignments to its free variables.

    Args:
        expr: Formula tree

    Returns:
        Table with one row per assignment, in enumeration order
    """
    variables = tuple(sorted(free_variables(expr)))
    rows = tuple(
        TruthTableRow(MappingProxyType(assignment), evaluate(expr, assignment))
        for assignment in all_assignments(variables)
    )

    get_logger().table_built(variables, len(rows))
    return TruthTable(variables, rows)


def classify(expr: Expr) -> Classification:
    """Decide whether ``expr`` is a tautology, a contradiction or contingent.

    Rows are generated lazily and the walk stops at the first row that
    differs from an earlier one.
    """
    def values() -> Iterator[bool]:
        for assignment in iter_assignments(free_variables(expr)):
            yield evaluate(expr, assignment)

    return _classify_values(values())


def is_tautology(expr: Expr) -> bool:
    return classify(expr) is Classification.TAUTOLOGY


def is_contradiction(expr: Expr) -> bool:
    return classify(expr) is Classification.CONTRADICTION


def is_satisfiable(expr: Expr) -> bool:
    return classify(expr) is not Classification.CONTRADICTION


def _classify_values(values) -> Classification:
    seen_true = seen_false = False
    for value in values:
        if value:
            seen_true = True
        else:
            seen_false = True
        if seen_true and seen_false:
            return Classification.CONTINGENT

    # At least one row always exists, even with no variables
    return Classification.TAUTOLOGY if seen_true else Classification.CONTRADICTION
