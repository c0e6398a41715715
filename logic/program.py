# logic/program.py

"""
Evaluation of named-formula programs over one shared truth table.

Every formula of a program is evaluated against the same rows, built over
the union of all free variables, so their result columns line up and can
be compared directly (for instance to check that two formulas are
equivalent).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

from parser import parse_program
from parser.ast_nodes import NamedFormula
from .evaluator import Assignment, evaluate
from .exceptions import DuplicateFormulaError
from .truth_table import all_assignments
from .variables import variable_universe
from utils.logger import get_logger


@dataclass(frozen=True)
class ProgramRow:
    """One shared assignment and each formula's value under it.

    Both mappings are read-only views.
    """

    assignment: Assignment
    results: Mapping[str, bool]


@dataclass(frozen=True)
class ProgramTable:
    """Synchronized truth table of every formula in a program.

    Attributes:
        variables: Sorted union of the formulas' free variables
        names: Formula names in source order
        rows: One row per assignment, in enumeration order
    """

    variables: Tuple[str, ...]
    names: Tuple[str, ...]
    rows: Tuple[ProgramRow, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def column(self, name: str) -> List[bool]:
        """Return the result column of formula ``name``.

        Raises:
            KeyError: No formula of that name
        """
        if name not in self.names:
            raise KeyError(name)
        return [row.results[name] for row in self.rows]

    def equivalent(self, first: str, second: str) -> bool:
        """Tell whether two formulas agree on every row."""
        return self.column(first) == self.column(second)


def program_truth_table(formulas: Sequence[NamedFormula]) -> ProgramTable:
    """Evaluate every named formula over the shared variable universe.

    Args:
        formulas: Parsed statements in source order

    Returns:
        Table whose rows carry one result per formula name

    Raises:
        DuplicateFormulaError: Two statements use the same name
    """
    logger = get_logger()

    names: List[str] = []
    for formula in formulas:
        if formula.name in names:
            raise DuplicateFormulaError(formula.name)
        names.append(formula.name)

    variables = variable_universe(f.expr for f in formulas)
    logger.debug(f"Program universe for {names}: {list(variables)}")

    rows = []
    for assignment in all_assignments(variables):
        results = {f.name: evaluate(f.expr, assignment) for f in formulas}
        rows.append(
            ProgramRow(MappingProxyType(assignment), MappingProxyType(results))
        )

    logger.table_built(variables, len(rows))
    return ProgramTable(variables, tuple(names), tuple(rows))


def evaluate_program(source: str) -> ProgramTable:
    """Parse program text and tabulate it in one step."""
    return program_truth_table(parse_program(source))
