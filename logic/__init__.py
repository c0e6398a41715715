# logic/__init__.py

"""Formula evaluation and truth table interface.

This package provides:
  • evaluate: truth value of a formula under one assignment
  • free_variables / variable_universe: variable collection
  • all_assignments / iter_assignments: exhaustive assignment enumeration
  • truth_table / classify: full tables and tautology checks
  • program_truth_table / evaluate_program: shared tables for named formulas
  • EvaluationError and its subclasses
"""

from .evaluator import evaluate
from .exceptions import (
    EvaluationError,
    UnboundVariableError,
    DuplicateFormulaError,
    VariableLimitError,
)
from .program import ProgramRow, ProgramTable, program_truth_table, evaluate_program
from .truth_table import (
    Classification,
    TruthTable,
    TruthTableRow,
    all_assignments,
    iter_assignments,
    check_variable_limit,
    truth_table,
    classify,
    is_tautology,
    is_contradiction,
    is_satisfiable,
)
from .variables import free_variables, variable_universe

__all__ = [
    "evaluate",
    "free_variables",
    "variable_universe",
    "all_assignments",
    "iter_assignments",
    "check_variable_limit",
    "truth_table",
    "classify",
    "is_tautology",
    "is_contradiction",
    "is_satisfiable",
    "program_truth_table",
    "evaluate_program",
    "Classification",
    "TruthTable",
    "TruthTableRow",
    "ProgramRow",
    "ProgramTable",
    "EvaluationError",
    "UnboundVariableError",
    "DuplicateFormulaError",
    "VariableLimitError",
]
