# utils/table_format.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Plain-text rendering of truth tables for the command line

"""Plain-text rendering of truth tables.

Tables are laid out as aligned columns: one per variable, a ``||``
separator, then one per result (the formula for single-formula tables,
each statement name for programs).

Example:
    a | b || a & b
    --+---++------
    F | F || F
    ...
"""

from typing import List, Sequence

from logic.program import ProgramTable
from logic.truth_table import TruthTable


def _symbol(value: bool, binary: bool) -> str:
    if binary:
        return "1" if value else "0"
    return "T" if value else "F"


def _render(
    variables: Sequence[str],
    results: Sequence[str],
    rows: Sequence[Sequence[bool]],
    binary: bool,
) -> str:
    headers = list(variables) + list(results)
    widths = [max(len(h), 1) for h in headers]
    split = len(variables)

    def line(cells: List[str]) -> str:
        left = " | ".join(c.ljust(w) for c, w in zip(cells[:split], widths[:split]))
        right = " | ".join(c.ljust(w) for c, w in zip(cells[split:], widths[split:]))
        return f"{left} || {right}".strip() if left else right.rstrip()

    rule_left = "-+-".join("-" * w for w in widths[:split])
    rule_right = "-+-".join("-" * w for w in widths[split:])
    rule = f"{rule_left}-++-{rule_right}" if rule_left else rule_right

    lines = [line(headers), rule]
    for values in rows:
        lines.append(line([_symbol(v, binary) for v in values]))
    return "\n".join(lines)


def format_truth_table(table: TruthTable, label: str = "result", binary: bool = False) -> str:
    """Render a single-formula truth table.

    Args:
        table: Table to render
        label: Header of the result column, typically the formula text
        binary: Use ``1``/``0`` instead of ``T``/``F``

    Returns:
        Multi-line string without a trailing newline
    """
    rows = [
        [row.assignment[name] for name in table.variables] + [row.value]
        for row in table.rows
    ]
    return _render(table.variables, [label], rows, binary)


def format_program_table(table: ProgramTable, binary: bool = False) -> str:
    """Render a program's shared truth table with one column per formula."""
    rows = [
        [row.assignment[name] for name in table.variables]
        + [row.results[name] for name in table.names]
        for row in table.rows
    ]
    return _render(table.variables, table.names, rows, binary)
