# utils/table_format.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Plain-text rendering of truth tables and error lists

"""Plain-text presentation of pipeline output.

Tables are rendered as fixed-width text: a header line of column labels, a
rule line, then one line per row with each cell centered under its label.
"""

from typing import Iterable, List

from core.truth_table import TruthTable

COLUMN_SEPARATOR = " | "


def format_table(table: TruthTable, true_mark: str = "T", false_mark: str = "F") -> str:
    """Render a truth table as text.

    Args:
        table: Table to render
        true_mark: Cell text for true values
        false_mark: Cell text for false values

    Returns:
        Multi-line string, without a trailing newline
    """
    if not table.header:
        return ""

    cell_width = max(len(true_mark), len(false_mark))
    widths = [max(len(label), cell_width) for label in table.header]

    lines: List[str] = [
        COLUMN_SEPARATOR.join(label.center(w) for label, w in zip(table.header, widths)),
        "-+-".join("-" * w for w in widths),
    ]
    for row in table.rows:
        cells = (true_mark if value else false_mark for value in row)
        lines.append(
            COLUMN_SEPARATOR.join(cell.center(w) for cell, w in zip(cells, widths))
        )

    return "\n".join(line.rstrip() for line in lines)


def format_errors(errors: Iterable[str]) -> str:
    """Render error messages one per line."""
    return "\n".join(f"error: {message}" for message in errors)
