# core/truth_table.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Exhaustive truth-table enumeration over a parsed program

"""Truth-table engine for parsed propositional programs.

The engine walks every assignment of the program's variables and evaluates
every statement under each one. Assignments are visited in a fixed order:
counting down from all-true to all-false in variable-id order, so for
variables ``p, q`` the rows are TT, TF, FT, FF.

Each row holds the variable values followed by the value of every Negation
and Comparison node of every statement, matching the header produced by the
label pass column for column.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from parser.program import Program
from utils.logger import get_logger
from .evaluator import Evaluator
from .renderer import NameRenderer


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of a program.

    Attributes:
        header: Column labels, variable names first
        rows: One row per assignment, each as long as ``header``
        variable_count: Number of leading variable columns
    """

    header: Tuple[str, ...]
    rows: Tuple[Tuple[bool, ...], ...]
    variable_count: int

    @property
    def variable_names(self) -> Tuple[str, ...]:
        return self.header[: self.variable_count]

    @property
    def expression_names(self) -> Tuple[str, ...]:
        return self.header[self.variable_count :]

    def column(self, name: str) -> Tuple[bool, ...]:
        """Return the values of the first column labelled ``name``.

        Raises:
            KeyError: No column has that label
        """
        try:
            index = self.header.index(name)
        except ValueError:
            raise KeyError(name) from None
        return tuple(row[index] for row in self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Tuple[bool, ...]]:
        return iter(self.rows)


class TruthTableEngine:
    """Enumerates every assignment of a program's variables.

    The assignment vector is a buffer owned by the engine and mutated in
    place between rows; rows are snapshots of it.
    """

    def __init__(self, program: Program):
        self.program = program
        self._assignment: List[bool] = []

    def run(self) -> TruthTable:
        """Build the full truth table.

        Returns:
            Header labels and one row per assignment (2^n rows for n variables)
        """
        header = self.label_columns()
        rows = list(self._rows())

        get_logger().table_built(len(rows), len(header))
        return TruthTable(
            header=tuple(header),
            rows=tuple(rows),
            variable_count=len(self.program.variables),
        )

    def label_columns(self) -> List[str]:
        """Label pass: variable names, then every recorded node's label."""
        renderer = NameRenderer()
        for tree in self.program.trees:
            renderer.render(tree)
        return list(self.program.variable_names) + renderer.names

    def _rows(self) -> Iterator[Tuple[bool, ...]]:
        self._assignment = [True] * len(self.program.variables)

        while True:
            evaluator = Evaluator(self._assignment)
            for tree in self.program.trees:
                evaluator.evaluate(tree)
            yield tuple(self._assignment) + tuple(evaluator.recorded)

            if not next_assignment(self._assignment):
                return


def next_assignment(assignment: List[bool]) -> bool:
    """Step an assignment one place down the enumeration order, in place.

    The rightmost true value becomes false and every value to its right
    becomes true, like decrementing a binary number.

    Args:
        assignment: Truth value per variable id

    Returns:
        False once the all-false assignment has been passed, True otherwise
    """
    i = len(assignment) - 1
    while i >= 0 and not assignment[i]:
        i -= 1

    if i < 0:
        return False

    assignment[i] = False
    for j in range(i + 1, len(assignment)):
        assignment[j] = True
    return True


def run(program: Program) -> TruthTable:
    """Build the truth table of a parsed program."""
    return TruthTableEngine(program).run()
