# parser/program.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Parsed program and its shared variable table

"""Parsed program representation handed from the parser to the engine.

A program is the ordered list of statement trees of one multi-line input
plus the table mapping variable ids to names. The table is shared by every
statement, so ``p`` on line 1 and ``p`` on line 3 are the same variable.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from .ast_nodes import Expr


class VariableTable:
    """Assigns stable small-integer ids to variable names.

    Ids are handed out sequentially on first occurrence, starting from 0. The
    table lives for one parse/evaluate cycle and is never shared between
    programs.
    """

    def __init__(self):
        self._ids: Dict[str, int] = {}
        self._names: List[str] = []

    def id_for(self, name: str) -> int:
        """Return the id for ``name``, assigning the next one if it is new."""
        variable_id = self._ids.get(name)
        if variable_id is None:
            variable_id = len(self._names)
            self._ids[name] = variable_id
            self._names.append(name)
        return variable_id

    def name_of(self, variable_id: int) -> str:
        return self._names[variable_id]

    @property
    def names(self) -> Tuple[str, ...]:
        """Variable names in id order."""
        return tuple(self._names)

    def __contains__(self, name: str) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __repr__(self) -> str:
        return f"VariableTable({self._names!r})"


@dataclass(frozen=True)
class Program:
    """Successfully parsed multi-line input.

    Attributes:
        trees: One expression tree per non-blank source line, in order
        variables: Shared id to name table for every tree
    """

    trees: Tuple[Expr, ...]
    variables: VariableTable

    @property
    def variable_names(self) -> Tuple[str, ...]:
        return self.variables.names

    def __len__(self) -> int:
        return len(self.trees)
