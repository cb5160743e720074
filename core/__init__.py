# core/__init__.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Core module public API for truth-table evaluation

"""Core components for propositional truth-table generation.

This module turns a parsed ``Program`` into a fully enumerated truth table.
Every assignment of the program's variables is visited in a fixed, reproducible
order, and the value of every compound sub-expression is recorded next to the
variable values, under a human-readable column label.

Primary Components:
    TruthTable: Header labels plus one boolean row per assignment
    TruthTableEngine: Label pass and bit-decrement enumeration pass
    Evaluator: Per-assignment tree evaluation recording sub-values
    NameRenderer: Column labels in evaluation order
    build_truth_table / evaluate_text: Text to table pipeline

Example:
    >>> from core import build_truth_table
    >>> table = build_truth_table("p -> q")
    >>> table.header
    ('p', 'q', '(p ⇒ q)')
"""

from .evaluator import Evaluator, combine
from .renderer import NameRenderer, expression_label
from .truth_table import TruthTable, TruthTableEngine, next_assignment, run
from .pipeline import build_truth_table, evaluate_text

__all__ = [
    "TruthTable",
    "TruthTableEngine",
    "Evaluator",
    "NameRenderer",
    "combine",
    "expression_label",
    "next_assignment",
    "run",
    "build_truth_table",
    "evaluate_text",
]

__version__ = "1.0.0"
__description__ = "Truth-table evaluation components"
