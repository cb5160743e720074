# core/renderer.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Human-readable column labels for expression trees

"""Builds the column labels of a truth table.

Labels use logic notation (``¬``, ``∧``, ``∨``, ``⇒``, ``⇔``). Every Comparison
is wrapped in parentheses so each label reads unambiguously on its own, e.g.
``(p ⇒ q)``. Group nodes add their own parentheses to the label, so
``!(p AND q)`` becomes ``¬((p ∧ q))``, but like variables and literals they
get no column of their own.
"""

from __future__ import annotations
from typing import List

from parser import ast_nodes as ast

NEGATION_SYMBOL = "¬"


class NameRenderer(ast.Visitor):
    """Visitor rendering node labels in evaluation order.

    ``render`` returns the label of a node; as a side effect the label of
    every Negation and Comparison is appended to ``names`` in the same
    depth-first post-order ``Evaluator`` records values in.

    Attributes:
        names: Collected labels of recorded nodes
    """

    def __init__(self):
        self.names: List[str] = []

    def render(self, root: ast.Expr) -> str:
        return root.accept(self)

    def visit_variable(self, n: ast.Variable) -> str:
        return n.name

    def visit_boolean(self, n: ast.BooleanLiteral) -> str:
        return "T" if n.value else "F"

    def visit_group(self, n: ast.Group) -> str:
        return f"({n.inner.accept(self)})"

    def visit_negation(self, n: ast.Negation) -> str:
        depth, operand = n.unwind()
        name = operand.accept(self)
        for _ in range(depth):
            name = NEGATION_SYMBOL + name
            self.names.append(name)
        return name

    def visit_comparison(self, n: ast.Comparison) -> str:
        parts = [operand.accept(self) for operand in n.operands]
        name = "(" + f" {n.connective.symbol} ".join(parts) + ")"
        self.names.append(name)
        return name


def expression_label(root: ast.Expr) -> str:
    """Return the label of a single tree without collecting sub-labels."""
    return NameRenderer().render(root)
