# core/evaluator.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Tree evaluation under one variable assignment

"""Evaluates expression trees under a single variable assignment.

Besides the truth value of each tree, the evaluator records the value of every
Negation and Comparison node it visits, in depth-first post-order. That order
is the same one ``NameRenderer`` produces labels in, so recorded values line up
with the table's expression columns.
"""

from __future__ import annotations
from typing import List, Sequence

from parser import ast_nodes as ast


class Evaluator(ast.Visitor):
    """Visitor computing truth values for one assignment.

    Attributes:
        assignment: Truth value per variable id, owned by the caller
        recorded: Sub-expression values in traversal order
    """

    def __init__(self, assignment: Sequence[bool]):
        self.assignment = assignment
        self.recorded: List[bool] = []

    def evaluate(self, root: ast.Expr) -> bool:
        return root.accept(self)

    def visit_variable(self, n: ast.Variable) -> bool:
        return self.assignment[n.variable_id]

    def visit_boolean(self, n: ast.BooleanLiteral) -> bool:
        return n.value

    def visit_group(self, n: ast.Group) -> bool:
        return n.inner.accept(self)

    def visit_negation(self, n: ast.Negation) -> bool:
        # Runs of negations are unwound in a loop, innermost recorded first
        depth, operand = n.unwind()
        result = operand.accept(self)
        for _ in range(depth):
            result = not result
            self.recorded.append(result)
        return result

    def visit_comparison(self, n: ast.Comparison) -> bool:
        # Every operand is visited so its sub-values are always recorded
        values = [operand.accept(self) for operand in n.operands]
        result = combine(n.connective, values)
        self.recorded.append(result)
        return result


def combine(connective: ast.Connective, values: Sequence[bool]) -> bool:
    """Fold operand values of one flattened connective chain.

    AND and OR are true n-ary operations. CONDITIONAL and BICONDITIONAL fold
    from the left: ``a -> b -> c`` is ``(a -> b) -> c``.

    Args:
        connective: Connective of the chain
        values: Operand values in source order, at least two

    Returns:
        Truth value of the whole chain
    """
    if connective is ast.Connective.AND:
        return all(values)

    if connective is ast.Connective.OR:
        return any(values)

    if connective is ast.Connective.CONDITIONAL:
        acc = values[0]
        for value in values[1:]:
            acc = (not acc) or value
        return acc

    if connective is ast.Connective.BICONDITIONAL:
        acc = values[0]
        for value in values[1:]:
            acc = ((not acc) or value) and ((not value) or acc)
        return acc

    raise ValueError(f"Unknown connective: {connective}")
