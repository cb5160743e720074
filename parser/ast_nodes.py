# parser/ast_nodes.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Expression tree node classes for propositional formula representation

"""Expression tree node classes for parsed propositional formulas.

This module defines the closed set of immutable node classes the parser
builds, one tree per source line.

Node Types:
    Variable: Single lowercase letter with a program-wide variable id
    BooleanLiteral: The constants T and F
    Negation: Logical NOT of one child
    Comparison: n-ary AND, OR, CONDITIONAL or BICONDITIONAL
    Group: Explicit parentheses around one child

Chains of the same binary connective are flattened into one Comparison, so
``a AND b AND c`` is a single three-operand node. Groups carry no meaning of
their own but are kept so trees re-render the way they were written.

All nodes support the visitor design pattern for traversal.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Tuple


class Connective(Enum):
    """Binary connectives, in ascending precedence order of the grammar.

    The value of each member is the symbol used in column labels.
    """

    BICONDITIONAL = "⇔"
    CONDITIONAL = "⇒"
    OR = "∨"
    AND = "∧"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def keyword(self) -> str:
        """ASCII spelling accepted by the scanner."""
        return _KEYWORDS[self]


_KEYWORDS = {
    Connective.BICONDITIONAL: "<->",
    Connective.CONDITIONAL: "->",
    Connective.OR: "OR",
    Connective.AND: "AND",
}


class Visitor(Protocol):
    """Interface for tree visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each node type.
    """

    def visit_variable(self, n: Variable): ...

    def visit_boolean(self, n: BooleanLiteral): ...

    def visit_negation(self, n: Negation): ...

    def visit_comparison(self, n: Comparison): ...

    def visit_group(self, n: Group): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all expression tree nodes.

    Concrete node types implement ``accept`` for visitor dispatch and
    ``__str__`` for re-rendering in the scanner's ASCII syntax.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable.

    Attributes:
        name: Single lowercase letter
        variable_id: Index of the variable in the program's variable table
    """

    name: str
    variable_id: int

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class BooleanLiteral(Expr):
    """Constant truth value, written ``T`` or ``F``.

    Attributes:
        value: The fixed truth value
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_boolean(self)

    def __str__(self) -> str:
        return "T" if self.value else "F"


@dataclass(frozen=True, slots=True)
class Negation(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_negation(self)

    def unwind(self) -> Tuple[int, Expr]:
        """Return the length of this run of negations and the operand under it."""
        depth, operand = 1, self.operand
        while isinstance(operand, Negation):
            depth, operand = depth + 1, operand.operand
        return depth, operand

    def __str__(self) -> str:
        depth, operand = self.unwind()
        return "!" * depth + str(operand)


@dataclass(frozen=True, slots=True)
class Comparison(Expr):
    """Flattened chain of one binary connective.

    Attributes:
        connective: The connective joining every operand
        operands: Two or more operands, in source order
    """

    connective: Connective
    operands: Tuple[Expr, ...]

    def __post_init__(self):
        if len(self.operands) < 2:
            raise ValueError(
                f"{self.connective.name} needs at least two operands, "
                f"got {len(self.operands)}"
            )

    def accept(self, v: Visitor):
        return v.visit_comparison(self)

    def __str__(self) -> str:
        joiner = f" {self.connective.keyword} "
        return joiner.join(str(operand) for operand in self.operands)


@dataclass(frozen=True, slots=True)
class Group(Expr):
    """Parenthesized sub-expression.

    Attributes:
        inner: The expression written inside the parentheses
    """

    inner: Expr

    def accept(self, v: Visitor):
        return v.visit_group(self)

    def __str__(self) -> str:
        return f"({self.inner})"
