# parser/result.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Success-or-errors value returned by the pipeline stages

"""Result values for the scanning, parsing and evaluation stages.

Each stage either produces a complete value or a complete, ordered list of
error messages, never both. ``Result`` captures that choice without raising.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, Optional, Tuple, Type, TypeVar

from .exceptions import FormulaError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one pipeline stage.

    Attributes:
        value: Stage output, ``None`` on failure
        errors: Ordered error messages, empty on success
    """

    value: Optional[T] = None
    errors: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, errors) -> Result[T]:
        errors = tuple(errors)
        if not errors:
            raise ValueError("A failed result needs at least one error message")
        return cls(errors=errors)

    @property
    def success(self) -> bool:
        return not self.errors

    def unwrap(self, error_type: Type[FormulaError] = FormulaError) -> T:
        """Return the value or raise ``error_type`` carrying every error.

        Args:
            error_type: Exception class to raise on failure

        Returns:
            The successful stage value

        Raises:
            FormulaError: The result holds errors (concrete type per argument)
        """
        if self.errors:
            raise error_type(self.errors)
        return self.value
