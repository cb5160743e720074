# parser/exceptions.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Custom exceptions for formula scanning and parsing

"""Domain-specific exceptions for propositional formula processing.

Errors are collected rather than raised one at a time: a scan or a parse
produces an ordered list of human-readable messages. The exceptions below
carry that list so callers that prefer exceptions over ``Result`` values
still see every diagnostic.
"""

from typing import Iterable, List, Union


class FormulaError(RuntimeError):
    """Base class for errors raised while turning text into a program.

    Attributes:
        errors: Ordered list of human-readable error messages
    """

    def __init__(self, errors: Union[str, Iterable[str]]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors: List[str] = list(errors)
        super().__init__("\n".join(self.errors))


class LexError(FormulaError):
    """Raised when the input contains malformed character sequences.

    Covers unknown characters, malformed multi-character operators and
    unrecognized identifiers.
    """

    pass


class ParseError(FormulaError):
    """Raised when a token sequence does not conform to the formula grammar.

    Inside the parser this signals the abort of a single statement and is
    always caught by the statement loop. It is only raised to callers by
    ``compile_program``, carrying every collected statement error.
    """

    pass
