# parser/__init__.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Formula scanning and parsing components for propositional logic

"""Propositional formula scanning and parsing.

The parsing pipeline turns multi-line formula text into a ``Program``: one
expression tree per non-blank line plus the variable table shared by all
lines. Scanning and parsing each collect every error they find instead of
stopping at the first one.

Core Functions:
    scan: Converts text into a token sequence (returns a ``Result``)
    parse: Converts a token sequence into a ``Program`` (returns a ``Result``)
    compile_program: Runs both stages and raises on failure

Supported Syntax:
    - Variables: single lowercase letters
    - Constants: T, F
    - Connectives: ! (not), AND, OR, -> or => (implies), <-> or <=> (iff)
    - Parenthetical grouping
    - One formula per line

Example:
    >>> from parser import compile_program
    >>> program = compile_program("p -> q\\n!p OR q")
    >>> program.variable_names
    ('p', 'q')
"""

from .exceptions import FormulaError, LexError, ParseError
from .lexer import Scanner, Token, TokenType, scan
from .grammar import TokenParser, parse
from .program import Program, VariableTable
from .result import Result
from utils.logger import LogLevel, get_logger


def compile_program(source: str) -> Program:
    """Scan and parse formula text into a program.

    Lex errors stop the pipeline before parsing, so a caller sees either
    lex errors or syntax errors, never a mix of both.

    Args:
        source: Formula text, one formula per line

    Returns:
        Parsed program ready for truth-table evaluation

    Raises:
        LexError: The text contains malformed character sequences
        ParseError: One or more lines are not well-formed formulas
    """
    logger = get_logger()
    logger.debug("Compiling program: %r", source)

    tokens = scan(source).unwrap(LexError)
    if logger.is_enabled(LogLevel.DEBUG):
        logger.debug("Token stream: %s", " ".join(str(t) for t in tokens))

    program = parse(tokens).unwrap(ParseError)
    logger.debug(
        "Program compiled with %d statement(s) over variables %s",
        len(program),
        list(program.variable_names),
    )
    return program


__all__ = [
    "scan",
    "parse",
    "compile_program",
    "Scanner",
    "TokenParser",
    "Token",
    "TokenType",
    "Program",
    "VariableTable",
    "Result",
    "FormulaError",
    "LexError",
    "ParseError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula scanning and parsing components"
