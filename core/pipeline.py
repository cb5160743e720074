# core/pipeline.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Text to truth-table pipeline

"""End-to-end pipeline from formula text to truth table.

Scanning, parsing and evaluation run in sequence; the first stage that fails
stops the pipeline. Callers get either the full table or the errors of exactly
one stage.
"""

from parser import FormulaError, compile_program
from parser.result import Result
from utils.logger import get_logger
from .truth_table import TruthTable, TruthTableEngine


def build_truth_table(text: str) -> TruthTable:
    """Compile formula text and enumerate its truth table.

    Args:
        text: Formula text, one formula per line

    Returns:
        The program's truth table

    Raises:
        LexError: The text contains malformed character sequences
        ParseError: One or more lines are not well-formed formulas
    """
    program = compile_program(text)
    return TruthTableEngine(program).run()


def evaluate_text(text: str) -> Result[TruthTable]:
    """Like ``build_truth_table`` but returns errors instead of raising.

    Args:
        text: Formula text, one formula per line

    Returns:
        Result holding the table, or the error messages of the failing stage
    """
    try:
        return Result.ok(build_truth_table(text))
    except FormulaError as e:
        get_logger().debug("%s: %d error(s)", type(e).__name__, len(e.errors))
        return Result.failure(e.errors)
    except RecursionError:
        # Labelling and evaluation walk groups recursively
        get_logger().debug("Truth table abandoned: expression nested too deeply")
        return Result.failure(["Expression nested too deeply"])
