# parser/lexer.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula text.

This module breaks raw formula text into a flat sequence of typed tokens for
the parser. Line boundaries are kept as explicit NEW_LINE tokens because each
source line is a separate statement. Scanning never stops at the first
problem: every malformed character sequence is reported, in source order.

Supported Tokens:
- Operators: !, ->, =>, <->, <=>, (, )
- Keywords: AND, OR, T, F (case-sensitive)
- Variables: any single lowercase letter
- Whitespace: spaces and carriage returns are ignored; any other character,
  tabs included, is reported as an unknown token
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Optional

from sly import Lexer

from .result import Result
from utils.logger import get_logger


class TokenType(Enum):
    """Kinds of token produced by the scanner."""

    VARIABLE = auto()
    AND = auto()
    OR = auto()
    NOT = auto()
    CONDITIONAL = auto()
    BICONDITIONAL = auto()
    TRUE_LITERAL = auto()
    FALSE_LITERAL = auto()
    START_PAREN = auto()
    END_PAREN = auto()
    NEW_LINE = auto()
    END_OF_FILE = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """Immutable scanned token.

    Attributes:
        kind: Token type
        lexeme: Variable name, only set for VARIABLE tokens
        line: 1-based source line, for diagnostics only
    """

    kind: TokenType
    lexeme: Optional[str] = None
    line: int = field(default=1, compare=False)

    def __str__(self) -> str:
        if self.lexeme is None:
            return self.kind.name
        return f"{self.kind.name}({self.lexeme})"


# Multi-letter words the scanner understands, used for spelling suggestions
KEYWORDS = ("AND", "OR")


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula text.

    Produces raw SLY tokens. Letter runs come out as WORD unless they are a
    reserved keyword; the ``Scanner`` decides whether a WORD is a variable.
    Malformed input is recorded in ``errors`` and skipped one character at a
    time so tokenization always reaches the end of the text.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        errors: Messages collected during the current tokenization
    """

    tokens = {
        "WORD",
        "TRUE_LITERAL",
        "FALSE_LITERAL",
        "AND",
        "OR",
        "NOT",
        "CONDITIONAL",
        "BICONDITIONAL",
        "START_PAREN",
        "END_PAREN",
        "NEW_LINE",
    }

    ignore = " \r"

    # Operator and punctuation tokens
    BICONDITIONAL = r"<[-=]>"
    CONDITIONAL = r"[-=]>"
    NOT = r"!"
    START_PAREN = r"\("
    END_PAREN = r"\)"

    # Letter runs are scanned greedily, keywords are remapped
    WORD = r"[A-Za-z]+"
    WORD["T"] = "TRUE_LITERAL"
    WORD["F"] = "FALSE_LITERAL"
    WORD["AND"] = "AND"
    WORD["OR"] = "OR"

    @_(r"\n")
    def NEW_LINE(self, t):
        self.lineno += 1
        return t

    def __init__(self):
        self.errors: List[str] = []

    def error(self, t):
        """Record an illegal character sequence and skip its first character.

        Args:
            t: SLY token whose value is the remaining, unmatched input
        """
        char = t.value[0]

        if char == "-":
            message = "Expecting > after -"
        elif char == "=":
            message = "Expecting > after ="
        elif char == "<":
            message = "Expecting -> or => after <"
        else:
            message = f"Unknown token: {char}"

        get_logger().debug("Lex error on line %d: %s", t.lineno, message)
        self.errors.append(message)
        self.index += 1


def suggest_keyword(word: str) -> Optional[str]:
    """Guess the keyword a mistyped word was meant to be.

    A word matches when its uppercase form equals a keyword, or equals a
    keyword with one pair of adjacent letters swapped ("RO" for "OR").

    Args:
        word: Unrecognized identifier

    Returns:
        The suggested keyword, or None
    """
    upper = word.upper()
    for keyword in KEYWORDS:
        if upper == keyword:
            return keyword
        if len(upper) == len(keyword) and upper in _transpositions(keyword):
            return keyword
    return None


def _transpositions(word: str) -> Iterator[str]:
    for i in range(len(word) - 1):
        yield word[:i] + word[i + 1] + word[i] + word[i + 2 :]


class Scanner:
    """Turns raw formula text into a flat token sequence.

    The token sequence always ends with an END_OF_FILE token. If any part of
    the text could not be scanned the whole scan fails and only the collected
    error messages are returned.
    """

    def __init__(self, text: str):
        self.text = text

    def scan(self) -> Result[List[Token]]:
        """Scan the whole text.

        Returns:
            Result holding the token list, or every lex error in source order
        """
        logger = get_logger()
        lexer = FormulaLexer()
        tokens: List[Token] = []

        for raw in lexer.tokenize(self.text):
            if raw.type == "WORD":
                token = self._classify_word(raw.value, raw.lineno, lexer.errors)
                if token is not None:
                    tokens.append(token)
            else:
                tokens.append(Token(TokenType[raw.type], line=raw.lineno))

        tokens.append(Token(TokenType.END_OF_FILE, line=self.text.count("\n") + 1))

        logger.scan_finished(len(tokens), len(lexer.errors))

        if lexer.errors:
            return Result.failure(lexer.errors)
        return Result.ok(tokens)

    @staticmethod
    def _classify_word(word: str, line: int, errors: List[str]) -> Optional[Token]:
        if len(word) == 1 and word.islower():
            return Token(TokenType.VARIABLE, word, line)

        message = f"Unknown identifier '{word}'"
        correction = suggest_keyword(word)
        if correction is not None:
            message += f". Did you mean '{correction}'?"

        get_logger().debug("Lex error on line %d: %s", line, message)
        errors.append(message)
        return None


def scan(text: str) -> Result[List[Token]]:
    """Scan formula text into tokens.

    Args:
        text: Raw formula text, one formula per line

    Returns:
        Result holding the token list or the lex error messages
    """
    return Scanner(text).scan()
