# parser/grammar.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Recursive-descent parser for multi-line propositional formulas

"""Recursive-descent parser building one expression tree per source line.

Grammar (lowest to highest precedence):

    program       := (statement NEW_LINE*)* END_OF_FILE
    statement     := biconditional
    biconditional := conditional (BICONDITIONAL conditional)*
    conditional   := or (CONDITIONAL or)*
    or            := and (OR and)*
    and           := unary (AND unary)*
    unary         := NOT unary | primary
    primary       := VARIABLE | TRUE_LITERAL | FALSE_LITERAL
                   | START_PAREN biconditional END_PAREN

Binary connectives are left-associative and every run of one connective is
flattened into a single n-ary Comparison node.

Error recovery works per statement: a syntax error abandons the current line,
records one message and skips ahead past the next NEW_LINE. Later lines are
still parsed and reported on, but any failure makes the whole parse fail.
A statement nested deeper than the interpreter can recurse fails the same
way, with an "Expression nested too deeply" message.
"""

from typing import Callable, List

from .ast_nodes import (
    BooleanLiteral,
    Comparison,
    Connective,
    Expr,
    Group,
    Negation,
    Variable,
)
from .exceptions import ParseError
from .lexer import Token, TokenType
from .program import Program, VariableTable
from .result import Result
from utils.logger import get_logger


class TokenParser:
    """Parses a scanned token sequence into a ``Program``.

    A parser instance consumes its tokens once; create a new one per input.

    Attributes:
        tokens: Token sequence ending with END_OF_FILE
        current: Index of the next unconsumed token
        variables: Variable table shared by every statement
        errors: One message per failed statement, in source order
    """

    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].kind is not TokenType.END_OF_FILE:
            tokens = list(tokens) + [Token(TokenType.END_OF_FILE)]
        self.tokens = tokens
        self.current = 0
        self.variables = VariableTable()
        self.errors: List[str] = []

    def parse(self) -> Result[Program]:
        """Parse every statement in the token sequence.

        Returns:
            Result holding the program, or every statement error if any
            statement failed
        """
        logger = get_logger()
        trees: List[Expr] = []

        self._skip_new_lines()
        while self._has_more():
            line = self._peek().line
            try:
                tree = self._statement()
                trees.append(tree)
                logger.statement_parsed(len(trees) - 1, tree)
            except ParseError as err:
                self._fail(err.errors[0], err.errors)
            except RecursionError:
                # Each group level costs several frames of descent
                message = f"Expression nested too deeply (line {line})"
                self._fail(message, [message])
            self._skip_new_lines()

        if self.errors:
            return Result.failure(self.errors)
        return Result.ok(Program(tuple(trees), self.variables))

    # Token stream helpers

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _advance(self) -> Token:
        token = self.tokens[self.current]
        if token.kind is not TokenType.END_OF_FILE:
            self.current += 1
        return token

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _has_more(self) -> bool:
        return self._peek().kind is not TokenType.END_OF_FILE

    def _match(self, kind: TokenType) -> bool:
        if self._peek().kind is kind and self._has_more():
            self.current += 1
            return True
        return False

    def _skip_new_lines(self) -> None:
        while self._match(TokenType.NEW_LINE):
            pass

    def _synchronize(self) -> None:
        """Skip the rest of a failed statement, including its NEW_LINE."""
        while self._has_more():
            if self._advance().kind is TokenType.NEW_LINE:
                return

    def _fail(self, summary: str, messages: List[str]) -> None:
        self.errors.extend(messages)
        get_logger().statement_failed(summary)
        self._synchronize()

    def _error(self, message: str) -> ParseError:
        return ParseError(f"{message} (line {self._peek().line})")

    # Grammar rules

    def _statement(self) -> Expr:
        expr = self._biconditional()

        token = self._peek()
        if token.kind not in (TokenType.NEW_LINE, TokenType.END_OF_FILE):
            raise self._error(f"Unexpected token {token} after expression")
        return expr

    def _biconditional(self) -> Expr:
        return self._chain(TokenType.BICONDITIONAL, Connective.BICONDITIONAL, self._conditional)

    def _conditional(self) -> Expr:
        return self._chain(TokenType.CONDITIONAL, Connective.CONDITIONAL, self._or)

    def _or(self) -> Expr:
        return self._chain(TokenType.OR, Connective.OR, self._and)

    def _and(self) -> Expr:
        return self._chain(TokenType.AND, Connective.AND, self._unary)

    def _chain(
        self, operator: TokenType, connective: Connective, operand: Callable[[], Expr]
    ) -> Expr:
        """Parse ``operand (operator operand)*`` as one flattened node."""
        operands = [operand()]
        while self._match(operator):
            operands.append(operand())

        if len(operands) == 1:
            return operands[0]
        return Comparison(connective, tuple(operands))

    def _unary(self) -> Expr:
        negations = 0
        while self._match(TokenType.NOT):
            negations += 1

        expr = self._primary()
        for _ in range(negations):
            expr = Negation(expr)
        return expr

    def _primary(self) -> Expr:
        if self._match(TokenType.VARIABLE):
            name = self._previous().lexeme
            return Variable(name, self.variables.id_for(name))

        if self._match(TokenType.TRUE_LITERAL):
            return BooleanLiteral(True)

        if self._match(TokenType.FALSE_LITERAL):
            return BooleanLiteral(False)

        if self._match(TokenType.START_PAREN):
            inner = self._biconditional()
            if not self._match(TokenType.END_PAREN):
                raise self._error("Expecting ')' to close group")
            return Group(inner)

        # Peek only, so recovery can consume the line break
        kind = self._peek().kind
        if kind is TokenType.NEW_LINE:
            raise self._error("Expecting token but reached end of line")
        if kind is TokenType.END_OF_FILE:
            raise self._error("Expecting token but reached end of file")

        raise self._error("Unexpected end of expression")


def parse(tokens: List[Token]) -> Result[Program]:
    """Parse a scanned token sequence.

    Args:
        tokens: Scanner output, ending with END_OF_FILE

    Returns:
        Result holding the program or one error message per failed statement
    """
    return TokenParser(tokens).parse()
