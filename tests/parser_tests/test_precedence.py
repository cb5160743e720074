# tests/parser_tests/test_precedence.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Test suite for parser operator precedence and chain flattening

"""Test suite for operator precedence and associativity.

Operator precedence (highest to lowest):
1. () - parentheses for grouping
2. ! - negation (right-associative)
3. AND
4. OR
5. -> / =>
6. <-> / <=>

Runs of one binary connective are flattened into a single n-ary node.
"""

import pytest
from parser import compile_program
from parser.ast_nodes import Comparison, Connective, Group, Negation, Variable
from utils.logger import get_logger

a, b, c, d, e = (Variable(name, i) for i, name in enumerate("abcde"))


def AND(*ops):
    return Comparison(Connective.AND, ops)


def OR(*ops):
    return Comparison(Connective.OR, ops)


def IMP(*ops):
    return Comparison(Connective.CONDITIONAL, ops)


def IFF(*ops):
    return Comparison(Connective.BICONDITIONAL, ops)


class TestPrecedence:
    """Test cases for operator precedence and flattening."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    # Variables are always introduced in a, b, c, ... order so ids line up
    PRECEDENCE_TEST_CASES = [
        # AND binds tighter than OR
        ("a OR b AND c", OR(a, AND(b, c))),
        ("a AND b OR c", OR(AND(a, b), c)),
        ("a OR b AND c OR d", OR(a, AND(b, c), d)),
        # NOT binds tightest
        ("!a AND b", AND(Negation(a), b)),
        ("a OR !b AND c", OR(a, AND(Negation(b), c))),
        ("!!!a", Negation(Negation(Negation(a)))),
        # Implication and equivalence bind loosest
        ("a -> b OR c", IMP(a, OR(b, c))),
        ("a AND b -> c", IMP(AND(a, b), c)),
        ("a <-> b -> c", IFF(a, IMP(b, c))),
        ("a OR b -> c AND d <-> e", IFF(IMP(OR(a, b), AND(c, d)), e)),
        # Flattening of same-connective chains
        ("a AND b AND c", AND(a, b, c)),
        ("a OR b OR c OR d", OR(a, b, c, d)),
        ("a -> b -> c", IMP(a, b, c)),
        ("a => b -> c", IMP(a, b, c)),
        ("a <-> b <=> c", IFF(a, b, c)),
        # Parentheses stop flattening and override precedence
        ("(a AND b) AND c", AND(Group(AND(a, b)), c)),
        ("a AND (b AND c)", AND(a, Group(AND(b, c)))),
        ("(a OR b) AND c", AND(Group(OR(a, b)), c)),
        ("!(a OR b)", Negation(Group(OR(a, b)))),
        ("a -> (b -> c)", IMP(a, Group(IMP(b, c)))),
    ]

    @pytest.mark.parametrize("input_formula, expected_tree", PRECEDENCE_TEST_CASES)
    def test_operator_precedence_structure(self, input_formula, expected_tree):
        """Test that the parser builds trees respecting precedence.

        Args:
            input_formula: Formula string to parse
            expected_tree: Expected tree structure
        """
        actual = compile_program(input_formula).trees[0]

        self.logger.debug(f"Input: {input_formula}")
        self.logger.debug(f"Actual: {actual!r}")

        assert actual == expected_tree, (
            f"Precedence structure mismatch for: {input_formula}\n"
            f"Expected: {expected_tree!r}\n"
            f"Actual: {actual!r}"
        )

    def test_chain_is_single_node(self):
        tree = compile_program("a AND b AND c AND d").trees[0]

        assert isinstance(tree, Comparison)
        assert len(tree.operands) == 4
        assert all(isinstance(op, Variable) for op in tree.operands)

    def test_mixed_chain_is_not_flattened(self):
        tree = compile_program("a AND b OR c AND d").trees[0]

        assert tree.connective is Connective.OR
        assert [op.connective for op in tree.operands] == [Connective.AND, Connective.AND]
