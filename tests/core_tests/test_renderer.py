# tests/core_tests/test_renderer.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Test suite for column label rendering

"""Test suite for column labels of recorded sub-expressions."""

import pytest
from core.renderer import NameRenderer, expression_label
from parser import compile_program


def labels(text: str) -> list:
    renderer = NameRenderer()
    for tree in compile_program(text).trees:
        renderer.render(tree)
    return renderer.names


class TestNameRenderer:
    """Test cases for label text and label order."""

    LABEL_CASES = [
        ("p -> q", ["(p ⇒ q)"]),
        ("p => q", ["(p ⇒ q)"]),
        ("p <-> q", ["(p ⇔ q)"]),
        ("p AND q AND r", ["(p ∧ q ∧ r)"]),
        ("p OR q", ["(p ∨ q)"]),
        ("!p", ["¬p"]),
        ("!!p", ["¬p", "¬¬p"]),
        ("p OR T", ["(p ∨ T)"]),
        ("!(p AND q)", ["(p ∧ q)", "¬((p ∧ q))"]),
        ("(p AND q) OR r", ["(p ∧ q)", "(((p ∧ q)) ∨ r)"]),
        ("!a AND (b OR c)", ["¬a", "(b ∨ c)", "(¬a ∧ ((b ∨ c)))"]),
        # Variables, literals and groups get no label of their own
        ("p", []),
        ("(p)", []),
        ("T", []),
    ]

    @pytest.mark.parametrize("text, expected", LABEL_CASES)
    def test_labels(self, text, expected):
        assert labels(text) == expected

    def test_labels_follow_statement_order(self):
        assert labels("!q\np AND q\n!p") == ["¬q", "(p ∧ q)", "¬p"]

    def test_long_negation_run(self):
        names = labels("!" * 2000 + "p")

        assert len(names) == 2000
        assert names[0] == "¬p"
        assert names[-1] == "¬" * 2000 + "p"

    def test_render_returns_root_label(self):
        tree = compile_program("a -> !b").trees[0]

        assert expression_label(tree) == "(a ⇒ ¬b)"
        assert expression_label(compile_program("(a)").trees[0]) == "(a)"
