# tests/parser_tests/test_parse_errors.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Test suite for parser syntax validation and error recovery

"""Test suite for parser syntax validation and error recovery.

This module tests that malformed lines are rejected with one message each,
that recovery resumes at the next line, and that a program with any failed
line yields only errors.
"""

import pytest
from parser import compile_program, parse, scan, LexError, ParseError
from utils.logger import get_logger


def parse_text(text: str):
    tokens = scan(text)
    assert tokens.success, f"Unexpected lex errors: {tokens.errors}"
    return parse(tokens.value)


class TestParseErrors:
    """Test cases for syntax error messages."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    SYNTAX_ERROR_CASES = [
        # Dangling operators
        ("a AND", "Expecting token but reached end of file (line 1)"),
        ("a AND\n", "Expecting token but reached end of line (line 1)"),
        ("!", "Expecting token but reached end of file (line 1)"),
        ("a ->", "Expecting token but reached end of file (line 1)"),
        # Unterminated groups
        ("(a OR b", "Expecting ')' to close group (line 1)"),
        ("((a)", "Expecting ')' to close group (line 1)"),
        ("(a OR b\nc", "Expecting ')' to close group (line 1)"),
        # Malformed primaries
        (")", "Unexpected end of expression (line 1)"),
        ("()", "Unexpected end of expression (line 1)"),
        ("a AND OR b", "Unexpected end of expression (line 1)"),
        ("AND a", "Unexpected end of expression (line 1)"),
        # Trailing tokens
        ("a b", "Unexpected token VARIABLE(b) after expression (line 1)"),
        ("a)", "Unexpected token END_PAREN after expression (line 1)"),
        ("(a) (b)", "Unexpected token START_PAREN after expression (line 1)"),
        ("a !b", "Unexpected token NOT after expression (line 1)"),
    ]

    @pytest.mark.parametrize("invalid_input, expected_message", SYNTAX_ERROR_CASES)
    def test_syntax_error_message(self, invalid_input, expected_message):
        result = parse_text(invalid_input)

        self.logger.debug(f"Errors for {invalid_input!r}: {result.errors}")
        assert not result.success
        assert result.value is None
        assert list(result.errors) == [expected_message]

    def test_compile_program_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            compile_program("a AND")

        assert exc_info.value.errors == [
            "Expecting token but reached end of file (line 1)"
        ]
        assert "end of file" in str(exc_info.value)

    def test_lex_errors_stop_before_parsing(self):
        with pytest.raises(LexError) as exc_info:
            compile_program("a AND\n$")

        assert exc_info.value.errors == ["Unknown token: $"]


class TestErrorRecovery:
    """Test cases for line-level resynchronization."""

    def test_one_error_per_failed_line(self):
        result = parse_text("a AND OR OR b")

        assert len(result.errors) == 1

    def test_bad_line_does_not_hide_later_errors(self):
        result = parse_text("a AND\nb OR\nc")

        assert list(result.errors) == [
            "Expecting token but reached end of line (line 1)",
            "Expecting token but reached end of line (line 2)",
        ]

    def test_recovery_skips_rest_of_line(self):
        result = parse_text("a b c\nd AND")

        assert list(result.errors) == [
            "Unexpected token VARIABLE(b) after expression (line 1)",
            "Expecting token but reached end of file (line 2)",
        ]

    def test_error_after_valid_lines(self):
        result = parse_text("p\nq\n(r")

        assert list(result.errors) == ["Expecting ')' to close group (line 3)"]

    def test_valid_lines_discarded_when_any_line_fails(self):
        result = parse_text("a AND\nb OR c")

        assert not result.success
        assert result.value is None
        assert len(result.errors) == 1

    def test_blank_lines_between_failures(self):
        result = parse_text("a ->\n\n\n-> b")

        assert list(result.errors) == [
            "Expecting token but reached end of line (line 1)",
            "Unexpected end of expression (line 4)",
        ]

    def test_deep_nesting_fails_its_statement(self):
        depth = 500
        result = parse_text("(" * depth + "a" + ")" * depth)

        assert list(result.errors) == ["Expression nested too deeply (line 1)"]

    def test_recovery_after_deep_nesting(self):
        deep = "(" * 500 + "a" + ")" * 500
        result = parse_text(f"p\n{deep}\nq AND")

        assert list(result.errors) == [
            "Expression nested too deeply (line 2)",
            "Expecting token but reached end of file (line 3)",
        ]

    def test_moderate_nesting_parses(self):
        depth = 30
        result = parse_text("(" * depth + "a OR b" + ")" * depth)

        assert result.success
        assert str(result.value.trees[0]) == "(" * depth + "a OR b" + ")" * depth
