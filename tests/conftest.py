# tests/conftest.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tabula tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common formula fixtures
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Initialize test environment and verify module availability.

    Creates the global logger once, before any per-test output capture, and
    skips the session if the project packages cannot be imported.

    Yields:
        None: Control to test execution
    """
    try:
        import core
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    from utils.logger import get_logger

    get_logger()

    yield


@pytest.fixture
def implication_formula():
    """Single two-variable formula.

    Returns:
        str: Formula text
    """
    return "p -> q"


@pytest.fixture
def multi_line_formulas():
    """Three formulas sharing variables across lines.

    Returns:
        str: Formula text, one formula per line
    """
    return "p AND q\n!p OR r\n(p -> q) <-> r"
