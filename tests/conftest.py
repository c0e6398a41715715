# tests/conftest.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Veritas tests.

This module makes the project packages importable from the test tree and
provides the formulas and programs reused across test modules.
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
    """Verify the project packages import before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import parser
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def basic_formula():
    """Provide a two-variable formula.

    Returns:
        str: Conjunction of two variables
    """
    return "a & b"


@pytest.fixture
def complex_formula():
    """Provide a formula using every connective.

    Returns:
        str: Formula over p, q and r
    """
    return "!(p & q) <=> (!p | !q) => r"


@pytest.fixture
def sample_program():
    """Provide a two-statement program over a shared universe.

    Returns:
        str: Program text defining x and y
    """
    return "x = a & b; y = a | b;"
