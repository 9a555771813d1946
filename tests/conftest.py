"""Shared fixtures for the test suite."""

import pytest

from pathsudoku.paths import default_universe


@pytest.fixture(scope="session")
def universe():
    """The full path universe, generated once per test session."""
    return default_universe()
