"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def seed():
    """Fixed seed for key sampling in tests."""
    return 42
