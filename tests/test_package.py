"""Tests for the datavalidator package surface."""

import datavalidator


def test_import():
    """Test that the package can be imported."""
    assert datavalidator.__version__


def test_public_names_exist():
    """Every name in __all__ resolves."""
    for name in datavalidator.__all__:
        assert hasattr(datavalidator, name), name
