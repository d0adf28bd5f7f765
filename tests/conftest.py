"""
Pytest configuration and fixtures for PyFastNoise test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker, doc in (
        ("importtest", "module import checks"),
        ("unit", "unit tests"),
        ("integration", "multi-module workflows"),
        ("slow", "tests sampling many thousands of points"),
    ):
        config.addinivalue_line("markers", f"{marker}: {doc}")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def reference_config():
    """Billow configuration of the reference regression scenario."""
    from pyfastnoise.noise import build_config
    return build_config(
        seed=42, octaves=4, lacunarity=2.0, gain=0.5, frequency=1.0,
        normalize=False, table_size=256,
    )


@pytest.fixture
def sample_points():
    """Provide reproducible random coordinates, including negative ones."""
    rng = np.random.RandomState(42)  # For reproducible tests
    return rng.uniform(-50.0, 50.0, size=(200, 3))


@pytest.fixture(params=["value", "gradient", "simplex"])
def noise_type(request):
    return request.param
