"""
Pytest configuration and fixtures for the storage and retrieval benchmark tests.

This file contains shared fixtures and configuration for all test modules.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Plots are only ever written to files in tests
os.environ.setdefault("MPLBACKEND", "Agg")

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for a single test."""
    temp_dir = tempfile.mkdtemp(prefix="hashsort_test_")
    yield Path(temp_dir)

    # Cleanup
    import shutil

    try:
        shutil.rmtree(temp_dir)
    except Exception:
        pass


@pytest.fixture
def sample_keys():
    """The keys of the capacity 7 quadratic probing walkthrough."""
    return [3, 10, 17]


@pytest.fixture
def write_ints(temp_dir):
    """Write integers to a text file in temp_dir, one per line, and return its path."""

    def _write(name, values):
        path = temp_dir / name
        path.write_text("".join(f"{value}\n" for value in values))
        return path

    return _write


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom collection modifiers
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark integration tests
        if "integration" in item.nodeid or "test_integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        # Mark slow tests (tests that might take longer)
        if any(keyword in item.nodeid for keyword in ["large", "stress"]):
            item.add_marker(pytest.mark.slow)

        # Mark unit tests (default for most tests)
        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# Pytest options
def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Setup for individual test runs."""
    # Skip slow tests unless --run-slow is passed
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
