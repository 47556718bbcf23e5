"""
Pytest configuration and fixtures for the tower assembly tests.

This file contains shared fixtures and configuration for all test modules.
"""

import os
import sys
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Plots are rendered off-screen during tests
os.environ.setdefault("MPLBACKEND", "Agg")

from src.algorithms.ordering import fold_ascii  # noqa: E402
from src.data_structures.component import Component  # noqa: E402
from src.data_structures.component_collection import ComponentCollection  # noqa: E402


def make_collection(rows):
    """Build a collection from (name, type, priority) tuples."""
    return ComponentCollection(Component(name, type_, prio) for name, type_, prio in rows)


@pytest.fixture
def scenario_rows():
    """The three-component example used throughout the docs."""
    return [("Zeta", "core", 3), ("Alpha", "hull", 9), ("Mid", "core", 5)]


@pytest.fixture
def scenario_collection(scenario_rows):
    return make_collection(scenario_rows)


@pytest.fixture
def collection_factory():
    """Provide make_collection to tests without importing conftest."""
    return make_collection


@pytest.fixture
def fake_clock():
    """Return a factory for clocks that yield the given readings in order."""

    def factory(*readings):
        values = iter(readings)
        return lambda: next(values)

    return factory


@pytest.fixture
def reference_bubble_comparisons():
    """Independent re-implementation of the early-exit bubble sort count."""

    def count(names):
        keys = [fold_ascii(name) for name in names]
        n = len(keys)
        comparisons = 0
        for end in range(n - 1, 0, -1):
            swapped = False
            for i in range(end):
                comparisons += 1
                if keys[i] > keys[i + 1]:
                    keys[i], keys[i + 1] = keys[i + 1], keys[i]
                    swapped = True
            if not swapped:
                break
        return comparisons

    return count


@pytest.fixture
def scripted_input():
    """Build an input function that replays lines, then raises EOFError."""

    def factory(lines):
        remaining = iter(lines)

        def input_fn(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return input_fn

    return factory


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
        if "integration" in item.nodeid or "test_integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        if any(keyword in item.nodeid for keyword in ["stress", "benchmark_full"]):
            item.add_marker(pytest.mark.slow)

        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Skip slow tests unless --run-slow is passed."""
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
