"""Shared fixtures for ToolGate tests."""

import pytest

from toolgate.tools.base import clear_registry


@pytest.fixture
def diagnostics():
    """Diagnostics collected by the `sink` fixture."""
    return []


@pytest.fixture
def sink(diagnostics):
    """Diagnostic sink that records instead of logging."""
    return diagnostics.append


@pytest.fixture(autouse=True)
def empty_registry():
    """Each test starts and ends with no registered tools."""
    clear_registry()
    yield
    clear_registry()
