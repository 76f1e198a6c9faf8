"""Pytest configuration and shared fixtures for the mdtree test suite.

This module provides shared fixtures that build the per-pass objects
(tracker, engine, callback set) so unit tests can drive construct
callbacks directly, without going through the markdown parser.
"""

import pytest

from mdtree.callbacks import CallbackSet
from mdtree.options import ElementOptions
from mdtree.substitution import PlaceholderEngine
from mdtree.tracker import ElementTracker


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def tracker() -> ElementTracker:
    """Provide a fresh tracker for one pass."""
    return ElementTracker()


@pytest.fixture
def options() -> ElementOptions:
    """Provide default conversion options."""
    return ElementOptions()


@pytest.fixture
def engine(tracker: ElementTracker, options: ElementOptions) -> PlaceholderEngine:
    """Provide an engine bound to the ``tracker`` fixture."""
    return PlaceholderEngine(tracker, options)


@pytest.fixture
def callbacks(engine: PlaceholderEngine) -> CallbackSet:
    """Provide the default callback set bound to the ``engine`` fixture."""
    return CallbackSet(engine)


@pytest.fixture
def element_by_token(tracker: ElementTracker):
    """Return a helper mapping a placeholder token to its tracked element."""

    def lookup(token: str):
        return tracker.elements[int(token.strip("{}"))]

    return lookup
