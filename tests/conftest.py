"""Pytest configuration and shared fixtures for the textdelta test suite.

This module provides shared fixtures, test configuration, and the Hypothesis
profiles used by the property-based tests.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

from textdelta.render.styles import Styles

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


def _tag(name: str):
    def apply(text: str) -> str:
        return f"[{name}:{text}]"

    return apply


@pytest.fixture
def marker_styles() -> Styles:
    """Provide styles that wrap text in visible ``[X:...]`` markers.

    Returns
    -------
    Styles
        Styles whose output shows exactly which formatter touched which text.

    """
    return Styles(
        removed=_tag("R"),
        added=_tag("A"),
        removed_emph=_tag("RE"),
        added_emph=_tag("AE"),
        line_num=_tag("N"),
        separator=_tag("S"),
        plain=_tag("P"),
    )


@pytest.fixture
def plain_styles() -> Styles:
    """Provide identity styles (no color)."""
    return Styles.no_color()


ENV_VARS = (
    "FORCE_COLOR",
    "NO_COLOR",
    "TEXTDELTA_CONTEXT",
    "TEXTDELTA_LAYOUT",
    "TEXTDELTA_WIDTH",
    "TEXTDELTA_COLOR",
    "TEXTDELTA_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove color and TEXTDELTA_* environment variables for the test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_package_logger():
    """Restore the textdelta logger's handlers, level and propagation after the test."""
    package_logger = logging.getLogger("textdelta")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def json_record_old() -> str:
    """Provide the original JSON record used by layout tests."""
    return """{
  "name": "Alice",
  "age": 30,
  "email": "alice@example.com"
}"""


@pytest.fixture
def json_record_new() -> str:
    """Provide the modified JSON record used by layout tests."""
    return """{
  "name": "Bob",
  "age": 31,
  "email": "bob@example.com"
}"""
