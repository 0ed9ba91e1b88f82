"""
Pytest configuration and fixtures for fieldrules tests

This module provides shared fixtures for unit and integration tests.
"""
import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

from fieldrules.core.messages import MessageCatalog, set_messages
from fieldrules.core.rules import RuleRegistry
from fieldrules.core.validators import NativeFunctions


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single module"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that load rule files or run the CLI"
    )


# The autouse catalog reset runs once per test, not per generated example;
# no example mutates the catalog.
settings.register_profile(
    "fieldrules", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("fieldrules")


# =======================
# MESSAGE CATALOG FIXTURES
# =======================

@pytest.fixture(autouse=True)
def reset_message_catalog(monkeypatch):
    """
    Give every test the bundled English catalog

    Environment overrides from the developer's shell are removed so message
    assertions do not depend on FIELDRULES_LANGUAGE.
    """
    monkeypatch.delenv("FIELDRULES_LANGUAGE", raising=False)
    monkeypatch.delenv("FIELDRULES_MESSAGES", raising=False)
    set_messages(None)
    yield
    set_messages(None)


@pytest.fixture
def write_catalog(tmp_path):
    """
    Factory fixture writing a YAML message catalog

    Returns:
        Function taking YAML text and returning the file path
    """
    def _write(text: str, name: str = "messages.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def english_catalog() -> MessageCatalog:
    """Bundled catalog pinned to English"""
    catalog = MessageCatalog(language="en")
    set_messages(catalog)
    return catalog


# =======================
# RULE FIXTURES
# =======================

@pytest.fixture
def native_functions() -> NativeFunctions:
    return NativeFunctions()


@pytest.fixture
def registry(native_functions) -> RuleRegistry:
    """Fresh registry so tests can register rules without leaking state"""
    return RuleRegistry(native_functions)


@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")
