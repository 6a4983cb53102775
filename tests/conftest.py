"""Pytest configuration and fixtures."""
from __future__ import annotations

import pytest

from clean_results import Error
from clean_results.shared.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Settings that do not depend on the environment."""
    return Settings(
        log_level="DEBUG",
        log_format="console",
        missing_error_event="no error supplied",
    )


@pytest.fixture
def use_test_settings(test_settings: Settings, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Route cached settings lookups to ``test_settings``."""
    monkeypatch.setattr("clean_results.shared.config.get_settings", lambda: test_settings)
    return test_settings


@pytest.fixture
def error() -> Error:
    """Plain error without metadata."""
    return Error("boom")


@pytest.fixture
def error_with_metadata() -> Error:
    """Error with positional placeholder arguments."""
    return Error.of("Order %s failed for %s", 42, "alice")
