"""Tests for library settings."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from clean_results.shared.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default values."""
        monkeypatch.delenv("CLEAN_RESULTS_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"
        assert settings.log_file is None
        assert settings.missing_error_event == "<no error>"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test prefixed environment variables."""
        monkeypatch.setenv("CLEAN_RESULTS_LOG_LEVEL", "debug")
        monkeypatch.setenv("CLEAN_RESULTS_MISSING_ERROR_EVENT", "nothing to log")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.missing_error_event == "nothing to log"

    def test_invalid_log_format(self) -> None:
        """Test that unknown formats are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_format="xml")

    def test_empty_missing_error_event(self) -> None:
        """Test that the placeholder event cannot be empty."""
        with pytest.raises(ValidationError):
            Settings(missing_error_event="")

    def test_cached(self) -> None:
        """Test that settings are created once."""
        assert get_settings() is get_settings()
