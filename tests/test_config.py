"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from trace_migrator.config import LogLevel, Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.default_framework == "playwright"
        assert settings.default_language == "javascript"
        assert settings.trace_encoding == "utf-8"
        assert settings.log_level == LogLevel.INFO
        assert settings.log_json is False
        assert settings.smoke_test_url.startswith("https://www.selenium.dev/")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TRACE_MIGRATOR_DEFAULT_FRAMEWORK", "cypress")
        monkeypatch.setenv("TRACE_MIGRATOR_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TRACE_MIGRATOR_LOG_JSON", "true")
        settings = get_settings()
        assert settings.default_framework == "cypress"
        assert settings.log_level == LogLevel.DEBUG
        assert settings.log_json is True

    def test_unprefixed_variables_ignored(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_FRAMEWORK", "cypress")
        assert Settings().default_framework == "playwright"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("TRACE_MIGRATOR_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings()
