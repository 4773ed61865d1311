"""Configuration management for the Selenium trace migrator."""

from enum import Enum
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRACE_MIGRATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Conversion defaults
    default_framework: str = Field("playwright", description="Framework used when none is requested")
    default_language: str = Field("javascript", description="Language used when none is requested")
    trace_encoding: str = Field("utf-8", description="Text encoding of uploaded trace files")

    # Generated smoke suite
    smoke_test_url: str = Field(
        "https://www.selenium.dev/selenium/web/web-form.html",
        description="Page exercised by the fixed smoke tests appended to every conversion"
    )

    # Logging
    log_level: LogLevel = Field(LogLevel.INFO, description="Minimum log level")
    log_json: bool = Field(False, description="Render logs as JSON instead of console output")


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
