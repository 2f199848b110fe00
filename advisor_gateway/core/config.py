"""Application configuration using Pydantic Settings.

Configuration is environment-aware:
- APP_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each environment has its own .env.{environment} file
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_ENV = os.getenv("APP_ENV", "development")

# Project root (so .env resolution doesn't depend on current working directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

_env_filename = ENV_FILE_MAP.get(APP_ENV, ".env.development")
_env_path = PROJECT_ROOT / _env_filename

# Production may inject everything via env vars only
_env_file = str(_env_path) if _env_path.is_file() else None


# Nested BaseSettings don't inherit env_file, so populate os.environ up front
if _env_file:
    from dotenv import load_dotenv
    load_dotenv(_env_file, override=True)


class LLMSettings(BaseSettings):
    """LLM provider configuration used by the advisor endpoint."""

    provider: str = Field(
        "openai",
        description="LLM provider name (only 'openai' is supported)",
    )
    model: str = Field(
        "gpt-4",
        description="Model name used for financial questions",
    )
    api_key: str | None = Field(
        None,
        description="API key for the provider (required for OpenAI)",
    )
    base_url: str | None = Field(
        None,
        description="Custom API endpoint for OpenAI-compatible servers",
    )
    timeout_seconds: float = Field(
        45.0,
        description="Request timeout in seconds",
    )
    temperature: float = Field(
        0.7,
        description="Sampling temperature for advisor answers",
    )
    max_tokens: int = Field(
        800,
        description="Upper bound on tokens generated per answer",
        ge=1,
    )

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        case_sensitive=False,
    )


class AppSettings(BaseSettings):
    """Application-wide configuration."""

    debug: bool = Field(
        False,
        description="Force DEBUG log level regardless of LOG_LEVEL",
    )
    version: str = Field(
        "1.0.0",
        description="Version reported by the health endpoint",
    )

    rate_limit_enabled: bool = Field(
        True,
        description="Enable per-client request throttling",
    )
    rate_limit_backend: str = Field(
        "memory",
        description="Throttle store backend (only 'memory' ships; it is per-process)",
    )
    rate_limit_max_requests: int = Field(
        500,
        description="Maximum number of requests allowed per window (per client)",
        ge=1,
    )
    rate_limit_window_ms: int = Field(
        900_000,
        description="Fixed window length in milliseconds",
        ge=1,
    )
    rate_limit_sweep_interval_ms: int = Field(
        60_000,
        description="How often expired throttle entries are reclaimed, in milliseconds",
        ge=1,
    )
    rate_limit_include_headers: bool = Field(
        True,
        description="Include X-RateLimit-* and Retry-After headers when throttling",
    )

    news_default_limit: int = Field(
        10,
        description="Number of news items returned when no limit is given",
        ge=1,
    )
    news_max_limit: int = Field(
        50,
        description="Largest accepted news limit",
        ge=1,
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
    )


class LogSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("json", description="Log format: 'json' or 'plain'")
    output: str = Field("stdout", description="Log output: 'stdout' or 'file'")
    file_path: str | None = Field(None, description="Log file path when output=file")
    max_bytes: int = Field(
        10 * 1024 * 1024,
        description="Rotate the log file at this size (0 disables rotation)",
        ge=0,
    )
    backup_count: int = Field(5, description="Rotated files to keep", ge=0)
    request_id_header: str = Field(
        "X-Request-ID",
        description="Header carrying the request correlation id",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Main application settings container.

    Automatically loads from the appropriate .env.{APP_ENV} file.
    Raises validation errors on startup if settings are malformed.
    """

    app_env: str = APP_ENV
    llm: LLMSettings = Field(default_factory=LLMSettings)
    app: AppSettings = Field(default_factory=AppSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


settings = Settings()
