"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import CANCELLED_ORDER_STATUS, EnumEnvironment, EnumLogLevel
from src.shared.env import load_secret_file_variables  # noqa: F401


class GESettings(BaseSettings):
    """Service identity and HTTP server settings."""

    title: str = Field(default="Sales Forecast Service", description="Service title")
    description: str = Field(
        default="Sales, order and average order value forecasts "
        "for the e-commerce admin console",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("GE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("GE_BUILD_TIME", "BUILD_TIME"),
    )
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class SupabaseSettings(BaseSettings):
    """Order store (Supabase REST) configuration settings."""

    url: str = Field(
        default="http://localhost:54321", description="Supabase project URL"
    )
    api_key: str = Field(
        default="",
        description="Supabase API key (use SUPABASE_API_KEY_FILE for secrets)",
        validation_alias=AliasChoices(
            "SUPABASE_API_KEY", "SUPABASE_SERVICE_ROLE_KEY", "SUPABASE_ANON_KEY"
        ),
    )
    orders_table: str = Field(default="orders", description="Orders table name")
    timeout: float = Field(
        default=30.0, gt=0, description="Request timeout in seconds"
    )
    page_size: int = Field(
        default=1000, ge=1, description="Rows requested per PostgREST page"
    )

    model_config = SettingsConfigDict(
        env_prefix="SUPABASE_", case_sensitive=False, extra="ignore"
    )


class ForecastSettings(BaseSettings):
    """Sales forecast model settings."""

    lookback_years: int = Field(
        default=2, ge=1, description="Years of order history used for the fit"
    )
    excluded_status: str = Field(
        default=CANCELLED_ORDER_STATUS,
        description="Order status left out of the history",
    )
    variance_scale: float = Field(
        default=10_000.0,
        gt=0,
        description="Sales variance at which the confidence variance penalty "
        "saturates, in squared currency units",
    )
    minimum_observations: int = Field(
        default=3, ge=1, description="Months of history required to forecast"
    )
    history_window: int = Field(
        default=12, ge=1, description="Months of history returned with a forecast"
    )

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(message)s",
        description="stdlib format wrapped around each rendered console line; "
        "ignored in production, which logs one JSON document per line",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    ge: GESettings = Field(default_factory=GESettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    supabase: SupabaseSettings = Field(default_factory=SupabaseSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()


settings = get_settings()
