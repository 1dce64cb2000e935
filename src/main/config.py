"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Settings come from environment variables, .env files and default values.
Dotenv files use nested keys (``DATABASE__MONGO_URI``); plain environment
variables may also use the section prefixes (``DB_MONGO_URI``).
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.env import load_secret_file_variables  # noqa: F401


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/healthbench",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="healthbench", description="Name of the MongoDB database"
    )
    timeout_ms: int = Field(
        default=5000, description="Server selection timeout in milliseconds", gt=0
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class ServiceSettings(BaseSettings):
    """Service metadata and server settings."""

    title: str = Field(default="HealthBench", description="Service title")
    description: str = Field(
        default="Web service with aggregated dependency health reporting",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("SERVICE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("SERVICE_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class HealthSettings(BaseSettings):
    """Health check configuration settings."""

    default_timeout: float = Field(
        default=5.0, description="Timeout applied to each probe, in seconds", gt=0
    )
    http_timeout: float = Field(
        default=5.0, description="Timeout for HTTP and Redis probes", gt=0
    )
    redis_url: str = Field(
        default="", description="Redis URL to probe; empty disables the check"
    )
    http_dependencies: Dict[str, str] = Field(
        default_factory=dict,
        description="HTTP dependencies to probe, as a JSON object name -> base URL",
    )

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
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

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    service: ServiceSettings = Field(default_factory=ServiceSettings)
    health: HealthSettings = Field(default_factory=HealthSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

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

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()


def load_settings(
    config_files: Sequence[Union[str, Path]] = (),
    overrides: Optional[Mapping[str, Any]] = None,
) -> AppSettings:
    """
    Build settings from explicit dotenv files and keyword overrides.

    Later files win over earlier ones; overrides win over both.
    """
    env_files = tuple(str(path) for path in config_files) or None
    return AppSettings(_env_file=env_files, **dict(overrides or {}))
