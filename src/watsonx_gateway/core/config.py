"""
Configuration management for watsonx-gateway.

Each concern reads its own environment prefix (``WATSONX_``, ``SERVER_``,
``LOG_``, ``API_``) from the process environment or a ``.env`` file.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env(prefix: str = "") -> SettingsConfigDict:
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class WatsonxConfig(BaseSettings):
    """IBM watsonx connection settings."""

    model_config = _env("WATSONX_")

    api_key: Optional[str] = Field(
        default=None,
        description="IBM Cloud API key exchanged for IAM tokens"
    )
    space_id: Optional[str] = Field(
        default=None,
        description="watsonx deployment space identifier"
    )
    endpoint: str = Field(
        default="https://us-south.ml.cloud.ibm.com",
        description="watsonx.ai base URL"
    )
    iam_url: str = Field(
        default="https://iam.cloud.ibm.com/identity/token",
        description="IBM Cloud IAM token endpoint"
    )

    @property
    def is_configured(self) -> bool:
        """Whether an API key has been supplied."""
        return bool(self.api_key)


class ServerConfig(BaseSettings):
    """Listener and CORS settings for uvicorn."""

    model_config = _env("SERVER_")

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    workers: int = Field(default=1, ge=1, le=16)
    reload: bool = False

    cors_origins: List[str] = ["*"]
    cors_methods: List[str] = ["GET", "POST", "OPTIONS"]
    cors_headers: List[str] = ["*"]


class LoggingConfig(BaseSettings):
    """structlog output settings."""

    model_config = _env("LOG_")

    level: str = "INFO"
    format: str = Field(default="json", description="json or text")
    file_path: Optional[str] = Field(
        default=None,
        description="Also write rotated logs here when set"
    )
    max_file_size: int = Field(default=10 * 1024 * 1024, ge=1024 * 1024)
    backup_count: int = Field(default=5, ge=1, le=20)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in {"json", "text"}:
            raise ValueError(f"Invalid log format: {v}")
        return fmt


class APIConfig(BaseSettings):
    """Outbound call settings."""

    model_config = _env("API_")

    request_timeout: float = Field(
        default=60.0,
        description="Timeout in seconds for IAM and generation calls",
        ge=1,
        le=300
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = _env()

    app_name: str = "watsonx-gateway"
    app_version: str = "0.1.0"
    app_description: str = "Relay for IBM watsonx hosted coding agents"

    environment: str = "development"
    debug: bool = False

    watsonx: WatsonxConfig = Field(default_factory=WatsonxConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: APIConfig = Field(default_factory=APIConfig)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        env = v.lower()
        if env not in {"development", "staging", "production", "testing"}:
            raise ValueError(f"Invalid environment: {v}")
        return env


settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings
