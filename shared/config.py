"""
Shared configuration management for the Developer Portal access layer.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PORTAL_",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local", description="Deployment environment name")
    log_level: str = Field(default="info", description="Log level for structlog/stdlib")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.lower()


class PortalConfig(BaseConfig):
    """Settings for the portal's API gateway transport."""

    service_name: str = Field(default="portal", description="Logger and service name")

    # API gateway
    gateway_url: str = Field(default="http://localhost:8000", description="Base URL of the portal REST API")
    request_timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")

    # Credentials forwarded on every gateway request
    api_token: Optional[str] = Field(default=None, description="Bearer token for the Authorization header")
    api_key_header_value: Optional[str] = Field(default=None, description="Value for the x-api-key header")


def get_config(**overrides) -> PortalConfig:
    """Get portal configuration, optionally overriding individual settings."""
    return PortalConfig(**overrides)
