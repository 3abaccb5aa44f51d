"""
Shared configuration management for the CRPT access client.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PRODUCTION_BASE_URL = "https://ismp.crpt.ru/api/v3"
DEMO_BASE_URL = "https://markirovka.demo.crpt.tech/api/v3"


class ClientSettings(BaseSettings):
    """Client configuration read from ``CRPT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CRPT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="production", description="production or demo")
    log_level: str = Field(default="info")

    # Remote endpoints
    production_base_url: str = Field(default=PRODUCTION_BASE_URL, min_length=8)
    demo_base_url: str = Field(default=DEMO_BASE_URL, min_length=8)

    # HTTP
    http_timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default="crpt-access/0.1", min_length=1)

    # Rate limiting defaults, used when the caller does not pass them
    request_limit: int = Field(default=5, gt=0)
    window_seconds: float = Field(default=60.0, gt=0)


def get_settings(**overrides) -> ClientSettings:
    """Get a fresh settings instance (environment is re-read on every call)."""
    return ClientSettings(**overrides)
