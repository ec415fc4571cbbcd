"""E2E settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Loglines E2E configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Logging
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )

    # Targets
    keycloak_base_url: str = Field(
        default="https://keycloak-dev.logistical.one",
        description="Keycloak identity provider base URL",
    )
    app_base_url: str = Field(
        default="http://localhost:3000", description="Loglines front end base URL"
    )

    # Browser
    headed: bool = Field(default=False, description="Run browsers headed")
    slow_mo: int = Field(default=0, ge=0, description="Slow down Playwright actions (ms)")
    viewport_width: int = Field(default=1920, ge=1, description="Browser viewport width")
    viewport_height: int = Field(default=1080, ge=1, description="Browser viewport height")

    @field_validator("keycloak_base_url", "app_base_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        """Validate URL scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def keycloak_host(self) -> str:
        """Host name of the identity provider."""
        return urlparse(self.keycloak_base_url).netloc


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
