"""
Configuration Module
====================

Application settings and configuration management using Pydantic.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety.
    """

    # ========== Application ==========
    app_name: str = Field(default="portfolio-api", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
        description="Environment name"
    )
    log_level: str = Field(default="INFO", description="Root log level")

    # ========== Server ==========
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=5000, description="Server port", ge=1, le=65535)

    # ========== Database ==========
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017/portfolio",
        description="MongoDB connection URI"
    )
    mongodb_database: str = Field(
        default="portfolio",
        description="Database name used when the URI does not name one"
    )
    server_selection_timeout_ms: int = Field(
        default=5000,
        validation_alias=AliasChoices(
            "server_selection_timeout_ms", "mongodb_server_selection_timeout_ms"
        ),
        description="Server selection timeout for connection attempts",
        ge=100
    )
    reconnect_delay_seconds: float = Field(
        default=5.0,
        validation_alias=AliasChoices(
            "reconnect_delay_seconds", "mongodb_retry_delay_seconds"
        ),
        description="Fixed delay between connection attempts",
        gt=0
    )

    # ========== CORS ==========
    frontend_url: str = Field(
        default="http://localhost:3000",
        description="The single origin allowed to call the API from a browser"
    )

    # ========== Rate Limiting ==========
    contact_rate_limit: int = Field(
        default=10,
        description="Max contact submissions per client address per window",
        ge=1
    )
    contact_rate_window_seconds: int = Field(
        default=15 * 60,
        description="Contact rate limiting window",
        ge=1
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    @field_validator("environment")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        """
        Lower-case the name. Any value is accepted (NODE_ENV may hold names
        such as "prod" or "local"); only "development" changes behaviour.
        """
        return v.strip().lower()

    @property
    def expose_error_details(self) -> bool:
        """Whether error responses may carry the underlying exception text."""
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


# ========== Constants ==========

CONTACTS_COLLECTION = "contacts"
DOWNLOADS_COLLECTION = "downloads"
