# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

This module provides centralized configuration management for the
training-management sync core. Settings are loaded from environment
variables (and an optional ``.env`` file) with sensible defaults.

The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings() for dependency injection.

Example:
    >>> from tms_sync.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.store.backend)
    'file'
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Self

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Remote store backend selection and file-store configuration.

    Attributes:
        backend: Which RemoteStore implementation to use.
        data_dir: Directory holding the JSON collection files.
        simulated_delay: Seconds awaited before each file-store call resolves.
        seed_on_init: Whether missing collections are seeded on initialize().
    """

    model_config = SettingsConfigDict(
        env_prefix="STORE_",
        extra="ignore",
    )

    backend: Literal["file", "http"] = "file"
    data_dir: Path = Path("data")
    simulated_delay: float = 0.0
    seed_on_init: bool = True


class HttpStoreSettings(BaseSettings):
    """HTTP-backed remote store configuration.

    Attributes:
        base_url: Base URL of the REST API, including the version prefix.
        access_token: Optional bearer token sent with every request.
        timeout: Request timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="HTTP_STORE_",
        extra="ignore",
    )

    base_url: str = ""
    access_token: SecretStr | None = None
    timeout: float = 30.0

    @property
    def auth_headers(self) -> dict[str, str]:
        """Build the Authorization header if a token is configured."""
        if self.access_token is None:
            return {}
        return {"Authorization": f"Bearer {self.access_token.get_secret_value()}"}


class SyncSettings(BaseSettings):
    """Client-side synchronization behaviour.

    Attributes:
        serialize_course_writes: Queue writes targeting the same course id
            instead of letting the last response win.
    """

    model_config = SettingsConfigDict(
        env_prefix="SYNC_",
        extra="ignore",
    )

    serialize_course_writes: bool = True


class CORSSettings(BaseSettings):
    """CORS configuration for API.

    Attributes:
        origins: Comma-separated list of allowed origins.
        allow_credentials: Whether to allow credentials.
        allow_methods: Allowed HTTP methods.
        allow_headers: Allowed HTTP headers.
    """

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        extra="ignore",
    )

    origins: str = "http://localhost:3000,http://localhost:5173"
    allow_credentials: bool = True
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @property
    def origins_list(self) -> list[str]:
        """Parse origins string into a list."""
        return [origin.strip() for origin in self.origins.split(",") if origin.strip()]


class APISettings(BaseSettings):
    """API server configuration.

    Attributes:
        host: Host to bind to.
        port: Port to listen on.
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 3001


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode.
        log_level: Logging level.
        store: Remote store settings.
        http_store: HTTP store settings.
        sync: Synchronization settings.
        cors: CORS settings.
        api: API server settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"

    # Subsettings - loaded with their own env prefixes
    store: StoreSettings = Field(default_factory=StoreSettings)
    http_store: HttpStoreSettings = Field(default_factory=HttpStoreSettings)
    sync: SyncSettings = Field(default_factory=SyncSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)
    api: APISettings = Field(default_factory=APISettings)

    @model_validator(mode="after")
    def validate_store_backend(self) -> Self:
        """Validate that the selected store backend is usable.

        Raises:
            ValueError: If the HTTP backend is selected without a base URL.
        """
        if self.store.backend == "http" and not self.http_store.base_url:
            raise ValueError(
                "HTTP store backend requires a base URL. "
                "Set HTTP_STORE_BASE_URL environment variable."
            )
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this if you need to reload settings from environment.
    Useful for testing or dynamic configuration updates.
    """
    get_settings.cache_clear()
