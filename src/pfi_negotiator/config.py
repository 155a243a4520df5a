"""Application configuration via pydantic-settings.

Reads from .env file or environment variables. Settings are validated at
startup, so a malformed value (e.g. PFI_ENDPOINTS that is not a JSON object)
fails fast with a clear error message.

Usage:
    from pfi_negotiator.config import get_settings
    settings = get_settings()
    print(settings.issuer_url)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the PFI negotiator."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_env: Literal["development", "staging", "production"] = "development"
    app_debug: bool = True
    app_log_level: str = "DEBUG"
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # --- PFIs ---
    # DID -> HTTP base URL. Given as JSON, e.g.
    # PFI_ENDPOINTS='{"did:dht:abc": "http://localhost:9001"}'
    pfi_endpoints: dict[str, str] = {}

    # --- Credential issuer ---
    issuer_url: str = "http://localhost:9000"

    # --- Outbound HTTP ---
    http_timeout_seconds: float = 10.0
    http_max_attempts: int = 3
    http_retry_wait_seconds: float = 1.0

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def pfi_dids(self) -> list[str]:
        """Return the configured PFI DIDs in declaration order."""
        return list(self.pfi_endpoints)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton of the application settings."""
    return Settings()
