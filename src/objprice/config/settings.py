# src/objprice/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a local .env file, with
validation on load.

Files that USE this module:
- objprice.app (server address and logging configuration)
- objprice.adapters.http.django_settings (Django settings derived from these values)
- objprice.adapters.http.views (FX pair suffix for the rate gateway)
- objprice.adapters.api_client (API base URL and HTTP timeout)
- objprice.application.controller (default display/asset currency)

Files that this module USES:
- objprice.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import List, Optional  # Type hints for lists and optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from objprice.shared.validators import validate_currency_code  # Validate currency code format


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- HTTP server ---
    http_host: str = Field(default="127.0.0.1", alias="HTTP_HOST")
    http_port: int = Field(default=8000, alias="HTTP_PORT", ge=1, le=65535)
    debug: bool = Field(default=False, alias="DEBUG")
    secret_key: str = Field(default="objprice-insecure-dev-key", alias="SECRET_KEY")
    allowed_hosts: List[str] = Field(
        default_factory=lambda: ["127.0.0.1", "localhost"], alias="ALLOWED_HOSTS"
    )

    # --- HTTP client (API consumer side) ---
    api_base_url: str = Field(default="http://127.0.0.1:8000", alias="API_BASE_URL")
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Market data ---
    # Yahoo Finance names currency pairs like "EURUSD=X"
    fx_pair_suffix: str = Field(default="=X", alias="FX_PAIR_SUFFIX")
    default_currency: str = Field(default="USD", alias="DEFAULT_CURRENCY")

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="OBJPRICE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def server_address(self) -> str:
        """host:port string for the development server."""
        return f"{self.http_host}:{self.http_port}"

    @field_validator("default_currency")
    @classmethod
    def validate_default_currency(cls, v: str) -> str:
        """Validate currency code format."""
        v = v.upper()
        if not validate_currency_code(v):
            raise ValueError("DEFAULT_CURRENCY must be a 3-letter currency code")
        return v

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


# Global settings instance
settings = Settings()
