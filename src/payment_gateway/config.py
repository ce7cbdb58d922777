"""Configuration surface for the Payment Gateway SDK."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional
from uuid import UUID

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "http://localhost:8080"


class PaymentClientSettings(BaseSettings):
    """Connection settings, read from ``PAYMENT_GATEWAY_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_GATEWAY_",
        env_file=".env",
        extra="ignore",
    )

    # Tenant API key, sent as X-API-KEY
    api_key: Optional[str] = Field(default=None, repr=False)

    base_url: str = DEFAULT_BASE_URL

    # Default X-CLIENT-ID for client-scoped calls
    client_id: Optional[UUID] = None

    connection_timeout_ms: int = Field(default=30_000, gt=0)
    read_timeout_ms: int = Field(default=30_000, gt=0)

    test_mode: bool = False

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("base_url must not be empty")
        return v.rstrip("/")

    @field_validator("api_key", mode="before")
    @classmethod
    def empty_key_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def timeout(self) -> httpx.Timeout:
        """Build the httpx timeout for these settings."""
        return httpx.Timeout(
            self.read_timeout_ms / 1000,
            connect=self.connection_timeout_ms / 1000,
        )


@lru_cache
def load_settings(env_file: str | None = None) -> PaymentClientSettings:
    """Load settings once per process."""
    env_path = Path(env_file) if env_file else None
    if env_path is None:
        return PaymentClientSettings()
    return PaymentClientSettings(_env_file=env_path)
