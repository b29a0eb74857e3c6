from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MCP_ENABLED: bool = False
    MCP_SERVER_URL: str | None = None
    MCP_API_KEY: str | None = None
    MCP_TIMEOUT_SECONDS: float = 10.0

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    CLIENT_IP_HEADER: str = "CF-Connecting-IP"
    BOOKING_PAGE_URL: str = "https://raw.githubusercontent.com/Konstrex/booking-system/main/booking.html"

    BUSINESS_OPEN_HOUR: int = 9
    BUSINESS_CLOSE_HOUR: int = 17

    # JSON list of {"name", "duration", "price"}; the built-in catalog is used when unset.
    SERVICE_CATALOG: list[dict[str, Any]] | None = None


settings = Settings()


@dataclass(frozen=True)
class NotificationConfig:
    enabled: bool
    endpoint: str | None
    api_key: str | None
    timeout_seconds: float = 10.0

    @property
    def active(self) -> bool:
        return bool(self.enabled and self.endpoint and self.api_key)

    @classmethod
    def from_settings(cls, source: Settings) -> "NotificationConfig":
        return cls(
            enabled=source.MCP_ENABLED,
            endpoint=source.MCP_SERVER_URL,
            api_key=source.MCP_API_KEY,
            timeout_seconds=source.MCP_TIMEOUT_SECONDS,
        )
