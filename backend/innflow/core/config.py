"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "InnFlow"
    debug: bool = False
    api_v1_prefix: str = "/v1"
    log_level: str = "INFO"

    # Database
    database_url: str

    # CORS (comma-separated)
    allowed_origins: str

    # Bookings
    reference_prefix: str = "INF"
    currency_symbol: str = "R"
    booking_create_retries: int = 3
    seed_demo_data: bool = False

    # Audit / notification retention
    audit_log_cap: int = 100
    notification_log_cap: int = 50

    # WhatsApp dispatch
    payment_link_base: str = "https://pay.innflow.com"
    whatsapp_api_token: Optional[str] = None
    whatsapp_template_name: str = "innflow_booking_confirmed"
    notification_timeout_seconds: float = 10.0

    @property
    def cors_origins(self) -> list[str]:
        """Parsed list of allowed CORS origins."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
