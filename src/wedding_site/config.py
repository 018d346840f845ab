"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    photo_bucket: str = "wedding-photos"
    photos_table: str = "wedding_photos"
    rsvps_table: str = "wedding_rsvps"
    upload_cleanup_delay_seconds: float = 2.0
    download_pacing_seconds: float = 0.5
    download_timeout_seconds: float = 20.0
    carousel_interval_seconds: float = 5.0
    carousel_autoplay: bool = True
    rsvp_timezone: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
