"""
Centralized configuration for the SportFwd backend.

All settings are loaded from environment variables with sensible defaults.
Vendor settings are namespaced (e.g., SUPABASE_*, CLOUDINARY_*, TWILIO_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "SportFwd API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "info"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""
    supabase_db_url: str = ""

    # Cloudinary (media CDN)
    cloudinary_cloud_name: str = ""
    cloudinary_upload_preset: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""

    # Twilio Verify (SMS one-time codes)
    twilio_account_sid: str = ""
    twilio_auth_token: str = ""
    twilio_verify_service_sid: str = ""

    # Feed
    feed_page_size: int = 20
    feed_scope_limit: int = 10  # max ids per IN-query scope
    profile_posts_page_size: int = 10

    # Polling (seconds)
    email_verification_poll_interval: float = 5.0
    message_poll_interval: float = 2.0

    # Outbound retries
    retry_attempts: int = 3
    retry_base_delay: float = 2.0

    # Admin listings
    admin_page_size: int = 10


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
