"""Application configuration management."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    app_name: str = "Subtitle Sync Service"
    app_version: str = "0.1.0"
    app_description: str = "Align multiple SRT subtitle tracks into a single time-ordered table"

    # Environment
    environment: str = "development"  # development, staging, production

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_hosts: list[str] = ["*"]

    # Authentication
    api_key: str | None = None

    # CORS Configuration
    cors_enabled: bool = True
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Track Limits
    max_tracks: int = 32
    max_content_size: int = 5 * 1024 * 1024  # 5MB per subtitle file

    # Logging
    log_level: str = "INFO"
    log_dir: str = "./logs"
    log_to_file: bool = True
    enable_log_redaction: bool = True  # Redact API keys from logs

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
