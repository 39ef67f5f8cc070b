"""Application configuration using Pydantic Settings."""

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
    app_name: str = "Palette API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Security - shared secret expected in the "key" form field
    api_key: str = ""

    # Upload intake
    max_upload_bytes: int = 10 * 1024 * 1024  # 10 MiB
    multipart_overhead_bytes: int = 64 * 1024

    # Color extraction
    palette_size: int = 6
    color_quality: int = 10  # colorthief samples every Nth pixel

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    event_log_path: str | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
