"""
Configuration management for the Examples Admin Console.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SUBCATEGORIES: dict[str, list[str]] = {
    "comic-translation": ["japanese", "korean", "chinese"],
    "art-restoration": ["black-bars", "white-bars", "mosaic"],
    "mobile-layout": ["japanese", "korean", "chinese"],
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Examples Admin Console"
    DEBUG: bool = False

    # Examples backend
    EXAMPLES_API_URL: str = "http://localhost:8000"
    BACKEND_TIMEOUT: float = 5.0  # httpx default

    # Browser session
    SESSION_COOKIE_NAME: str = "examples_admin_session"
    SESSION_IDLE_TIMEOUT: int = 60 * 60  # seconds

    # Category layout
    SUBCATEGORIES: dict[str, list[str]] = Field(default_factory=lambda: dict(DEFAULT_SUBCATEGORIES))
    VIDEO_CATEGORIES: list[str] = ["video-subtitles"]
    AUDIO_CATEGORY: str = "audio-story"

    # Upload Limits
    MAX_IMAGE_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB
    MAX_VIDEO_UPLOAD_SIZE: int = 50 * 1024 * 1024  # 50MB
    MAX_AUDIO_UPLOAD_SIZE: int = 20 * 1024 * 1024  # 20MB

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
