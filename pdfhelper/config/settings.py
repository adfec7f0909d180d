"""
Application settings loaded from environment and .env.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for PdfHelper."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Prefix for relative asset / document sources
    app_url: str = ""

    # "production" launches the system Chromium without sandbox
    environment: str = "development"
    chromium_executable: str = "/usr/bin/chromium-browser"

    fetch_timeout: float = 30.0
    render_timeout_ms: int = 60000
    raster_scale: float = 2.2

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def init_settings(settings: Settings) -> Settings:
    """Override the cached settings (tests, embedding)."""
    global _settings
    _settings = settings
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads."""
    global _settings
    _settings = None
