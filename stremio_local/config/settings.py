"""Configuration management using Pydantic settings."""
import logging
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

ENV_FILE_PATH = Path(__file__).parent.parent.parent / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # TMDB (The Movie Database) - Optional, without it only placeholder artwork is served
    tmdb_api_key: str = Field(default="", description="TMDB API Key (v3) for background artwork")
    tmdb_timeout: float = Field(default=10.0, description="Timeout in seconds for a single TMDB request")

    # Media library
    media_dir: str = Field(default="/media", description="Root folder scanned for media files")

    # Addon server
    addon_host: str = Field(default="0.0.0.0", description="Host for the addon web server")
    addon_port: int = Field(default=8081, description="Port for the addon web server")

    log_level: str = Field(default="INFO", description="Root logging level")

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance with error handling
try:
    if ENV_FILE_PATH.exists():
        logger.info(f"Loading .env file from: {ENV_FILE_PATH}")
    else:
        logger.debug(f".env file not found at {ENV_FILE_PATH}, using environment variables only")

    settings = Settings()

except Exception as e:
    logger.error(f"Failed to load settings: {e}")
    logger.error(f"Check the environment variables or the .env file at: {ENV_FILE_PATH}")
    raise
