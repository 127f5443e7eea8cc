"""
Configuration management for The Watchman document loader.

Uses pydantic-settings to load configuration from environment variables
and .env files.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API Configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    cors_origins: str = ""  # comma separated, empty disables CORS
    log_level: str = "INFO"
    api_title: str = "The Watchman Document Loader"
    api_version: str = "1.0.0"

    # Agent embeddings directory, seeded into the corpus at startup when present
    embeddings_dir: Optional[Path] = None

    # External converters
    pandoc_command: str = "pandoc"
    pdftotext_command: str = "pdftotext"
    tool_timeout: Optional[float] = None  # seconds, None waits forever

    # Discovery Configuration
    max_depth: Optional[int] = None
    text_encoding: str = "utf-8"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins into list."""
        return [o.strip() for o in self.cors_origins.split(',') if o.strip()]

    def get_tool_commands(self) -> dict[str, str]:
        """Map converter names to the commands actually invoked."""
        return {
            "pandoc": self.pandoc_command,
            "pdftotext": self.pdftotext_command,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
