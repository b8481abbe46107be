"""
Configuration settings for the application.
"""

import os
from functools import lru_cache
from typing import List, Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings."""

    # Google OAuth client
    GOOGLE_CREDENTIALS_FILE: str = os.getenv("GOOGLE_CREDENTIALS_FILE", "credentials.json")
    GOOGLE_REDIRECT_URI: Optional[str] = os.getenv("GOOGLE_REDIRECT_URI") or None

    # Calendar defaults
    CALENDAR_TIMEZONE: str = os.getenv("CALENDAR_TIMEZONE", "Asia/Jakarta")
    CALENDAR_SUMMARY: str = os.getenv("CALENDAR_SUMMARY", "Ohana Customer")
    CALENDAR_DESCRIPTION: str = os.getenv("CALENDAR_DESCRIPTION", "Google calendar for Ohana customer")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))
    RELOAD: bool = os.getenv("RELOAD", "False").lower() == "true"
    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "*")

    # Logging
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )

    @property
    def allowed_origins(self) -> List[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
