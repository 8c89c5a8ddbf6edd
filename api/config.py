# api/config.py

"""
Configuration for the Geckowatch API.
"""

from typing import Literal

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "geckowatch"

    # API
    api_title: str = "Geckowatch API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api"

    # CORS (for the mobile app)
    cors_origins: list[str] = ["*"]

    # IANA timezone that defines day/night and chart labels
    local_timezone: str = "UTC"

    # Where species profiles come from: the built-in catalog or MongoDB
    species_source: Literal["builtin", "mongodb"] = "builtin"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
