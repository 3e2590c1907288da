"""
Application configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "ProofMaster API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production
    SERVICE_NAME: str = "proofmaster-api"

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or text
    LOG_FILE: Optional[str] = None

    # Math engine upstream
    WOLFRAM_APP_ID: Optional[str] = None
    WOLFRAM_API_URL: str = "https://api.wolframalpha.com/v1/result"
    WOLFRAM_UNITS: str = "metric"
    UPSTREAM_TIMEOUT_S: float = 30.0
    QUERY_CACHE_SECONDS: int = 300

    # Study sessions
    MAX_SESSIONS: int = 1000
    MATCHING_PAIRS: int = 10
    RAPID_FIRE_QUESTIONS: int = 20
    RAPID_FIRE_SECONDS: int = 30


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
