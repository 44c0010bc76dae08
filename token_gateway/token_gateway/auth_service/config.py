"""
Configuration management for the token gateway
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Token gateway configuration loaded from environment variables"""

    SERVICE_NAME: str = "Token Gateway"
    SERVICE_VERSION: str = "1.0.0"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./app.db"

    # Token lifetime in seconds (two weeks). 0 issues tokens that never expire.
    TOKEN_LIFESPAN_SECONDS: int = 60 * 60 * 24 * 14

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
