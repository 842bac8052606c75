"""
Configuration settings using Pydantic BaseSettings.

Settings only affect the HTTP service; the core algorithms take their
options as explicit arguments.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FATDAMAGE_",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = "Fatigue Damage Assessment"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000"
    ]

    # Analysis limits
    max_history_samples: int = 1_000_000
    default_matrix_bins: int = 0  # 0 = automatic


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
