# signup/core/config.py
"""
Application configuration settings.

Loads settings from environment variables with sensible defaults.
The hashing mode and pepper are read here once and handed to the
registration service at construction time; nothing in the pipeline reads
the environment while a request is in flight.
"""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ------------------------------------------------------------------
    # Password Hashing
    # ------------------------------------------------------------------

    # "sync" blocks the caller while hashing; "async" offloads salt
    # generation and hashing to the threadpool.
    HASH_MODE: Literal["sync", "async"] = "sync"

    # Server-side pepper appended to the password before hashing
    AUTH_PEPPER: str = ""

    # Random salt length in bytes (argon2 needs at least 8)
    SALT_BYTES: int = 16

    # Argon2id cost parameters
    ARGON2_TIME_COST: int = 3
    ARGON2_MEMORY_COST: int = 65536  # KiB
    ARGON2_PARALLELISM: int = 4

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    STORAGE_BACKEND: Literal["memory", "database"] = "memory"
    DATABASE_URL: str = "sqlite:///./signup.db"

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    ALLOW_REGISTRATION: bool = True

    # ------------------------------------------------------------------
    # Monitoring & Logging
    # ------------------------------------------------------------------

    LOG_LEVEL: str = "INFO"  # DEBUG | INFO | WARNING | ERROR
    LOG_FORMAT: str = "json"  # json | text

    # ------------------------------------------------------------------
    # Application Settings
    # ------------------------------------------------------------------

    ENVIRONMENT: str = "development"  # development | staging | production
    DEBUG: bool = True

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Signup Registration Service"

    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    # ------------------------------------------------------------------
    # Computed Properties
    # ------------------------------------------------------------------

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    @property
    def uses_database(self) -> bool:
        return self.STORAGE_BACKEND == "database"


def check_production_settings(settings: Settings) -> None:
    """Refuse unsafe combinations when running in production."""
    if not settings.is_production:
        return
    if settings.DEBUG:
        raise ValueError("DEBUG must be False in production!")
    if not settings.AUTH_PEPPER:
        raise ValueError("AUTH_PEPPER must be set in production!")


# Create settings instance
settings = Settings()
check_production_settings(settings)
