import logging
import sys
from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be configured via .env file or environment variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Students API"
    APP_VERSION: str = "1.0.0"
    ENV: str = "dev"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "localhost"
    PORT: int = 8082
    # Seconds to drain in-flight requests after SIGINT/SIGTERM
    SHUTDOWN_TIMEOUT: int = 5

    # =============================================================================
    # STORAGE (SQLite file)
    # =============================================================================
    STORAGE_PATH: str = "storage/storage.db"
    DB_ECHO_SQL: bool = False

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

    @field_validator("STORAGE_PATH")
    @classmethod
    def validate_storage_path(cls, v: str) -> str:
        """Storage path is required, an empty value would open a temporary db."""
        if not v or not v.strip():
            raise ValueError("STORAGE_PATH must not be empty")
        return v.strip()

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("SHUTDOWN_TIMEOUT")
    @classmethod
    def validate_shutdown_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("SHUTDOWN_TIMEOUT must be positive")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def http_address(self) -> str:
        """Listen address in host:port form."""
        return f"{self.HOST}:{self.PORT}"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance, built on first use."""
    return Settings()


def load_settings() -> Settings:
    """
    Load settings or stop the process.

    Called once at startup; a broken configuration is not recoverable,
    so the process exits with status 1.
    """
    try:
        return get_settings()
    except ValidationError as e:
        logger.critical(f"Failed to load configuration: {e}")
        sys.exit(1)

