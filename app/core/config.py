"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (API prefix, invoice numbering, windows)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Application
    APP_NAME: str = Field(
        default="TaxFlow",
        description="Display name used in API docs and health responses"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Reported service version"
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(
        default="/api",
        description="API route prefix"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )
    SLOW_REQUEST_SECONDS: float = Field(
        default=5.0,
        description="Requests slower than this are logged as warnings"
    )

    # Practice rules
    UPCOMING_WINDOW_DAYS: int = Field(
        default=7,
        description="Days ahead counted as upcoming dues"
    )
    INVOICE_PREFIX: str = Field(
        default="INV-",
        description="Prefix for generated invoice numbers"
    )
    INVOICE_NUMBER_WIDTH: int = Field(
        default=6,
        description="Zero-padded width of the numeric part of invoice numbers"
    )

    # Store
    SEED_DEMO_DATA: bool = Field(
        default=False,
        description="Populate the in-memory store with sample records at startup"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """Prefix must start with a slash and carry no trailing slash."""
        v = v.rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("API_PREFIX must start with '/'")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def validate_settings():
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    errors = []

    if settings.UPCOMING_WINDOW_DAYS < 1:
        errors.append("UPCOMING_WINDOW_DAYS must be at least 1")

    if not settings.INVOICE_PREFIX:
        errors.append("INVOICE_PREFIX is required")

    if settings.INVOICE_NUMBER_WIDTH < 1:
        errors.append("INVOICE_NUMBER_WIDTH must be at least 1")

    # Production-specific validations
    if settings.is_production:
        if settings.DEBUG:
            errors.append("DEBUG must be disabled in production")
        if settings.SEED_DEMO_DATA:
            errors.append("SEED_DEMO_DATA must be disabled in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
