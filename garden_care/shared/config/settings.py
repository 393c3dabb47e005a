# 📄 File: garden_care/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads settings from environment variables, such as where
# the database lives, which AI model writes care profiles, and how long identification answers
# are remembered.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading, validation and type
# safety for the garden care core (record store, profile cache schema version, identification
# cache bounds, content generator credentials).
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - pydantic field validators
#
# 🔄 Connected Modules / Calls From:
# - garden_care.shared.utils.logging (log level / format)
# - garden_care.shared.infrastructure.database.connection (engine options)
# - garden_care.modules.plant_care.dependencies (service wiring)

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field carries a default so the core can be imported and exercised
    without any environment; production deployments override through the
    environment or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Garden Care Core", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")

    # =========================================================================
    # LOGGING
    # =========================================================================

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./garden_care.db",
        description="Async SQLAlchemy database URL"
    )
    DB_POOL_SIZE: int = Field(default=10, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")

    # =========================================================================
    # CARE PROFILE CACHING
    # =========================================================================

    PROFILE_CACHE_SCHEMA_VERSION: int = Field(
        default=1,
        description="Bump to orphan every previously derived care profile cache key"
    )
    IDENTIFICATION_CACHE_TTL_SECONDS: int = Field(
        default=86400,
        description="Plant identification cache TTL (24 hours)"
    )
    IDENTIFICATION_CACHE_MAX_SIZE: int = Field(
        default=1000,
        description="Maximum number of cached identification answers"
    )

    # =========================================================================
    # AI / CONTENT GENERATION
    # =========================================================================

    ANTHROPIC_API_KEY: Optional[str] = Field(None, description="Anthropic API key")
    ANTHROPIC_API_URL: str = Field(
        default="https://api.anthropic.com/v1",
        description="Anthropic API base URL"
    )
    ANTHROPIC_API_VERSION: str = Field(default="2023-06-01", description="Anthropic API version header")
    AI_MODEL: str = Field(default="claude-3-5-haiku-20241022", description="Care profile model")
    AI_MAX_TOKENS: int = Field(default=2048, description="Max tokens per care profile")
    AI_REQUEST_TIMEOUT: int = Field(default=120, description="Generation request timeout (seconds)")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    @field_validator("PROFILE_CACHE_SCHEMA_VERSION", "IDENTIFICATION_CACHE_MAX_SIZE")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Value must be a positive integer")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.ENVIRONMENT == "test"

    def get_ai_api_config(self) -> dict:
        """Get content generation API configuration."""
        return {
            "api_key": self.ANTHROPIC_API_KEY,
            "api_url": self.ANTHROPIC_API_URL,
            "api_version": self.ANTHROPIC_API_VERSION,
            "model": self.AI_MODEL,
            "max_tokens": self.AI_MAX_TOKENS,
            "timeout": self.AI_REQUEST_TIMEOUT,
        }


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
