# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and provides them to the rest of the medicine marketplace in an organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - app.shared.infrastructure.database.connection (MongoDB client)
# - app.modules.plant_advisor (Gemini client, AI rate limits)
# - app.modules.marketplace (page size limits)

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file. Nothing is
    mandatory: a bare checkout talks to a local MongoDB and runs the AI
    endpoints in "missing key" mode.
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

    APP_NAME: str = Field(default="HangaTech Plant Medicine API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Plant disease medicine marketplace and AI plant-health advisor",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="text", description="Log output format (json or text)")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=5000, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string"
    )
    MONGODB_DB_NAME: str = Field(default="hangaTech", description="MongoDB database name")
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = Field(
        default=5000,
        description="How long the driver waits for a reachable server"
    )
    MONGODB_MAX_POOL_SIZE: int = Field(default=50, description="MongoDB connection pool size")
    MONGODB_CREATE_INDEXES: bool = Field(
        default=True,
        description="Ensure collection indexes at startup"
    )

    # CORS Settings
    CORS_ORIGINS: str = Field(default="*", description="CORS allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=False, description="CORS allow credentials")

    # =========================================================================
    # AI / LLM APIs
    # =========================================================================

    GEMINI_API_KEY: Optional[str] = Field(None, description="Google Gemini API key")
    GEMINI_MODEL: str = Field(default="gemini-1.5-flash", description="Gemini model")
    GEMINI_API_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Gemini REST API base URL"
    )
    AI_REQUEST_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="Upper bound on a single model call"
    )
    AI_MAX_RETRIES: int = Field(default=2, description="Retries for transient Gemini failures")

    # =========================================================================
    # RATE LIMITING
    # =========================================================================

    RATE_LIMIT_ENABLED: bool = Field(default=True, description="Enable rate limiting")
    AI_RATE_LIMIT: str = Field(
        default="20/minute",
        description="AI endpoint rate limit in '<limit>/<period>' format"
    )

    # =========================================================================
    # MARKETPLACE
    # =========================================================================

    MARKETPLACE_DEFAULT_PAGE_SIZE: int = Field(default=20, description="Default listing page size")
    MARKETPLACE_MAX_PAGE_SIZE: int = Field(default=100, description="Largest accepted page size")
    FEATURED_DEFAULT_LIMIT: int = Field(default=10, description="Default featured list length")
    PROMPTS_DEFAULT_PAGE_SIZE: int = Field(default=10, description="Default prompt history page size")

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

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.ENVIRONMENT == "test"

    @property
    def expose_error_details(self) -> bool:
        """Internal error text is only echoed back while developing."""
        return self.DEBUG and self.is_development

    def get_ai_api_config(self) -> dict:
        """Get Gemini API configuration."""
        return {
            "api_key": self.GEMINI_API_KEY,
            "model": self.GEMINI_MODEL,
            "api_url": self.GEMINI_API_URL,
            "timeout": self.AI_REQUEST_TIMEOUT_SECONDS,
            "max_retries": self.AI_MAX_RETRIES,
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
