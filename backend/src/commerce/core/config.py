"""Configuration management for the commerce backend.

Uses Pydantic Settings for type-safe, environment-based configuration.
"""

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
# Use override=True to ensure .env changes take effect immediately
load_dotenv(override=True)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # App configuration
    app_name: str = Field("Commerce", alias="COMMERCE_APP_NAME")
    debug: bool = Field(False, alias="COMMERCE_DEBUG")
    version: str = Field("0.0.0-dev", alias="COMMERCE_APP_VERSION")

    # API configuration
    api_v1_prefix: str = Field("/api/v1", alias="COMMERCE_API_V1_PREFIX")
    api_host: str = Field("127.0.0.1", alias="COMMERCE_API_HOST")
    api_port: int = Field(3333, alias="COMMERCE_API_PORT")
    environment: str = Field("development", alias="COMMERCE_ENVIRONMENT")
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3333"], alias="COMMERCE_CORS_ORIGINS")

    # Database configuration
    database_url: str = Field(alias="COMMERCE_DATABASE_URL")
    database_pool_size: int = Field(10, alias="COMMERCE_DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(20, alias="COMMERCE_DATABASE_MAX_OVERFLOW")
    database_pool_timeout: int = 30
    database_pool_recycle: int = 3600
    # Create missing tables on startup (development convenience; use Alembic elsewhere)
    database_auto_create: bool = Field(False, alias="COMMERCE_DATABASE_AUTO_CREATE")

    # Logging configuration
    log_level: str = Field("INFO", alias="COMMERCE_LOG_LEVEL")
    log_format: str = Field("text", alias="COMMERCE_LOG_FORMAT")  # text or json
    log_file: str | None = Field(None, alias="COMMERCE_LOG_FILE")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = ["text", "json"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment setting."""
        valid_environments = ["development", "staging", "production"]
        if v.lower() not in valid_environments:
            raise ValueError(f"Environment must be one of: {valid_environments}")
        return v.lower()

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_cors_origins(cls, v: str | list) -> list:
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return [str(origin).strip() for origin in v if str(origin).strip()]
        return []

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra environment variables instead of forbidding them
    )


def get_settings() -> Settings:
    """Build a fresh settings instance from the environment."""
    return Settings()  # type: ignore[call-arg]


# Global settings instance - will be created when first accessed
settings = None


def get_settings_instance() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global settings  # noqa: PLW0603
    if settings is None:
        settings = get_settings()
    return settings
