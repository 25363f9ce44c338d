"""Unit tests for Settings field validators."""

import pytest
from pydantic import ValidationError

from commerce.core.config import Settings, get_settings_instance

DATABASE_URL = "sqlite+aiosqlite://"


class TestValidateLogSettings:
    """Tests for the log level / log format validators."""

    def test_log_level_uppercased(self) -> None:
        settings = Settings(COMMERCE_DATABASE_URL=DATABASE_URL, COMMERCE_LOG_LEVEL="debug")
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Log level must be one of"):
            Settings(COMMERCE_DATABASE_URL=DATABASE_URL, COMMERCE_LOG_LEVEL="loud")

    def test_log_format_lowercased(self) -> None:
        settings = Settings(COMMERCE_DATABASE_URL=DATABASE_URL, COMMERCE_LOG_FORMAT="JSON")
        assert settings.log_format == "json"

    def test_invalid_log_format_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Log format must be one of"):
            Settings(COMMERCE_DATABASE_URL=DATABASE_URL, COMMERCE_LOG_FORMAT="xml")


class TestEnvironmentAndCors:
    """Tests for environment and CORS parsing."""

    def test_environment_normalized(self) -> None:
        settings = Settings(COMMERCE_DATABASE_URL=DATABASE_URL, COMMERCE_ENVIRONMENT="Production")
        assert settings.environment == "production"

    def test_invalid_environment_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Environment must be one of"):
            Settings(COMMERCE_DATABASE_URL=DATABASE_URL, COMMERCE_ENVIRONMENT="qa")

    def test_cors_origins_from_comma_separated_string(self) -> None:
        settings = Settings(
            COMMERCE_DATABASE_URL=DATABASE_URL,
            COMMERCE_CORS_ORIGINS="http://a.test, http://b.test,",
        )
        assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_settings_instance_is_cached() -> None:
    assert get_settings_instance() is get_settings_instance()
