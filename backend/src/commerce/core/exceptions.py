"""Custom exceptions for the commerce backend.

This module defines all custom exceptions used throughout the application.
"""

from typing import Any


class CommerceException(Exception):
    """Base exception class for the commerce backend."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# Setting Exceptions
class SettingValueDecodeError(CommerceException):
    """Raised when a json/array setting holds text that is not valid JSON."""

    def __init__(self, setting_type: str, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Could not decode '{setting_type}' setting value: {reason}",
            error_code="SETTING_VALUE_DECODE_ERROR",
            status_code=422,
            details=details or {"type": setting_type, "reason": reason},
        )


class InvalidSettingTypeError(CommerceException):
    """Raised when a setting is written with an unknown type tag."""

    def __init__(self, setting_type: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Invalid setting type '{setting_type}'",
            error_code="INVALID_SETTING_TYPE",
            status_code=400,
            details=details or {"type": setting_type},
        )


class SettingNotFoundError(CommerceException):
    """Raised when a setting is not found."""

    def __init__(self, group: str, key: str, store_id: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Setting '{group}.{key}' not found",
            error_code="SETTING_NOT_FOUND",
            status_code=404,
            details=details or {"store_id": store_id, "group": group, "key": key},
        )


# Store Exceptions
class StoreNotFoundError(CommerceException):
    """Raised when a store is not found."""

    def __init__(self, store_id: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Store '{store_id}' not found",
            error_code="STORE_NOT_FOUND",
            status_code=404,
            details=details or {"store_id": store_id},
        )


# Database Exceptions
class DatabaseConnectionError(CommerceException):
    """Raised when there's a database connection error (network, auth, etc.)."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Database connection error: {reason}",
            error_code="DATABASE_CONNECTION_ERROR",
            status_code=503,  # Service Unavailable
            details=details or {"reason": reason},
        )


class DatabaseInitializationError(CommerceException):
    """Raised when database initialization fails (schema creation, etc.)."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Database initialization error: {reason}",
            error_code="DATABASE_INITIALIZATION_ERROR",
            status_code=500,
            details=details or {"reason": reason},
        )


class DatabaseSessionError(CommerceException):
    """Raised when there's an error with database session management."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Database session error: {reason}",
            error_code="DATABASE_SESSION_ERROR",
            status_code=500,
            details=details or {"reason": reason},
        )
