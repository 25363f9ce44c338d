"""
Services package for the commerce backend.

This package contains business logic services for managing store resources.
"""

from .settings_service import SettingsService

__all__ = [
    "SettingsService",
]
