"""Pydantic schemas for the commerce API."""

from .envelope import ErrorResponse, SuccessResponse
from .setting import SettingsGroup, SettingsGroupUpdate, SettingValueInput

__all__ = [
    "ErrorResponse",
    "SuccessResponse",
    "SettingsGroup",
    "SettingsGroupUpdate",
    "SettingValueInput",
]
