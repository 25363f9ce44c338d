"""Utility helpers for the commerce backend."""

from .setting_values import SettingType, coerce_boolean, coerce_number, typed_value

__all__ = [
    "SettingType",
    "coerce_boolean",
    "coerce_number",
    "typed_value",
]
