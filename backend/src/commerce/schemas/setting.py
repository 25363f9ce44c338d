"""Pydantic schemas for store settings endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from ..utils.setting_values import SettingType


class SettingValueInput(BaseModel):
    """One setting entry in an update payload."""

    value: Any = None
    type: SettingType = SettingType.STRING
    is_public: bool = False


class SettingsGroupUpdate(BaseModel):
    """Upsert payload for a settings group, keyed by setting key."""

    settings: dict[str, SettingValueInput] = Field(default_factory=dict)


class SettingsGroup(BaseModel):
    """Typed values of one settings group."""

    group: str
    settings: dict[str, Any]
