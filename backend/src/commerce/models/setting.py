"""Setting model for per-store configuration values.

Each row is a ``group``/``key`` entry scoped to a store (or global when
``store_id`` is NULL). ``value`` is stored as JSON text and interpreted
through its ``type`` tag on read.
"""

from typing import Any

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Index, String, UniqueConstraint, text
from sqlalchemy.orm import relationship

from ..utils.setting_values import SettingType, typed_value
from .base import BaseModel
from .columns import json_column


class Setting(BaseModel):
    """Typed key/value configuration entry."""

    __tablename__ = "settings"
    __table_args__ = (
        UniqueConstraint("store_id", "group", "key", name="uq_settings_store_group_key"),
        # NULL store_ids never collide in the constraint above, so global rows need their own index
        Index(
            "uq_settings_global_group_key",
            "group",
            "key",
            unique=True,
            sqlite_where=text("store_id IS NULL"),
            postgresql_where=text("store_id IS NULL"),
        ),
    )

    store_id = Column(String(36), ForeignKey("stores.id", ondelete="CASCADE"), nullable=True, index=True)
    group = Column(String(100), nullable=False, index=True)
    key = Column(String(255), nullable=False)
    value = json_column(nullable=True)
    type = Column(
        Enum(*SettingType.values(), name="setting_type"),
        nullable=False,
        default=SettingType.STRING.value,
    )
    is_public = Column(Boolean, nullable=False, default=False)

    store = relationship("Store", back_populates="settings")

    def get_typed_value(self) -> Any:
        return typed_value(self.type or SettingType.STRING.value, self.value)

    def __repr__(self) -> str:
        return f"<Setting(store_id={self.store_id}, group='{self.group}', key='{self.key}', type='{self.type}')>"
