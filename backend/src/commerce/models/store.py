"""Store model.

A store owns its catalog-wide configuration: scalar columns for the common
fields, the free-form ``config`` and ``meta`` JSON columns, and the typed
``Setting`` rows.
"""

from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from .base import BaseModel
from .columns import json_column, json_column_options


class Store(BaseModel):
    """A storefront and its configuration."""

    __tablename__ = "stores"

    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    domain = Column(String(255), nullable=True)
    logo_url = Column(String(1024), nullable=True)
    default_locale = Column(String(10), nullable=False, default="en")
    default_currency = Column(String(3), nullable=False, default="USD")
    timezone = Column(String(64), nullable=False, default="UTC")
    is_active = Column(Boolean, nullable=False, default=True)

    # Stored in the legacy ``settings`` column; exposed as ``config`` to avoid
    # clashing with the ``settings`` relationship below
    config = json_column(json_column_options(column_name="settings"), nullable=False, default=dict)
    meta = json_column(nullable=False, default=dict)

    settings = relationship(
        "Setting",
        back_populates="store",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Store(id={self.id}, slug='{self.slug}')>"
