"""
Base model classes for the commerce backend.

This module provides the shared mixins and base model with common
functionality for all database models.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from sqlalchemy.exc import MissingGreenlet
from sqlalchemy.orm import declarative_mixin

# Import Base from the database module to avoid duplicate declarations
from ..core.database import Base
from .columns import serialization_key


@declarative_mixin
class TimestampMixin:
    """Mixin for adding timestamp columns to models."""

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


@declarative_mixin
class UUIDMixin:
    """Mixin for adding UUID primary key to models."""

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))


class BaseModel(Base, TimestampMixin, UUIDMixin):
    """Base model class with common functionality."""

    __abstract__ = True

    def to_dict(self) -> dict:
        """Convert model to dictionary, honoring each column's ``serialize_as`` option."""
        result = {}
        for attr in self.__mapper__.column_attrs:
            key = serialization_key(attr.columns[0], attr.key)
            if key is None:
                continue
            try:
                result[key] = getattr(self, attr.key)
            except MissingGreenlet:
                # Deferred column accessed outside the async context
                result[key] = None
        return result

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
