"""
Database models for the commerce backend.

This package contains SQLAlchemy models for all database tables
used by the application.
"""

from .base import Base, BaseModel
from .columns import JsonColumnOptions, JsonText, consume, json_column, json_column_options, prepare
from .setting import Setting
from .store import Store

__all__ = [
    "Base",
    "BaseModel",
    "JsonColumnOptions",
    "JsonText",
    "consume",
    "json_column",
    "json_column_options",
    "prepare",
    "Setting",
    "Store",
]
