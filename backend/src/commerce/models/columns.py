"""JSON column codec for structured model fields.

Structured fields (objects, arrays) are stored as JSON text. Writes always go
through ``prepare`` and produce JSON text or SQL NULL. Reads go through
``consume``, which tolerates whatever the driver hands back: JSON text,
already-decoded structures, NULL, or legacy text that is not JSON at all.
"""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import Column, Text
from sqlalchemy.types import TypeDecorator

from ..core.logging import get_logger
from ..utils import json_text

logger = get_logger(__name__)


class _Unset:
    """Marker for options that were not supplied."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

# Column.info key holding the external serialization name
SERIALIZE_AS_INFO_KEY = "serialize_as"


def prepare(value: Any) -> str | None:
    """Encode a structured value for storage; ``None`` stays SQL NULL.

    Non-finite floats nested in the value are written as ``null``.
    """
    if value is None:
        return None
    return json_text.dumps(value)


def consume(value: Any) -> Any:
    """Decode a stored value, returning the input unchanged when it is not JSON text."""
    if not isinstance(value, str):
        return value
    try:
        return json_text.loads(value)
    except ValueError:
        logger.debug("Stored column value is not valid JSON, returning raw text", extra={"length": len(value)})
        return value


@dataclass(frozen=True)
class JsonColumnOptions:
    """Per-field options handed through to the column declaration.

    ``column_name`` overrides the physical column name. ``serialize_as``
    overrides the key used by ``BaseModel.to_dict``; ``None`` hides the field.
    """

    column_name: str | None = None
    serialize_as: Any = UNSET


def json_column_options(column_name: str | None = None, serialize_as: Any = UNSET) -> JsonColumnOptions:
    return JsonColumnOptions(column_name=column_name, serialize_as=serialize_as)


class JsonText(TypeDecorator):
    """Text column that stores structured values as JSON."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> str | None:
        return prepare(value)

    def process_result_value(self, value: Any, dialect) -> Any:
        return consume(value)


def column_info(options: JsonColumnOptions | None, info: dict[str, Any] | None = None) -> dict[str, Any]:
    """Merge serialization options into a Column ``info`` mapping."""
    merged = dict(info or {})
    if options is not None and options.serialize_as is not UNSET:
        merged[SERIALIZE_AS_INFO_KEY] = options.serialize_as
    return merged


def json_column(options: JsonColumnOptions | None = None, **column_kwargs: Any) -> Column:
    """Declare a structured field backed by a JSON text column.

    Example::

        config = json_column(json_column_options(column_name="settings"), nullable=False)
    """
    options = options or JsonColumnOptions()
    info = column_info(options, column_kwargs.pop("info", None))
    if options.column_name:
        return Column(options.column_name, JsonText(), info=info, **column_kwargs)
    return Column(JsonText(), info=info, **column_kwargs)


def serialization_key(column: Column, attribute_key: str) -> str | None:
    """Name a column's attribute takes in serialized output, or ``None`` to omit it."""
    serialize_as = column.info.get(SERIALIZE_AS_INFO_KEY, UNSET)
    if serialize_as is UNSET:
        return attribute_key
    return serialize_as
