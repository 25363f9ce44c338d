"""Typed interpretation of stored setting values.

A setting row carries a loosely typed ``value`` and a ``type`` tag. The tag
decides how the value is read back:

- ``number``: numeric coercion; unparseable input becomes NaN.
- ``boolean``: truthiness coercion (``""``, ``0``, NaN and ``None`` are false).
- ``json`` / ``array``: JSON text is decoded, already-decoded values pass through.
- ``string`` and unknown tags: the value is returned as stored.
"""

import math
import re
from enum import Enum
from typing import Any

from ..core.exceptions import SettingValueDecodeError
from . import json_text

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_HEX_RE = re.compile(r"0[xX][0-9a-fA-F]+")
_INFINITY_RE = re.compile(r"([+-]?)Infinity")


class SettingType(str, Enum):
    """Type tags a setting can be declared with."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    JSON = "json"
    ARRAY = "array"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


def coerce_number(raw_value: Any) -> int | float:
    """Coerce a stored value to a number without raising.

    Integral text yields an ``int``, decimal or exponent text a ``float``;
    ``0x`` hex literals and ``Infinity`` are accepted as well. ``None`` and
    blank strings are zero; anything else that does not parse is NaN.
    """
    if raw_value is None:
        return 0
    if isinstance(raw_value, bool):
        return int(raw_value)
    if isinstance(raw_value, (int, float)):
        return raw_value
    if not isinstance(raw_value, str):
        return math.nan

    text = raw_value.strip()
    if not text:
        return 0
    if _INTEGER_RE.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Beyond the interpreter's int digit limit; float saturates to inf
            return float(text)
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    if _HEX_RE.fullmatch(text):
        return int(text, 16)
    infinity = _INFINITY_RE.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return math.nan


def coerce_boolean(raw_value: Any) -> bool:
    """Coerce a stored value to a boolean by truthiness.

    Note that the string ``"false"`` is non-empty and therefore ``True``.
    Containers are truthy even when empty.
    """
    if raw_value is None:
        return False
    if isinstance(raw_value, bool):
        return raw_value
    if isinstance(raw_value, (int, float)):
        return not (raw_value == 0 or math.isnan(raw_value))
    if isinstance(raw_value, str):
        return raw_value != ""
    return True


def decode_json_value(setting_type: str, raw_value: Any) -> Any:
    """Decode JSON text for json/array settings; non-strings pass through."""
    if not isinstance(raw_value, str):
        return raw_value
    try:
        return json_text.loads(raw_value)
    except ValueError as e:
        reason = getattr(e, "msg", str(e))
        raise SettingValueDecodeError(
            setting_type, reason, details={"type": setting_type, "position": getattr(e, "pos", None)}
        ) from e


def typed_value(setting_type: str | SettingType, raw_value: Any) -> Any:
    """Return ``raw_value`` interpreted according to ``setting_type``."""
    tag = setting_type.value if isinstance(setting_type, SettingType) else setting_type

    if tag == SettingType.NUMBER.value:
        return coerce_number(raw_value)
    if tag == SettingType.BOOLEAN.value:
        return coerce_boolean(raw_value)
    if tag in (SettingType.JSON.value, SettingType.ARRAY.value):
        return decode_json_value(tag, raw_value)
    return raw_value
