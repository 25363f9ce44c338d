"""Strict JSON text helpers.

The stdlib ``json`` module reads and writes ``NaN``/``Infinity`` by default.
Those tokens are not JSON, so stored text is parsed and produced without them.
"""

import json
import math
from typing import Any


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {token}")


def loads(text: str) -> Any:
    """Parse JSON text, rejecting ``NaN``, ``Infinity`` and ``-Infinity``.

    Raises ``ValueError`` (``json.JSONDecodeError`` for syntax errors).
    """
    return json.loads(text, parse_constant=_reject_constant)


def _finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def dumps(value: Any) -> str:
    """Serialize to JSON text; non-finite floats are written as ``null``."""
    return json.dumps(_finite(value), allow_nan=False)
