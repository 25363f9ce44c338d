"""Response helpers for the commerce API.

Wraps payloads in the ``{"data": ...}`` / ``{"error": ...}`` envelopes used by
every endpoint.
"""

import math
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from .logging import get_logger

logger = get_logger(__name__)


def to_serializable(obj: Any) -> Any:
    """Recursively convert Pydantic models, lists and dicts to JSON-safe types.

    Non-finite floats (NaN from numeric coercion, infinities) become ``None``
    since JSON has no literal for them.
    """
    if hasattr(obj, "model_dump"):
        return to_serializable(obj.model_dump())
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    if isinstance(obj, (list, tuple)):
        return [to_serializable(item) for item in obj]
    if isinstance(obj, dict):
        return {k: to_serializable(v) for k, v in obj.items()}
    return obj


class CommerceResponse:
    """Consistent single-envelope responses for API endpoints."""

    @staticmethod
    def success(
        data: Any, status_code: int = status.HTTP_200_OK, headers: dict[str, str] | None = None
    ) -> JSONResponse:
        response_content = jsonable_encoder({"data": to_serializable(data)})
        logger.debug(
            "Creating success response",
            extra={"status_code": status_code, "data_type": type(data).__name__},
        )
        return JSONResponse(content=response_content, status_code=status_code, headers=headers)

    @staticmethod
    def error(
        message: str,
        code: str = "API_ERROR",
        details: Any | None = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        error_content: dict[str, Any] = {"error": {"message": message, "code": code}}
        if details is not None:
            error_content["error"]["details"] = to_serializable(details)
        return JSONResponse(content=jsonable_encoder(error_content), status_code=status_code, headers=headers)

    @staticmethod
    def no_content(headers: dict[str, str] | None = None) -> Response:
        return Response(content=b"", status_code=status.HTTP_204_NO_CONTENT, headers=headers)
