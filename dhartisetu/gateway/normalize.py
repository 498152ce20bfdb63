"""
Normalized failure values: the uniform shape every transport error is
converted into before it reaches endpoint code.

    {"success": False, "error": True, "message": "<why>", "data": None}
"""

import logging
from typing import Any, Dict, Literal, Optional

import requests
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Server error"


class NormalizedFailure(BaseModel):
    """Schema of a normalized failure value."""
    success: Literal[False] = False
    error: Literal[True] = True
    message: str
    data: None = None


def normalized_failure(message: str) -> Dict[str, Any]:
    """Build a normalized failure dict carrying `message`."""
    return NormalizedFailure(message=message or FALLBACK_MESSAGE).model_dump()


def response_body(exc: Exception) -> Any:
    """
    Return the server-provided body attached to a requests exception.

    JSON bodies are decoded; anything else is returned as text. None if the
    exception carries no response (connection errors, timeouts).
    """
    response: Optional[requests.Response] = getattr(exc, "response", None)
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _detail_text(detail: Any) -> str:
    # FastAPI validation errors: [{"loc": [...], "msg": "...", "type": "..."}]
    if isinstance(detail, list):
        messages = [
            str(item.get("msg")) for item in detail
            if isinstance(item, dict) and item.get("msg")
        ]
        if messages:
            return "; ".join(messages)
    return str(detail)


def error_message(exc: Exception) -> str:
    """
    Derive the most specific message for a failed request.

    Order: body `detail` -> body `message` -> exception text -> "Server error".
    """
    body = response_body(exc)
    if isinstance(body, dict):
        if body.get("detail"):
            return _detail_text(body["detail"])
        if body.get("message"):
            return str(body["message"])
    text = str(exc)
    if text:
        return text
    return FALLBACK_MESSAGE


def is_failure(value: Any) -> bool:
    """True if `value` is absent or flagged as an error."""
    if value is None:
        return True
    if isinstance(value, dict):
        return bool(value.get("error"))
    return False


def failure_message(value: Any, default: str) -> str:
    """Message carried by a failure value, or `default` when it has none."""
    if not isinstance(value, dict):
        return default
    try:
        return NormalizedFailure.model_validate(value).message or default
    except ValidationError:
        logger.debug("Failure value does not match the normalized shape: %r", value)
    message = value.get("message")
    return str(message) if message else default
