"""
Request middleware: ordered hooks composed around every transport call.

Each middleware may rewrite the outgoing request before it is sent and may
turn a transport exception into a return value. The gateway runs the
`on_request` hooks in order before the call and, on failure, asks each
`on_error` hook in order until one returns a value.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dhartisetu.gateway.normalize import error_message, normalized_failure, response_body

logger = logging.getLogger(__name__)


@dataclass
class OutgoingRequest:
    """A single call as seen by the middleware chain."""
    method: str
    path: str
    base_url: str
    timeout: float
    json: Any = None
    data: Optional[Dict[str, Any]] = None
    files: Optional[Dict[str, Any]] = None
    headers: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"


class Middleware:
    """Base middleware: passes requests through and handles no errors."""

    def on_request(self, request: OutgoingRequest) -> OutgoingRequest:
        return request

    def on_error(self, request: OutgoingRequest, exc: Exception) -> Optional[Any]:
        return None


class RequestLogger(Middleware):
    """
    Logs one `[API] METHOD url` line per call, before it is sent.

    The line is emitted at INFO on the `dhartisetu` logger tree; call
    dhartisetu.configure_logging() (or configure logging in the host app)
    to see it on the console.
    """

    def on_request(self, request: OutgoingRequest) -> OutgoingRequest:
        logger.info("[API] %s %s", request.method.upper(), request.url)
        return request


class ErrorNormalizer(Middleware):
    """Converts any transport error into a normalized failure value."""

    def on_error(self, request: OutgoingRequest, exc: Exception) -> Dict[str, Any]:
        body = response_body(exc)
        logger.error("API Error: %s", body if body else exc)
        return normalized_failure(error_message(exc))
