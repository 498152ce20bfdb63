"""
RequestGateway: the single point of outbound HTTP communication.

Owns one requests.Session configured from Settings and runs every call
through the middleware chain (request logging, error normalization).
Transport failures never escape `send`; they come back as normalized
failure values.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from dhartisetu.config import Settings
from dhartisetu.gateway.middleware import (
    ErrorNormalizer,
    Middleware,
    OutgoingRequest,
    RequestLogger,
)

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST")


def default_middlewares() -> List[Middleware]:
    """Logging first, so the request line is emitted before any failure."""
    return [RequestLogger(), ErrorNormalizer()]


class RequestGateway:
    """
    Shared HTTP client for all endpoint groups.

    Args:
        settings: Base URL, timeout and default headers
        session: requests.Session to use (default: a new one)
        middlewares: Ordered middleware chain (default: logger + normalizer)
    """

    def __init__(
        self,
        settings: Settings,
        session: Optional[requests.Session] = None,
        middlewares: Optional[List[Middleware]] = None,
    ):
        self.settings = settings
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(settings.default_headers)
        self.middlewares = (
            list(middlewares) if middlewares is not None else default_middlewares()
        )

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        files: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, Optional[str]]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Perform one HTTP call against the backend.

        Args:
            method: 'GET' or 'POST'
            path: Backend-relative route, e.g. '/location/states'
            body: JSON-serialisable body, or form fields when `files` is given
            files: Multipart file parts, as accepted by requests
            headers: Per-call header overrides; None values drop a default header
            timeout: Per-call timeout in seconds (default: settings.timeout_s)

        Returns:
            The decoded JSON body on success (None for an empty body), or a
            normalized failure dict when the call failed.

        Raises:
            ValueError: If the HTTP method is not supported.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(
                f"Unsupported HTTP method '{method}'. Use one of {SUPPORTED_METHODS}"
            )

        request = OutgoingRequest(
            method=method,
            path=path,
            base_url=self.settings.base_url,
            timeout=timeout if timeout is not None else self.settings.timeout_s,
            headers=dict(headers or {}),
        )
        if files:
            request.data = body
            request.files = files
        else:
            request.json = body

        for middleware in self.middlewares:
            request = middleware.on_request(request)

        try:
            resp = self.session.request(
                request.method,
                request.url,
                json=request.json,
                data=request.data,
                files=request.files,
                headers=request.headers or None,
                timeout=request.timeout,
            )
            resp.raise_for_status()
            return self._decode(resp)
        except requests.exceptions.RequestException as e:
            for middleware in self.middlewares:
                result = middleware.on_error(request, e)
                if result is not None:
                    return result
            raise

    @staticmethod
    def _decode(resp: requests.Response) -> Any:
        if not resp.content:
            return None
        return resp.json()

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
