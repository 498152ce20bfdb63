"""
Unwrap policies and endpoint descriptors.

Action endpoints use ThrowOnError: a normalized failure is raised as
APIError so callers handle every failure in one except block. Lookup
endpoints use FallbackOnError: any failure is logged and replaced by a
typed empty default.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union


from dhartisetu.exceptions import APIError
from dhartisetu.gateway.normalize import failure_message, is_failure

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "API Error"


@dataclass(frozen=True)
class ThrowOnError:
    """Raise APIError for failed responses, return the rest unchanged."""
    default_message: str = DEFAULT_ERROR_MESSAGE

    def unwrap(self, response: Any) -> Any:
        if is_failure(response):
            raise APIError(failure_message(response, self.default_message), response)
        return response

    def apply(self, send: Callable[[], Any]) -> Any:
        return self.unwrap(send())


@dataclass(frozen=True)
class FallbackOnError:
    """Return a fresh copy of `default` on any failure. Never raises."""
    default: Any

    def apply(self, send: Callable[[], Any]) -> Any:
        try:
            return THROW_ON_ERROR.unwrap(send())
        except Exception as e:
            logger.warning("Lookup failed, using default: %s", e)
            return copy.deepcopy(self.default)


THROW_ON_ERROR = ThrowOnError()

Policy = Union[ThrowOnError, FallbackOnError]


@dataclass(frozen=True)
class Endpoint:
    """One backend route: method, path and how its response is unwrapped."""
    method: str
    path: str
    policy: Policy = THROW_ON_ERROR
    multipart: bool = False

    def call(
        self,
        gateway,
        body: Any = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        # Let requests write multipart/form-data with its boundary
        headers = {"Content-Type": None} if self.multipart else None
        return self.policy.apply(
            lambda: gateway.send(
                self.method, self.path, body=body, files=files, headers=headers,
            )
        )
