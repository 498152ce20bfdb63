"""
Client configuration loaded from environment variables.

Environment:
    DHARTISETU_API_URL      — backend root URL (required), e.g.
                              https://crimson1232-dhartisetu-backend.hf.space
    DHARTISETU_API_TIMEOUT  — per-request timeout in seconds (default 120)
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from dhartisetu.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

API_URL_ENV = "DHARTISETU_API_URL"
API_TIMEOUT_ENV = "DHARTISETU_API_TIMEOUT"

API_PREFIX = "/api/v1"

# ML image inference on the backend can take well over a minute
DEFAULT_TIMEOUT_S = 120.0


def _default_headers() -> Dict[str, str]:
    return {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Settings:
    """Immutable HTTP client configuration."""
    base_url: str
    timeout_s: float = DEFAULT_TIMEOUT_S
    default_headers: Dict[str, str] = field(default_factory=_default_headers)


def build_base_url(root_url: str) -> str:
    """Append the API version prefix to a backend root URL."""
    root = (root_url or "").strip().rstrip("/")
    if not root:
        raise ConfigurationError(
            f"{API_URL_ENV} must be set to the backend root URL"
        )
    return f"{root}{API_PREFIX}"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        Settings with base_url already suffixed with /api/v1.

    Raises:
        ConfigurationError: If the backend URL is missing or the timeout
            is not a positive number.
    """
    if environ is None:
        environ = os.environ

    base_url = build_base_url(environ.get(API_URL_ENV, ""))

    timeout_s = DEFAULT_TIMEOUT_S
    raw_timeout = environ.get(API_TIMEOUT_ENV)
    if raw_timeout:
        try:
            timeout_s = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"{API_TIMEOUT_ENV} must be a number of seconds, got '{raw_timeout}'"
            )
        if timeout_s <= 0:
            raise ConfigurationError(f"{API_TIMEOUT_ENV} must be positive")

    logger.debug("Loaded client settings: base_url=%s timeout=%.0fs", base_url, timeout_s)
    return Settings(base_url=base_url, timeout_s=timeout_s)
