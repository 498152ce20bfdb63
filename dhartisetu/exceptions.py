"""
Exception types raised by the DhartiSetu client.
"""

from typing import Dict, Optional


class DhartiSetuError(Exception):
    """Base class for all client errors."""


class ConfigurationError(DhartiSetuError, ValueError):
    """Raised when required client configuration is missing or invalid."""


class APIError(DhartiSetuError):
    """
    Raised by action endpoints when the backend call failed.

    Attributes:
        message: Most specific failure message available
        response: The normalized response that triggered the error, if any
    """

    def __init__(self, message: str, response: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.response = response
