"""
Python client for the DhartiSetu agricultural prediction backend.

Modules:
    config         — Settings loaded from DHARTISETU_API_URL / DHARTISETU_API_TIMEOUT
    gateway        — Shared HTTP gateway, middleware and unwrap policies
    endpoints      — Location, plant disease, soil, crop, weather, market, water
    schemas        — Typed request bodies
    api            — DhartiSetuClient facade and process-wide client

Request lines (`[API] POST ...`) are logged at INFO. Call configure_logging()
once at startup to print them.
"""

from dhartisetu.api import DhartiSetuClient, get_client, reset_client
from dhartisetu.config import Settings, load_settings
from dhartisetu.exceptions import APIError, ConfigurationError, DhartiSetuError
from dhartisetu.logging_utils import configure_logging

__version__ = "1.0.0"

__all__ = [
    "DhartiSetuClient", "get_client", "reset_client",
    "Settings", "load_settings",
    "APIError", "ConfigurationError", "DhartiSetuError",
    "configure_logging",
]
