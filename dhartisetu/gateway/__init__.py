"""
Transport layer shared by every endpoint group.

Modules:
    client      — RequestGateway: session, base URL, timeout, send()
    middleware  — Request logging and error normalization hooks
    normalize   — Normalized failure shape and message derivation
    policies    — ThrowOnError / FallbackOnError unwrap and Endpoint descriptors
"""

from dhartisetu.gateway.client import RequestGateway
from dhartisetu.gateway.policies import Endpoint, FallbackOnError, ThrowOnError

__all__ = ["RequestGateway", "Endpoint", "FallbackOnError", "ThrowOnError"]
