"""
Adapters package for the Developer Portal.

Contains the HTTP client wrapper for the API gateway. The adapter
encapsulates:

- Base URL, timeout and credential headers
- Request shapes (path, query, JSON body)
- Error handling that maps to shared errors

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .gateway_client import GatewayClient, GatewayClientAccessor, GatewayResponse

__all__ = [
    "GatewayClient",
    "GatewayClientAccessor",
    "GatewayResponse",
]
