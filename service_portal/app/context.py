"""
Operation context for portal services.
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable

from .adapters.gateway_client import GatewayClient
from .caching.request_cache import RequestCache
from .state import PortalState


GatewayClientFactory = Callable[[], Awaitable[GatewayClient]]


@dataclass
class PortalContext:
    """Everything an operation needs: state, request cache and transport."""
    client_factory: GatewayClientFactory
    state: PortalState = field(default_factory=PortalState)
    cache: RequestCache = field(default_factory=RequestCache)
