"""
Application state for the Developer Portal.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


ApiDescriptor = Dict[str, Any]
Subscription = Dict[str, Any]


@dataclass
class ApiList:
    """APIs split by origin: gateway-managed and generic (uploaded specs)."""
    api_gateway: List[ApiDescriptor] = field(default_factory=list)
    generic: List[ApiDescriptor] = field(default_factory=list)


@dataclass
class PortalState:
    """Mutable state shared by every portal operation for one session.

    Operations read and overwrite these fields directly; nothing here
    enforces consistency between them. The application owns ``api_list``:
    loading the catalog does not derive it, so fill it before calling
    ``get_api``.
    """
    catalog: List[ApiDescriptor] = field(default_factory=list)
    api_list: ApiList = field(default_factory=ApiList)
    api: Optional[ApiDescriptor] = None
    subscriptions: List[Subscription] = field(default_factory=list)
    api_key: Optional[str] = None
