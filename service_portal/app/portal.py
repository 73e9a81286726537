"""
Developer Portal data-access facade.
"""

import asyncio
from typing import Any, List, Optional

from shared.config import PortalConfig, get_config
from shared.logging import configure_logging, get_logger
from .account.api_key import ApiKeyService
from .adapters.gateway_client import GatewayClientAccessor, GatewayResponse
from .caching.request_cache import RequestCache
from .catalog.service import CatalogService
from .context import GatewayClientFactory, PortalContext
from .marketplace.service import MarketplaceService
from .state import ApiDescriptor, PortalState, Subscription
from .subscriptions.service import SubscriptionService
from .usage.aggregator import map_usage_by_date
from .usage.service import UsageService


class DevPortal:
    """Entry point bundling every portal operation over one session state.

    The application owns ``state.api_list`` and must populate it;
    ``get_api`` only searches that list and never derives it from the catalog.
    """

    def __init__(
        self,
        client_factory: GatewayClientFactory,
        state: Optional[PortalState] = None,
        cache: Optional[RequestCache] = None,
    ):
        self.context = PortalContext(
            client_factory=client_factory,
            state=state if state is not None else PortalState(),
            cache=cache if cache is not None else RequestCache(),
        )
        self.logger = get_logger("portal.facade")

        self.catalog = CatalogService(self.context)
        self.subscriptions = SubscriptionService(self.context)
        self.api_keys = ApiKeyService(self.context)
        self.usage = UsageService(self.context)
        self.marketplace = MarketplaceService(self.context)

    @classmethod
    def from_config(cls, config: Optional[PortalConfig] = None) -> "DevPortal":
        """Build a portal talking to the configured gateway."""
        config = config or get_config()
        configure_logging(config.service_name, config.log_level)
        return cls(GatewayClientAccessor(config))

    @property
    def state(self) -> PortalState:
        return self.context.state

    async def update_all_user_data(self, bust_cache: bool = True) -> List[Any]:
        """
        Refresh catalog, subscriptions and API key concurrently.

        Busts the cache by default. Raises if the subscriptions or API key
        fetch fails; the catalog fetch never raises.
        """
        self.logger.debug("Updating all user data", bust_cache=bust_cache)
        return await asyncio.gather(
            self.catalog.update_catalog_and_apis_list(bust_cache),
            self.subscriptions.update_subscriptions(bust_cache),
            self.api_keys.update_api_key(bust_cache),
        )

    async def update_catalog_and_apis_list(self, bust_cache: bool = False) -> List[ApiDescriptor]:
        return await self.catalog.update_catalog_and_apis_list(bust_cache)

    async def get_api(self, api_id: str, select_it: bool = False) -> Optional[ApiDescriptor]:
        return await self.catalog.get_api(api_id, select_it)

    async def update_subscriptions(self, bust_cache: bool = False) -> List[Subscription]:
        return await self.subscriptions.update_subscriptions(bust_cache)

    def get_subscribed_usage_plan(self, usage_plan_id: str) -> Optional[Subscription]:
        return self.subscriptions.get_subscribed_usage_plan(usage_plan_id)

    async def subscribe(self, usage_plan_id: str) -> List[Subscription]:
        return await self.subscriptions.subscribe(usage_plan_id)

    async def unsubscribe(self, usage_plan_id: str) -> List[Subscription]:
        return await self.subscriptions.unsubscribe(usage_plan_id)

    async def update_api_key(self, bust_cache: bool = False) -> Optional[str]:
        return await self.api_keys.update_api_key(bust_cache)

    async def fetch_usage(self, usage_plan_id: str) -> GatewayResponse:
        return await self.usage.fetch_usage(usage_plan_id)

    map_usage_by_date = staticmethod(map_usage_by_date)

    def confirm_marketplace_subscription(
        self,
        usage_plan_id: Optional[str],
        token: Optional[str],
    ) -> Optional["asyncio.Task[GatewayResponse]"]:
        return self.marketplace.confirm_marketplace_subscription(usage_plan_id, token)
