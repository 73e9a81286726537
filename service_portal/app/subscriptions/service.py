"""
Subscription operations for the Developer Portal.
"""

from typing import List, Optional

from shared.logging import get_logger
from ..caching.request_cache import SUBSCRIPTIONS
from ..context import PortalContext
from ..state import Subscription


class SubscriptionService:
    """Reads and changes the user's usage plan subscriptions."""

    def __init__(self, context: PortalContext):
        self.context = context
        self.logger = get_logger("portal.subscriptions")

    async def update_subscriptions(self, bust_cache: bool = False) -> List[Subscription]:
        """
        Fetch and update subscriptions in state.

        Uses the request cache to decide whether to fetch or return the
        stored result. Request errors propagate to the caller.
        """
        state = self.context.state
        return await self.context.cache.fetch(SUBSCRIPTIONS, state.subscriptions, self._fetch_subscriptions, bust_cache)

    async def _fetch_subscriptions(self) -> List[Subscription]:
        client = await self.context.client_factory()
        self.logger.debug("Fetching subscriptions")
        response = await client.get('/subscriptions', {}, {}, {})
        self.context.state.subscriptions = response.data
        return response.data

    def get_subscribed_usage_plan(self, usage_plan_id: str) -> Optional[Subscription]:
        """Return the current subscription to a usage plan, without fetching."""
        return next((sub for sub in self.context.state.subscriptions or [] if sub.get("id") == usage_plan_id), None)

    async def subscribe(self, usage_plan_id: str) -> List[Subscription]:
        client = await self.context.client_factory()
        await client.put(f'/subscriptions/{usage_plan_id}', {}, {})
        self.logger.info("Subscribed to usage plan", usage_plan_id=usage_plan_id)
        return await self.update_subscriptions(bust_cache=True)

    async def unsubscribe(self, usage_plan_id: str) -> List[Subscription]:
        client = await self.context.client_factory()
        await client.delete(f'/subscriptions/{usage_plan_id}', {}, {})
        self.logger.info("Unsubscribed from usage plan", usage_plan_id=usage_plan_id)
        return await self.update_subscriptions(bust_cache=True)
