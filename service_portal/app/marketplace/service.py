"""
Marketplace integration for the Developer Portal.
"""

import asyncio
from typing import Optional

from shared.logging import get_logger
from ..adapters.gateway_client import GatewayResponse
from ..context import PortalContext


class MarketplaceService:
    """Confirms subscriptions that originate from a marketplace listing."""

    def __init__(self, context: PortalContext):
        self.context = context
        self.logger = get_logger("portal.marketplace")

    def confirm_marketplace_subscription(
        self,
        usage_plan_id: Optional[str],
        token: Optional[str],
    ) -> Optional["asyncio.Task[GatewayResponse]"]:
        """
        Confirm a marketplace subscription for a usage plan.

        Returns None without making a request when no usage plan id is
        given. Otherwise the PUT is scheduled right away on the running
        event loop and the returned task resolves to the response.
        """
        if not usage_plan_id:
            return None

        return asyncio.ensure_future(self._put_confirmation(usage_plan_id, token))

    async def _put_confirmation(self, usage_plan_id: str, token: Optional[str]) -> GatewayResponse:
        client = await self.context.client_factory()
        self.logger.info("Confirming marketplace subscription", usage_plan_id=usage_plan_id)
        return await client.put(f'/marketplace-subscriptions/{usage_plan_id}', {}, {"token": token})
