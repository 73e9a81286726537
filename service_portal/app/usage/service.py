"""
Usage retrieval for subscribed usage plans.
"""

from datetime import date
from typing import Callable

from shared.logging import get_logger
from ..adapters.gateway_client import GatewayResponse
from ..context import PortalContext


class UsageService:
    """Fetches month-to-date usage for a usage plan."""

    def __init__(self, context: PortalContext, today: Callable[[], date] = date.today):
        self.context = context
        self.today = today
        self.logger = get_logger("portal.usage")

    async def fetch_usage(self, usage_plan_id: str) -> GatewayResponse:
        """Fetch usage from the first of the current month until today (local time)."""
        today = self.today()
        start = today.replace(day=1).isoformat()
        end = today.isoformat()

        client = await self.context.client_factory()
        self.logger.debug("Fetching usage", usage_plan_id=usage_plan_id, start=start, end=end)
        return await client.get(f'/subscriptions/{usage_plan_id}/usage', {"start": start, "end": end}, {})
