"""
API key lookup for the Developer Portal.
"""

from typing import Optional

from shared.logging import get_logger
from ..caching.request_cache import API_KEY
from ..context import PortalContext


class ApiKeyService:
    """Fetches the signed-in user's API key."""

    def __init__(self, context: PortalContext):
        self.context = context
        self.logger = get_logger("portal.api_key")

    async def update_api_key(self, bust_cache: bool = False) -> Optional[str]:
        """
        Fetch and update the API key in state.

        Both request and response are cached, so unless the cache is busted
        this only makes one network call.
        """
        state = self.context.state
        return await self.context.cache.fetch(API_KEY, state.api_key, self._fetch_api_key, bust_cache)

    async def _fetch_api_key(self) -> Optional[str]:
        client = await self.context.client_factory()
        self.logger.debug("Fetching API key")
        response = await client.get('/apikey', {}, {}, {})
        self.context.state.api_key = response.data["value"]
        return self.context.state.api_key
