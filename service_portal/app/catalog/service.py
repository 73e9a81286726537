"""
Catalog operations for the Developer Portal.
"""

from typing import List, Optional

from shared.logging import get_logger
from ..caching.request_cache import CATALOG
from ..context import PortalContext
from ..state import ApiDescriptor


# Special selectors accepted by get_api; both pick the first gateway API
FIRST = "FIRST"
ANY = "ANY"


class CatalogService:
    """Loads the API catalog and resolves individual APIs from it."""

    def __init__(self, context: PortalContext):
        self.context = context
        self.logger = get_logger("portal.catalog")

    async def update_catalog_and_apis_list(self, bust_cache: bool = False) -> List[ApiDescriptor]:
        """
        Update the catalog for the current user.

        Both request and response are cached, so unless the cache is busted
        this only makes one network call. A failed request never raises: the
        catalog is reset to an empty list instead.
        """
        state = self.context.state
        return await self.context.cache.fetch(CATALOG, state.catalog, self._fetch_catalog, bust_cache)

    async def _fetch_catalog(self) -> List[ApiDescriptor]:
        state = self.context.state
        try:
            client = await self.context.client_factory()
            self.logger.debug("Fetching catalog")
            response = await client.get('/catalog', {}, {}, {})
        except Exception as exc:
            self.logger.warning("Catalog fetch failed, using empty catalog", error=str(exc))
            state.catalog = []
            return state.catalog

        state.catalog = response.data if response.data is not None else []
        return state.catalog

    async def get_api(self, api_id: str, select_it: bool = False) -> Optional[ApiDescriptor]:
        """
        Return the API with the provided id.

        ``api_id`` may also be the special strings "FIRST" or "ANY", which
        both return the first gateway API. When ``select_it`` is true the
        result (even None) becomes the selected API in state.
        """
        await self.update_catalog_and_apis_list()

        state = self.context.state
        api_list = state.api_list
        this_api = None

        if api_list.api_gateway:
            if api_id in (FIRST, ANY):
                this_api = api_list.api_gateway[0]
            else:
                this_api = next((api for api in api_list.api_gateway if api.get("id") == api_id), None)

        if this_api is None:
            this_api = next((api for api in api_list.generic if str(api.get("id")) == api_id), None)

        if select_it:
            state.api = this_api

        return this_api
