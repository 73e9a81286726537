"""
Single-flight request cache for portal fetches.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional

from shared.logging import get_logger


CATALOG = "catalog"
SUBSCRIPTIONS = "subscriptions"
API_KEY = "api_key"


class RequestCache:
    """Holds at most one in-flight or finished fetch task per resource.

    Slots are overwritten by cache-busting fetches and otherwise live as
    long as the cache does. A task is stored before it is awaited, so any
    caller arriving while the request is pending reuses it instead of
    issuing a second request.
    """

    SLOTS = (CATALOG, SUBSCRIPTIONS, API_KEY)

    def __init__(self):
        self.logger = get_logger("portal.request_cache")
        self._slots: Dict[str, Optional[asyncio.Task]] = {name: None for name in self.SLOTS}

    def get(self, slot: str) -> Optional[asyncio.Task]:
        """Return the task currently held in a slot, if any."""
        return self._slots[slot]

    def start(self, slot: str, fetch: Awaitable[Any]) -> asyncio.Task:
        """Schedule a fetch and store its task in the slot."""
        if slot not in self._slots:
            raise KeyError(f"Unknown cache slot: {slot}")
        task = asyncio.ensure_future(fetch)
        self._slots[slot] = task
        return task

    async def fetch(
        self,
        slot: str,
        cached_value: Any,
        fetch: Callable[[], Awaitable[Any]],
        bust_cache: bool = False,
    ) -> Any:
        """Return cached state, join the slot's task, or start a new fetch.

        ``cached_value`` is the value already in application state; a
        truthy value wins over the slot unless ``bust_cache`` is set.
        """
        if not bust_cache:
            if cached_value:
                return cached_value
            task = self._slots[slot]
            if task is not None:
                self.logger.debug("Joining cached request", slot=slot, done=task.done())
                return await asyncio.shield(task)

        task = self.start(slot, fetch())
        # shield: cancelling one waiter must not cancel the shared request
        return await asyncio.shield(task)
