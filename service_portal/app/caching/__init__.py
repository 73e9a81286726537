"""
Portal caching package.

Provides the single-flight request cache used to deduplicate catalog,
subscription and API key fetches for the lifetime of a session.
"""

from .request_cache import RequestCache, CATALOG, SUBSCRIPTIONS, API_KEY

__all__ = [
    "RequestCache",
    "CATALOG",
    "SUBSCRIPTIONS",
    "API_KEY",
]
