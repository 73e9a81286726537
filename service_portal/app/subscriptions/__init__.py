"""
Subscription operations: listing, subscribing and unsubscribing.
"""

from .service import SubscriptionService

__all__ = [
    "SubscriptionService",
]
