"""
Usage operations: fetching plan usage and aggregating it by date.
"""

from .aggregator import UsageMetric, map_usage_by_date
from .service import UsageService

__all__ = [
    "UsageMetric",
    "UsageService",
    "map_usage_by_date",
]
