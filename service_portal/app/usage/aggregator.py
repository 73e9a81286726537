"""
Date-bucketed aggregation of usage plan usage.
"""

from collections import defaultdict
from datetime import date, timedelta
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple, Union

from shared.errors import ValidationError


class UsageMetric(str, Enum):
    """Which half of a [used, remaining] pair to aggregate."""
    USED = "used"
    REMAINING = "remaining"


UsagePair = Sequence[int]
DailyUsage = Tuple[date, int]


def map_usage_by_date(usage: Dict[str, Any], used_or_remaining: Union[UsageMetric, str]) -> List[List[Any]]:
    """
    Sum per-key usage into one series ordered by date.

    ``usage`` is the body returned by the usage endpoint:
    ``{"items": {api_key_id: [[used, remaining], ...]}, "startDate": "YYYY-MM-DD"}``
    where element ``n`` of each key's list is the usage ``n`` days after
    ``startDate``. Returns ``[["YYYY-MM-DD", total], ...]``. Raises
    ValidationError when ``startDate`` is missing or not a calendar date.
    """
    start_date = _parse_start_date(usage.get("startDate"))
    index = 0 if used_or_remaining == UsageMetric.USED else 1

    totals: Dict[date, int] = defaultdict(int)
    for api_key_usage in usage.get("items", {}).values():
        for day, value in _map_api_key_usage_by_date(api_key_usage, start_date, index):
            totals[day] += value

    return [[day.isoformat(), totals[day]] for day in sorted(totals)]


def _map_api_key_usage_by_date(api_key_usage: Any, start_date: date, index: int) -> List[DailyUsage]:
    """Expand one key's usage into (day, value) pairs starting at start_date."""
    if not api_key_usage:
        return []

    # A single [used, remaining] pair stands for one day
    if not isinstance(api_key_usage[0], (list, tuple)):
        api_key_usage = [api_key_usage]

    return [
        (start_date + timedelta(days=offset), pair[index])
        for offset, pair in enumerate(api_key_usage)
    ]


def _parse_start_date(start_date: Any) -> date:
    try:
        year, month, day = (int(part) for part in start_date.split("-"))
        return date(year, month, day)
    except (AttributeError, TypeError, ValueError) as exc:
        raise ValidationError(
            f"Invalid usage startDate: {start_date!r}",
            details={"startDate": start_date, "error": str(exc)}
        ) from exc
