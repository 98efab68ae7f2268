"""
utils/time_utils.py

Purpose: Time and window helpers

- Naive-UTC "now" used across the store and services
- Days-until-due arithmetic for urgency
- Upcoming-window and calendar-month checks
- Report date ranges
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

DATE_RANGES = ("current_month", "last_month", "current_year", "last_year", "all")

SECONDS_PER_DAY = 86400


def utcnow() -> datetime:
    """
    Returns the current UTC time as a naive datetime.
    All stored timestamps use this representation.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Converts an aware datetime to naive UTC; naive values pass through.
    """
    if dt is None or dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def days_until(due: datetime, now: datetime) -> int:
    """
    Whole days remaining until `due`, rounded up.

    A due time 1 second ahead counts as 1 day; anything at or before
    `now` yields 0 or a negative number.
    """
    delta = (to_naive_utc(due) - to_naive_utc(now)).total_seconds()
    return math.ceil(delta / SECONDS_PER_DAY)


def is_within_window(due: datetime, now: datetime, days: int) -> bool:
    """
    Checks whether `due` falls on a calendar day between today and
    today + `days`, both ends inclusive.
    """
    today = to_naive_utc(now).date()
    due_day = to_naive_utc(due).date()
    return today <= due_day <= today + timedelta(days=days)


def is_same_month(dt: Optional[datetime], now: datetime) -> bool:
    """
    Checks whether `dt` is in the same calendar month and year as `now`.
    """
    if not dt:
        return False
    return dt.month == now.month and dt.year == now.year


def date_range_filter(range_key: str, now: datetime) -> Callable[[datetime], bool]:
    """
    Builds a predicate for one of the report date ranges.

    Args:
        range_key: One of DATE_RANGES
        now: Reference time

    Returns:
        Callable taking a datetime and returning True when it is in range

    Raises:
        ValueError: If the range key is unknown
    """
    if range_key == "current_month":
        return lambda dt: dt.month == now.month and dt.year == now.year
    if range_key == "last_month":
        last_month = 12 if now.month == 1 else now.month - 1
        last_month_year = now.year - 1 if now.month == 1 else now.year
        return lambda dt: dt.month == last_month and dt.year == last_month_year
    if range_key == "current_year":
        return lambda dt: dt.year == now.year
    if range_key == "last_year":
        return lambda dt: dt.year == now.year - 1
    if range_key == "all":
        return lambda dt: True
    raise ValueError(f"Unknown date range: {range_key}")


def format_timestamp(dt: Optional[datetime], format_str: str = "%d/%m/%Y", default: str = "N/A") -> str:
    """
    Formats a datetime (or date) to string.
    """
    if not dt:
        return default
    return dt.strftime(format_str)


def epoch_if_missing(dt: Optional[datetime]) -> datetime:
    """
    Sort key helper: missing timestamps sort as the Unix epoch.
    """
    return dt if dt is not None else datetime(1970, 1, 1)
