"""Date helpers for day-granularity booking keys"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil.relativedelta import relativedelta

SIX_MONTHS = relativedelta(months=6)


def normalize_to_utc_midnight(value: str) -> datetime:
    """
    Reduce an ISO date string to its calendar day at midnight UTC.

    The year, month and day are taken as written in the input; any
    time-of-day or offset is discarded, so "2024-03-15T18:30:00+05:00"
    and "2024-03-15" both map to 2024-03-15T00:00:00Z.

    Raises:
        ValueError: If the string is not a valid ISO date
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Date must be a non-empty ISO string")

    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    return datetime(parsed.year, parsed.month, parsed.day, tzinfo=timezone.utc)


def day_bounds(day_start: datetime) -> tuple[datetime, datetime]:
    """Naive UTC [start, end) range covering one calendar day"""
    start = day_start.replace(tzinfo=None)
    return start, start + timedelta(days=1)


def to_iso_utc(value: Optional[datetime]) -> Optional[str]:
    """Render a naive UTC datetime as an ISO string with a Z suffix"""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def six_month_warning(booking_date: datetime, previous_booking_date: Optional[datetime]) -> bool:
    """True when the canine has not attended within the six months before booking_date"""
    if previous_booking_date is None:
        return True
    return previous_booking_date < booking_date - SIX_MONTHS
