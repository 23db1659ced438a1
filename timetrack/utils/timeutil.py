"""Timestamp and duration helpers."""
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP


ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_SECONDS_PER_HOUR = Decimal(3600)
_HUNDREDTHS = Decimal("0.01")


def ensure_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to an aware UTC datetime.

    Naive values are interpreted as UTC; aware values are converted.

    Examples:
        >>> ensure_utc(datetime(2025, 11, 10, 12, 0))
        datetime.datetime(2025, 11, 10, 12, 0, tzinfo=datetime.timezone.utc)
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def isoformat_utc(value: datetime) -> str:
    """
    Render a datetime as ISO-8601 UTC with a Z suffix.

    Examples:
        >>> isoformat_utc(datetime(2025, 11, 10, 12, 0, tzinfo=timezone.utc))
        '2025-11-10T12:00:00Z'
    """
    return ensure_utc(value).strftime(ISO_FORMAT)


def elapsed_seconds(start: datetime, end: datetime) -> int:
    """Whole seconds between two datetimes, truncated toward zero."""
    delta = end - start
    return int(delta.total_seconds())


def hours_difference(total: float, part: float) -> float:
    """
    Subtract two already-rounded hour totals, rounded to 2 decimals.

    Examples:
        >>> hours_difference(3.5, 1.5)
        2.0
    """
    difference = Decimal(str(total)) - Decimal(str(part))
    return float(difference.quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))


def seconds_to_hours(seconds: int) -> float:
    """
    Convert seconds to hours rounded to 2 decimal places.

    Examples:
        >>> seconds_to_hours(5400)
        1.5
        >>> seconds_to_hours(18)
        0.01
    """
    hours = Decimal(seconds) / _SECONDS_PER_HOUR
    return float(hours.quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))
