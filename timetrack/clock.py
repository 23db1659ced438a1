"""Clock abstraction so "now" can be pinned in tests."""
from datetime import datetime, timedelta, timezone

from fastapi import Request

from timetrack.utils.timeutil import ensure_utc


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Clock that only moves when told to.

    Args:
        start: Initial time; naive values are taken as UTC
    """

    def __init__(self, start: datetime):
        self._now = ensure_utc(start)

    def now(self) -> datetime:
        return self._now

    def set(self, value: datetime) -> None:
        self._now = ensure_utc(value)

    def advance(self, **kwargs) -> datetime:
        """Move the clock forward by a timedelta built from kwargs."""
        self._now = self._now + timedelta(**kwargs)
        return self._now


def get_clock(request: Request):
    """Dependency to get the application clock."""
    return request.app.state.clock
