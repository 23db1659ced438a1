"""Tests for timestamp and duration helpers."""
from datetime import datetime, timedelta, timezone

from timetrack.utils.timeutil import (
    elapsed_seconds,
    ensure_utc,
    hours_difference,
    isoformat_utc,
    seconds_to_hours,
)


class TestEnsureUtc:
    """Tests for ensure_utc."""

    def test_naive_is_utc(self):
        """Test naive datetimes are taken as UTC."""
        value = ensure_utc(datetime(2025, 11, 10, 12, 0))

        assert value.tzinfo == timezone.utc
        assert value.hour == 12

    def test_offset_converted(self):
        """Test offset datetimes are converted to UTC."""
        offset = timezone(timedelta(hours=2))

        value = ensure_utc(datetime(2025, 11, 10, 12, 0, tzinfo=offset))

        assert value == datetime(2025, 11, 10, 10, 0, tzinfo=timezone.utc)
        assert value.tzinfo == timezone.utc


class TestIsoformatUtc:
    """Tests for isoformat_utc."""

    def test_z_suffix(self):
        """Test the Z suffix and second precision."""
        value = datetime(2025, 11, 10, 12, 0, 5, 123456, tzinfo=timezone.utc)

        assert isoformat_utc(value) == "2025-11-10T12:00:05Z"


class TestDurations:
    """Tests for duration helpers."""

    def test_elapsed_seconds_truncates(self):
        """Test partial seconds are dropped."""
        start = datetime(2025, 11, 10, tzinfo=timezone.utc)

        assert elapsed_seconds(start, start + timedelta(seconds=59.9)) == 59

    def test_seconds_to_hours(self):
        """Test conversion rounds to 2 decimals."""
        assert seconds_to_hours(0) == 0.0
        assert seconds_to_hours(3600) == 1.0
        assert seconds_to_hours(5400) == 1.5
        assert seconds_to_hours(1000) == 0.28

    def test_seconds_to_hours_rounds_half_up(self):
        """Test exact halves round away from zero."""
        # 18s = 0.005h
        assert seconds_to_hours(18) == 0.01
        # 54s = 0.015h
        assert seconds_to_hours(54) == 0.02

    def test_hours_difference(self):
        """Test difference of rounded totals is exact to 2 decimals."""
        assert hours_difference(3.5, 1.5) == 2.0
        assert hours_difference(0.3, 0.1) == 0.2
