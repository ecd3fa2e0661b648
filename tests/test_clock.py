"""Tests for the system clock adapter."""

from datetime import timedelta

from travel_schedules.adapters.clock import SystemClock


def test_now_is_aware_in_configured_timezone() -> None:
    """Given a timezone, when reading the clock, then the time carries that zone."""
    now = SystemClock("Asia/Tokyo").now()

    assert now.tzinfo is not None
    assert str(now.tzinfo) == "Asia/Tokyo"
    assert now.utcoffset() == timedelta(hours=9)
