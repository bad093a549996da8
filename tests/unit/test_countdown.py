# tests/unit/test_countdown.py

from datetime import datetime, timedelta, timezone

from utils.countdown import Countdown, compute_countdown

NOW = datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_breaks_difference_into_units():
    expiry = NOW + timedelta(days=2, hours=3, minutes=4, seconds=5, milliseconds=900)
    assert compute_countdown(expiry, NOW) == Countdown(expired=False, days=2, hours=3, mins=4, secs=5)


def test_expired_at_or_after_deadline():
    assert compute_countdown(NOW, NOW) == Countdown(expired=True)
    assert compute_countdown(NOW - timedelta(seconds=1), NOW).expired


def test_naive_timestamps_are_utc():
    expiry = datetime(2030, 1, 1, 13, 0, 0)
    assert compute_countdown(expiry, NOW) == Countdown(expired=False, hours=1)


def test_other_timezones_compare_by_instant():
    ist = timezone(timedelta(hours=5, minutes=30))
    expiry = datetime(2030, 1, 1, 18, 0, 30, tzinfo=ist)       # 12:30:30 UTC
    assert compute_countdown(expiry, NOW) == Countdown(expired=False, mins=30, secs=30)
