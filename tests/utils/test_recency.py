from utils.constants import RECENT_POST_WINDOW_SECONDS
from utils.recency import is_recent, now_seconds


def test_window_is_one_day():
    assert RECENT_POST_WINDOW_SECONDS == 86400


def test_is_recent_boundaries():
    now = 1_000_000
    assert is_recent(now - 86399, now)
    assert not is_recent(now - 86400, now)
    assert not is_recent(now - 90000, now)
    assert is_recent(now, now)


def test_future_timestamps_are_recent():
    assert is_recent(2_000_000, 1_000_000)


def test_now_seconds_truncates():
    assert now_seconds(lambda: 1234.999) == 1234
