import time
from typing import Callable
from utils.constants import RECENT_POST_WINDOW_SECONDS


def now_seconds(clock: Callable[[], float] = time.time) -> int:
    return int(clock())


def is_recent(timestamp: int, now: int) -> bool:
    """A post is recent while it is strictly less than a day old."""
    return timestamp > now - RECENT_POST_WINDOW_SECONDS
