"""Источник времени движка (unix seconds, аналог block.timestamp)."""

import time
from typing import Callable

Clock = Callable[[], int]


def system_clock() -> int:
    """Текущее время в целых секундах."""
    return int(time.time())
