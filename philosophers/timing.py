"""Millisecond clock and a sleep that does not overshoot."""

import time


def now_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(milliseconds: int) -> None:
    """Sleep in short steps until at least `milliseconds` have passed."""
    start = now_ms()
    while now_ms() - start < milliseconds:
        time.sleep(0.00001)