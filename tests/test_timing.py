import time

from philosophers.timing import now_ms, precise_sleep


def test_now_ms_tracks_wall_clock():
    before = time.time() * 1000
    value = now_ms()
    after = time.time() * 1000
    assert before - 1 <= value <= after + 1


def test_now_ms_does_not_go_backwards():
    first = now_ms()
    second = now_ms()
    assert second >= first


def test_precise_sleep_waits_at_least_requested():
    start = now_ms()
    precise_sleep(30)
    assert now_ms() - start >= 30


def test_precise_sleep_zero_returns_quickly():
    start = now_ms()
    precise_sleep(0)
    elapsed = now_ms() - start
    assert 0 <= elapsed < 50


def test_precise_sleep_does_not_overshoot_much():
    start = now_ms()
    precise_sleep(20)
    elapsed = now_ms() - start
    assert 20 <= elapsed < 500