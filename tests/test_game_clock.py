import time

from game_clock import seconds_to_millis, timestamp


def test_timestamp_is_epoch_millis():
    before = int(time.time() * 1000) - 1
    now = timestamp()
    assert isinstance(now, int)
    assert before <= now <= int(time.time() * 1000) + 1
    assert timestamp() >= now


def test_seconds_to_millis():
    assert seconds_to_millis(100) == 100_000
