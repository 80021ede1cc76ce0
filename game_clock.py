from __future__ import annotations

import time


def timestamp() -> int:
    """Milliseconds since the UNIX epoch."""
    return time.time_ns() // 1_000_000


def seconds_to_millis(seconds: int) -> int:
    return seconds * 1000
