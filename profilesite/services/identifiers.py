"""
Timestamp-based identifiers and ISO timestamps.
"""

import time
from datetime import datetime, timezone

_last_ms = 0


def epoch_ms() -> int:
    """
    Current epoch milliseconds, strictly increasing within this process.

    Two calls in the same millisecond return consecutive values, so
    generated identifiers never collide locally.
    """
    global _last_ms
    now = int(time.time() * 1000)
    _last_ms = now if now > _last_ms else _last_ms + 1
    return _last_ms


def timestamp_id(prefix: str) -> str:
    """Build an identifier like `event1756988138911`."""
    return f"{prefix}{epoch_ms()}"


def now_iso() -> str:
    """UTC timestamp in ISO-8601 with milliseconds and a `Z` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
