"""
Time-related utilities for the application.

All timestamps are generated in UTC and serialized using
ISO-8601 format with timezone information.
"""

import time
from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Return current UTC time in ISO-8601 format.

    Example:
        2024-01-15T10:42:31.123456+00:00

    This format is safe for:
    - Sorting
    - JSON serialization
    """
    return datetime.now(timezone.utc).isoformat()


def unix_time_ns() -> int:
    """Return the current time as integer nanoseconds since the epoch."""
    return time.time_ns()
