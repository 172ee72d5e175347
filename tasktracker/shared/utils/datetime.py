"""
Datetime utilities for task timestamps.

Task timestamps are naive (no timezone offset on the wire) and expressed in
UTC. Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC time as a naive datetime truncated to whole seconds.

    Truncation keeps stored values identical to what the API renders
    (yyyy-MM-ddTHH:mm:ss), so a value read back compares equal to the one written.

    Returns:
        Naive datetime in UTC, microsecond == 0
    """
    return datetime.now(UTC).replace(tzinfo=None, microsecond=0)


def to_naive_utc(dt: datetime | None) -> datetime | None:
    """
    Normalize a datetime for comparison against naive task columns.

    - If None, returns None
    - If naive, returns it unchanged (already wall-clock UTC)
    - If aware, converts to UTC and drops the tzinfo

    Use at the API boundary for query parameters such as dueDateFrom.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        Naive UTC datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt

    return dt.astimezone(UTC).replace(tzinfo=None)
