"""
Datetime utilities.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """
    Current UTC time as a naive datetime.

    Timestamps are stored in naive UTC columns so they compare the same way
    on PostgreSQL and SQLite.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
