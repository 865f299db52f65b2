"""Clock helpers.

This module provides:
- now: the current UTC datetime
- to_millis: datetime to milliseconds since the Unix epoch, clamped at the epoch
- from_millis: milliseconds since the Unix epoch to a UTC datetime
"""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def now() -> datetime:
    """Reads the wall clock."""
    return datetime.now(UTC)


def to_millis(moment: datetime) -> int:
    """Counts whole milliseconds between the epoch and ``moment``.

    Naive datetimes are treated as UTC. Moments before the epoch give 0.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    delta = moment - EPOCH
    if delta < timedelta(0):
        return 0
    return delta // timedelta(milliseconds=1)


def from_millis(millis: int) -> datetime:
    return EPOCH + timedelta(milliseconds=millis)
